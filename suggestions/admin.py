from django.contrib import admin

from . import models


class SuggestionVoteInline(admin.TabularInline):
    model = models.SuggestionVote
    extra = 0
    readonly_fields = ("user_identifier", "created_at")


@admin.register(models.PoliticianSuggestion)
class PoliticianSuggestionAdmin(admin.ModelAdmin):
    list_display = ("name", "quadrant", "grid_id", "votes", "suggested_by", "created_at")
    list_filter = ("quadrant",)
    search_fields = ("name", "suggested_by")
    ordering = ("-votes", "-created_at")
    inlines = [SuggestionVoteInline]


@admin.register(models.SuggestionVote)
class SuggestionVoteAdmin(admin.ModelAdmin):
    list_display = ("suggestion", "user_identifier", "created_at")
    search_fields = ("suggestion__name", "user_identifier")
