from django.contrib import admin

from . import models


@admin.register(models.UserResult)
class UserResultAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "quadrant",
        "economic_score",
        "social_score",
        "avatar",
        "created_at",
    )
    list_filter = ("quadrant",)
    search_fields = ("name",)
    readonly_fields = ("uuid", "created_at", "updated_at")
    ordering = ("-created_at",)
