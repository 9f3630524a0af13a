from django.urls import path

from . import views

app_name = "suggestions"

urlpatterns = [
    path("", views.SuggestionCollectionView.as_view(), name="list"),
    path("<int:pk>/vote/", views.SuggestionVoteView.as_view(), name="vote"),
]
