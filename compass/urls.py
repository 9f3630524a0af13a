from django.urls import path

from . import views

app_name = "compass"

urlpatterns = [
    path("results/", views.ResultCollectionView.as_view(), name="results"),
    path("stats/", views.StatsView.as_view(), name="stats"),
    path("questions/", views.QuestionListView.as_view(), name="questions"),
    path("score/", views.ScoreView.as_view(), name="score"),
    path("figures/", views.FigureListView.as_view(), name="figures"),
    path("figures/match/", views.FigureMatchView.as_view(), name="figure-match"),
    path("avatars/", views.AvatarListView.as_view(), name="avatars"),
]
