from django.db import models

from compass.constants import Quadrant
from compass.models import TimeStampedModel


class PoliticianSuggestion(TimeStampedModel):
    """A community proposal to place a political figure on an empty cell."""

    name = models.CharField(max_length=120)
    quadrant = models.CharField(max_length=24, choices=Quadrant.choices)
    x_coordinate = models.SmallIntegerField()
    y_coordinate = models.SmallIntegerField()
    grid_id = models.PositiveSmallIntegerField(db_index=True)
    votes = models.PositiveIntegerField(default=1)
    suggested_by = models.CharField(max_length=40)

    class Meta:
        ordering = ("-votes", "-created_at")

    def __str__(self):
        return f"{self.name} · cell {self.grid_id}"


class SuggestionVote(TimeStampedModel):
    """One vote per browser identifier per suggestion."""

    suggestion = models.ForeignKey(
        PoliticianSuggestion, related_name="vote_records", on_delete=models.CASCADE
    )
    user_identifier = models.CharField(max_length=120)

    class Meta:
        unique_together = ("suggestion", "user_identifier")
        ordering = ("-created_at",)

    def __str__(self):
        return f"Vote · {self.suggestion} · {self.user_identifier}"
