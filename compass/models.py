import uuid

from django.db import models

from .avatars import DEFAULT_AVATAR
from .constants import Quadrant


class TimeStampedModel(models.Model):
    """Base class to track creation and modification times."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class UserResultQuerySet(models.QuerySet):
    def newest_first(self):
        return self.order_by("-created_at", "-id")

    def search(self, term: str | None):
        term = (term or "").strip()
        if not term:
            return self
        return self.filter(name__icontains=term)


class UserResult(TimeStampedModel):
    """A quiz result a user chose to publish to the community board."""

    uuid = models.UUIDField(default=uuid.uuid4, editable=False, unique=True)
    name = models.CharField(max_length=50)
    economic_score = models.DecimalField(max_digits=3, decimal_places=1)
    social_score = models.DecimalField(max_digits=3, decimal_places=1)
    quadrant = models.CharField(max_length=24, choices=Quadrant.choices)
    avatar = models.CharField(max_length=120, default=DEFAULT_AVATAR)

    objects = UserResultQuerySet.as_manager()

    class Meta:
        ordering = ("-created_at",)
        indexes = [
            models.Index(fields=["created_at"], name="compass_use_created_0b1f2c_idx"),
            models.Index(fields=["quadrant"], name="compass_use_quadran_5d8e41_idx"),
        ]

    def __str__(self):
        return f"{self.name} · {self.get_quadrant_display()}"
