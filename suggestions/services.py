from __future__ import annotations

import logging

from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils.crypto import get_random_string

from .models import PoliticianSuggestion, SuggestionVote

logger = logging.getLogger(__name__)

SUGGESTER_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"


class DuplicateVoteError(Exception):
    """Raised when the same identifier votes twice on a suggestion."""


def serialize_suggestion(suggestion: PoliticianSuggestion) -> dict:
    return {
        "id": suggestion.id,
        "name": suggestion.name,
        "quadrant": suggestion.quadrant,
        "x": suggestion.x_coordinate,
        "y": suggestion.y_coordinate,
        "gridId": suggestion.grid_id,
        "votes": suggestion.votes,
        "suggestedBy": suggestion.suggested_by,
        "createdAt": suggestion.created_at.isoformat(),
    }


def list_suggestions() -> list[dict]:
    queryset = PoliticianSuggestion.objects.order_by("-votes", "-created_at")
    return [serialize_suggestion(suggestion) for suggestion in queryset]


def _anonymous_suggester() -> str:
    return f"User_{get_random_string(9, allowed_chars=SUGGESTER_ALPHABET)}"


@transaction.atomic
def create_suggestion(
    *,
    name: str,
    quadrant: str,
    x: int,
    y: int,
    grid_id: int,
    user_identifier: str,
) -> PoliticianSuggestion:
    """Create a suggestion that starts with the suggester's own vote."""

    suggestion = PoliticianSuggestion.objects.create(
        name=name.strip(),
        quadrant=quadrant,
        x_coordinate=x,
        y_coordinate=y,
        grid_id=grid_id,
        votes=1,
        suggested_by=_anonymous_suggester(),
    )
    SuggestionVote.objects.create(suggestion=suggestion, user_identifier=user_identifier)
    logger.info("Created suggestion %s for cell %s", suggestion.pk, grid_id)
    return suggestion


def cast_vote(*, suggestion: PoliticianSuggestion, user_identifier: str) -> PoliticianSuggestion:
    """Record a vote and bump the counter, refusing repeat votes."""

    with transaction.atomic():
        if SuggestionVote.objects.filter(
            suggestion=suggestion, user_identifier=user_identifier
        ).exists():
            raise DuplicateVoteError("You have already voted on this suggestion")
        try:
            with transaction.atomic():
                SuggestionVote.objects.create(
                    suggestion=suggestion, user_identifier=user_identifier
                )
        except IntegrityError as exc:
            raise DuplicateVoteError("You have already voted on this suggestion") from exc
        PoliticianSuggestion.objects.filter(pk=suggestion.pk).update(votes=F("votes") + 1)

    suggestion.refresh_from_db(fields=["votes"])
    logger.info("Recorded vote on suggestion %s (now %s)", suggestion.pk, suggestion.votes)
    return suggestion
