from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings
from django.db.models import Count

from .avatars import DEFAULT_AVATAR
from .constants import Quadrant
from .models import UserResult

logger = logging.getLogger(__name__)

RECENT_LIMIT = getattr(settings, "COMPASS_RECENT_LIMIT", 10)
RESULTS_PAGE_SIZE = getattr(settings, "COMPASS_RESULTS_PAGE_SIZE", 20)


@dataclass
class ResultPage:
    results: list[dict]
    total: int
    total_pages: int

    def to_dict(self) -> dict:
        return {
            "results": self.results,
            "total": self.total,
            "totalPages": self.total_pages,
        }


def _to_decimal(score: float) -> Decimal:
    return Decimal(str(score)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def serialize_result(result: UserResult) -> dict:
    return {
        "id": str(result.uuid),
        "name": result.name,
        "economic_score": float(result.economic_score),
        "social_score": float(result.social_score),
        "quadrant": result.quadrant,
        "avatar": result.avatar or DEFAULT_AVATAR,
        "created_at": result.created_at.isoformat(),
    }


def save_user_result(
    *,
    name: str,
    economic_score: float,
    social_score: float,
    quadrant: str,
    avatar: str = DEFAULT_AVATAR,
) -> UserResult:
    """Publish a quiz result to the community board."""

    result = UserResult.objects.create(
        name=name.strip(),
        economic_score=_to_decimal(economic_score),
        social_score=_to_decimal(social_score),
        quadrant=quadrant,
        avatar=avatar or DEFAULT_AVATAR,
    )
    logger.info(
        "Saved community result %s (%s, %s/%s)",
        result.uuid,
        result.quadrant,
        result.economic_score,
        result.social_score,
    )
    return result


def get_recent_results(limit: int = RECENT_LIMIT, offset: int = 0) -> list[dict]:
    queryset = UserResult.objects.newest_first()[offset : offset + limit]
    return [serialize_result(result) for result in queryset]


def get_results_with_pagination(
    page: int = 1, limit: int = RESULTS_PAGE_SIZE, search: str | None = None
) -> ResultPage:
    queryset = UserResult.objects.search(search)
    total = queryset.count()
    offset = (page - 1) * limit
    rows = queryset.newest_first()[offset : offset + limit]
    return ResultPage(
        results=[serialize_result(result) for result in rows],
        total=total,
        total_pages=math.ceil(total / limit),
    )


def get_total_user_count() -> int:
    return UserResult.objects.count()


def get_quadrant_distribution() -> dict[str, int]:
    distribution = {value: 0 for value in Quadrant.values}
    rows = UserResult.objects.order_by().values("quadrant").annotate(total=Count("id"))
    for row in rows:
        if row["quadrant"] in distribution:
            distribution[row["quadrant"]] = row["total"]
    return distribution
