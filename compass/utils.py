from __future__ import annotations

from .constants import QUADRANT_LABELS, normalize_language


def format_score(score: float) -> str:
    """Signed one-decimal rendering used on result cards (``+3.5``, ``-2.0``)."""
    if score > 0:
        return f"+{score:.1f}"
    if score == 0:
        return "0.0"
    return f"{score:.1f}"


def get_quadrant_label(quadrant: str, language: str | None = None) -> str:
    labels = QUADRANT_LABELS[normalize_language(language)]
    return labels.get(quadrant, quadrant)
