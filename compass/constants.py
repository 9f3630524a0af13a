from __future__ import annotations

from django.db import models

ECONOMIC = "economic"
SOCIAL = "social"
AXES = (ECONOMIC, SOCIAL)

LANGUAGES = ("en", "si")
DEFAULT_LANGUAGE = "en"

# Forced choice: there is no neutral answer.
ANSWER_VALUES = (-2, -1, 1, 2)
MAX_ANSWER_VALUE = 2

SCORE_MIN = -10.0
SCORE_MAX = 10.0
CENTRIST_THRESHOLD = 1.0

GRID_SIZE = 10
QUADRANT_SIZE = 5

# Figures are matched by straight-line distance on the -10..10 plane.
CLOSE_MATCH_DISTANCE = 3.0


class Quadrant(models.TextChoices):
    LIBERTARIAN_LEFT = "libertarian-left", "Libertarian Left"
    LIBERTARIAN_RIGHT = "libertarian-right", "Libertarian Right"
    AUTHORITARIAN_LEFT = "authoritarian-left", "Authoritarian Left"
    AUTHORITARIAN_RIGHT = "authoritarian-right", "Authoritarian Right"
    CENTRIST = "centrist", "Centrist"


QUADRANT_LABELS = {
    "en": {
        Quadrant.LIBERTARIAN_LEFT: "Libertarian Socialist",
        Quadrant.LIBERTARIAN_RIGHT: "Libertarian Capitalist",
        Quadrant.AUTHORITARIAN_LEFT: "Authoritarian Socialist",
        Quadrant.AUTHORITARIAN_RIGHT: "Authoritarian Capitalist",
        Quadrant.CENTRIST: "Centrist",
    },
    "si": {
        Quadrant.LIBERTARIAN_LEFT: "NPP ජෙප්පෙක්",
        Quadrant.LIBERTARIAN_RIGHT: "ටොයියෙක්",
        Quadrant.AUTHORITARIAN_LEFT: "පරණ ජෙප්පෙක්",
        Quadrant.AUTHORITARIAN_RIGHT: "බයියෙක්",
        Quadrant.CENTRIST: "මධ්‍යස්ථවාදී පොරක්",
    },
}

GRID_DESCRIPTIONS = {
    Quadrant.AUTHORITARIAN_LEFT: "Socialist with traditional values",
    Quadrant.AUTHORITARIAN_RIGHT: "Conservative capitalist",
    Quadrant.LIBERTARIAN_LEFT: "Progressive socialist",
    Quadrant.LIBERTARIAN_RIGHT: "Liberal capitalist",
}

INTENSITY_LABELS = ("Mild", "Moderate", "Strong", "Very Strong", "Extreme")


def normalize_language(value: str | None) -> str:
    """Return a supported language code, falling back to English."""
    if not value:
        return DEFAULT_LANGUAGE
    key = str(value).strip().lower()
    if key in LANGUAGES:
        return key
    return DEFAULT_LANGUAGE
