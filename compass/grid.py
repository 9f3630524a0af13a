"""
Discretise normalized scores onto the 10×10 compass grid.

Row 0 is the authoritarian edge and column 0 the economic left, so a grid
rendered row-major from the top left reads like the usual compass.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass

from .constants import (
    GRID_DESCRIPTIONS,
    GRID_SIZE,
    INTENSITY_LABELS,
    QUADRANT_SIZE,
    SCORE_MAX,
    SCORE_MIN,
    Quadrant,
)


@dataclass(frozen=True)
class GridPosition:
    x: int
    y: int
    block: int
    quadrant: str
    quadrant_block: int

    def to_dict(self) -> dict:
        data = asdict(self)
        data["quadrant"] = str(self.quadrant)
        return data


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def score_to_grid_position(score: float) -> int:
    """Map a score in [-10, 10] to a grid index in [0, 9]."""
    clamped = clamp(score, SCORE_MIN, SCORE_MAX)
    position = math.floor((clamped + 10) / 2)
    # +10 would otherwise land in a non-existent eleventh column.
    return int(clamp(position, 0, GRID_SIZE - 1))


def grid_quadrant(x: int, y: int) -> tuple[str, int]:
    """Return the 4-way quadrant of a cell and its row-major rank inside it."""
    if x < QUADRANT_SIZE and y < QUADRANT_SIZE:
        return Quadrant.AUTHORITARIAN_LEFT, y * QUADRANT_SIZE + x
    if x >= QUADRANT_SIZE and y < QUADRANT_SIZE:
        return Quadrant.AUTHORITARIAN_RIGHT, y * QUADRANT_SIZE + (x - QUADRANT_SIZE)
    if x < QUADRANT_SIZE and y >= QUADRANT_SIZE:
        return Quadrant.LIBERTARIAN_LEFT, (y - QUADRANT_SIZE) * QUADRANT_SIZE + x
    return (
        Quadrant.LIBERTARIAN_RIGHT,
        (y - QUADRANT_SIZE) * QUADRANT_SIZE + (x - QUADRANT_SIZE),
    )


def calculate_grid_position(economic: float, social: float) -> GridPosition:
    x = score_to_grid_position(economic)
    # Higher social (more authoritarian) scores sit on lower rows.
    y = (GRID_SIZE - 1) - score_to_grid_position(social)
    quadrant, quadrant_block = grid_quadrant(x, y)
    return GridPosition(
        x=x,
        y=y,
        block=y * GRID_SIZE + x,
        quadrant=quadrant,
        quadrant_block=quadrant_block,
    )


def get_block_info(block: int) -> dict:
    """Recover the cell coordinates and quadrant of a 0-99 block id."""
    x = block % GRID_SIZE
    y = block // GRID_SIZE
    quadrant, _ = grid_quadrant(x, y)
    return {"x": x, "y": y, "quadrant": str(quadrant)}


def describe_grid_position(position: GridPosition) -> str:
    intensity = min(position.quadrant_block // QUADRANT_SIZE, len(INTENSITY_LABELS) - 1)
    return f"{INTENSITY_LABELS[intensity]} {GRID_DESCRIPTIONS[position.quadrant]}"
