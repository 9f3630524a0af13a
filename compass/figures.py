"""
Curated political figures placed on the compass grid.

Figure coordinates use the score plane (-10..10 on both axes) and sit on cell
centres: ``x = col * 2 - 9`` and ``y = 9 - row * 2``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .constants import CLOSE_MATCH_DISTANCE, GRID_SIZE, SCORE_MAX, SCORE_MIN
from .grid import clamp

MATCH_EXACT = "exact"
MATCH_CLOSE = "close"


@dataclass(frozen=True)
class PoliticalFigure:
    x: int
    y: int
    image: str
    name: str

    @property
    def block(self) -> int:
        return get_grid_id_from_coordinates(self.x, self.y)

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "image": self.image,
            "name": self.name,
            "block": self.block,
        }


@dataclass(frozen=True)
class FigureMatch:
    figure: PoliticalFigure
    match_type: str
    distance: float

    def to_dict(self) -> dict:
        return {
            "figure": self.figure.to_dict(),
            "matchType": self.match_type,
            "distance": self.distance,
        }


POLITICAL_FIGURES: tuple[PoliticalFigure, ...] = (
    # Authoritarian left
    PoliticalFigure(-9, 5, "tilvin.jpg", "Tilvin Silva"),
    PoliticalFigure(-7, 7, "mathini.jpg", "Sirimawo Bandaranyake"),
    PoliticalFigure(-5, 7, "dayan.jpg", "Dayan Jayatilaka"),
    # Authoritarian right
    PoliticalFigure(1, 7, "mahinda.jpeg", "Mahinda Rajapaksa"),
    PoliticalFigure(7, 7, "nalin.jpeg", "Nalin De Silva"),
    PoliticalFigure(7, 5, "thamalu.jpg", "Thamalu Piyadigama"),
    PoliticalFigure(1, 3, "upali_kohomban.jpg", "Upali Kohomban"),
    PoliticalFigure(9, 9, "JR.jpg", "JR Jayawardena"),
    PoliticalFigure(5, 3, "swrd.jpg", "S.W.R.D. Bandaranaike"),
    PoliticalFigure(9, 5, "eranda.jpg", "Eranda Ginige"),
    PoliticalFigure(5, 1, "samila.jpeg", "Samila Muthumini"),
    PoliticalFigure(5, 3, "anurudda.jpeg", "Anuruddha Pradeep"),
    # Libertarian left
    PoliticalFigure(-1, -1, "bruno.jpeg", "Bruno Diwakara"),
    PoliticalFigure(-3, -5, "wangeesa.jpeg", "Vangeesa Sumanasekara"),
    PoliticalFigure(-9, -3, "pubudu_jagoda.jpg", "Pubudu Jagoda"),
    PoliticalFigure(-9, -9, "melani.jpeg", "Melani Gunathilake"),
    PoliticalFigure(-3, -5, "harini.jpg", "Harini Amarasooriya"),
    PoliticalFigure(-9, -7, "sandakath.jpg", "Sandakath Mahagamaarachchi"),
    PoliticalFigure(-1, -5, "nirmal_dewasiri.jpg", "Nirmal Dewasiri"),
    PoliticalFigure(-7, -7, "deepthi.jpg", "Deepthi Kumara"),
    PoliticalFigure(-5, -5, "anton.jpeg", "Anton Fernando"),
    # Libertarian right
    PoliticalFigure(5, -3, "sajithpremadasa.jpg", "Sajith Premdasa"),
    PoliticalFigure(7, -5, "ranil.jpg", "Ranil Wickremesinghe"),
    PoliticalFigure(7, -1, "iraj.jpg", "Iraj"),
    PoliticalFigure(7, -9, "chinthana.jpg", "Chinthana Darmadasa"),
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp_index(value: int) -> int:
    return max(0, min(GRID_SIZE - 1, value))


def _to_plane(value: float) -> float:
    """Clamp a coordinate onto the score plane; NaN is treated as the centre."""
    if math.isnan(value):
        return 0.0
    return clamp(value, SCORE_MIN, SCORE_MAX)


def get_grid_id_from_coordinates(x: float, y: float) -> int:
    x, y = _to_plane(x), _to_plane(y)
    col = _clamp_index(_round_half_up((x + 9) / 2))
    row = _clamp_index(_round_half_up((9 - y) / 2))
    return row * GRID_SIZE + col


def cell_coordinates(block: int) -> tuple[int, int]:
    """Centre of a grid cell on the score plane."""
    row, col = divmod(block, GRID_SIZE)
    return col * 2 - 9, 9 - row * 2


def occupied_blocks(figures: Sequence[PoliticalFigure] = POLITICAL_FIGURES) -> set[int]:
    return {figure.block for figure in figures}


def figure_for_block(
    block: int, figures: Sequence[PoliticalFigure] = POLITICAL_FIGURES
) -> PoliticalFigure | None:
    for figure in figures:
        if figure.block == block:
            return figure
    return None


def find_matching_figure(
    x: float, y: float, figures: Sequence[PoliticalFigure] = POLITICAL_FIGURES
) -> FigureMatch | None:
    """
    Find the figure sharing the cell of ``(x, y)``, or the nearest one.

    Exact matches win and report a distance of 0. Otherwise the closest
    figure by Euclidean distance is returned when it lies within
    ``CLOSE_MATCH_DISTANCE``; anything further away yields ``None``.
    """
    x, y = _to_plane(x), _to_plane(y)
    exact = figure_for_block(get_grid_id_from_coordinates(x, y), figures)
    if exact is not None:
        return FigureMatch(figure=exact, match_type=MATCH_EXACT, distance=0.0)

    closest: PoliticalFigure | None = None
    min_distance = math.inf
    for figure in figures:
        distance = math.hypot(figure.x - x, figure.y - y)
        if distance < min_distance:
            closest = figure
            min_distance = distance

    if closest is not None and min_distance <= CLOSE_MATCH_DISTANCE:
        return FigureMatch(figure=closest, match_type=MATCH_CLOSE, distance=min_distance)
    return None
