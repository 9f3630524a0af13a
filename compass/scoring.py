from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from .constants import (
    AXES,
    CENTRIST_THRESHOLD,
    ECONOMIC,
    MAX_ANSWER_VALUE,
    SCORE_MAX,
    SCORE_MIN,
    SOCIAL,
    Quadrant,
)
from .grid import calculate_grid_position, clamp
from .questions import QUESTIONS, Question, questions_for_axis


@dataclass(frozen=True)
class Answer:
    question_id: int
    value: int


@dataclass(frozen=True)
class Result:
    economic: float
    social: float
    quadrant: str

    def to_dict(self) -> dict:
        return {
            "economic": self.economic,
            "social": self.social,
            "quadrant": str(self.quadrant),
        }


def round_score(value: float) -> float:
    """Round to one decimal place with ties going up, like ``Math.round``."""
    return math.floor(value * 10 + 0.5) / 10


def get_quadrant(economic: float, social: float) -> str:
    if abs(economic) <= CENTRIST_THRESHOLD and abs(social) <= CENTRIST_THRESHOLD:
        return Quadrant.CENTRIST
    # A zero on either axis counts as the left/libertarian side.
    if economic <= 0 and social <= 0:
        return Quadrant.LIBERTARIAN_LEFT
    if economic > 0 and social <= 0:
        return Quadrant.LIBERTARIAN_RIGHT
    if economic <= 0 and social > 0:
        return Quadrant.AUTHORITARIAN_LEFT
    return Quadrant.AUTHORITARIAN_RIGHT


def axis_divisor(category: str, questions: Sequence[Question] = QUESTIONS) -> int:
    """Largest absolute raw total an axis can reach with the given bank."""
    return len(questions_for_axis(category, questions)) * MAX_ANSWER_VALUE


def effective_value(question: Question, value: int) -> int:
    return -value if question.reversed else value


def _latest_answers(answers: Iterable[Answer]) -> list[Answer]:
    latest: dict[int, Answer] = {}
    for answer in answers:
        latest[answer.question_id] = answer
    return list(latest.values())


def _normalize(total: int, divisor: int) -> float:
    if not divisor:
        return 0.0
    return clamp(total / divisor * 10, SCORE_MIN, SCORE_MAX)


def calculate_score(answers: Iterable[Answer], questions: Sequence[Question] = QUESTIONS) -> Result:
    """
    Convert Likert answers into a two-axis result.

    Answers whose question id is not in ``questions`` are ignored. The divisor
    for each axis is fixed by the bank, so a partial quiz still produces a
    score (pulled towards the centre) instead of failing.
    """
    question_map = {question.id: question for question in questions}
    totals = {axis: 0 for axis in AXES}
    for answer in _latest_answers(answers):
        question = question_map.get(answer.question_id)
        if question is None:
            continue
        if question.category in totals:
            totals[question.category] += effective_value(question, answer.value)

    economic = round_score(_normalize(totals[ECONOMIC], axis_divisor(ECONOMIC, questions)))
    social = round_score(_normalize(totals[SOCIAL], axis_divisor(SOCIAL, questions)))
    return Result(economic=economic, social=social, quadrant=get_quadrant(economic, social))


def is_quiz_complete(answers: Iterable[Answer], questions: Sequence[Question] = QUESTIONS) -> bool:
    answered = {answer.question_id for answer in answers}
    return all(question.id in answered for question in questions)


def get_progress(answers: Iterable[Answer], questions: Sequence[Question] = QUESTIONS) -> int:
    """Percentage of the bank answered, rounded to a whole number."""
    if not questions:
        return 0
    known = {question.id for question in questions}
    answered = {answer.question_id for answer in answers} & known
    return math.floor(len(answered) / len(questions) * 100 + 0.5)


def score_walkthrough(
    answers: Iterable[Answer], questions: Sequence[Question] = QUESTIONS, language: str = "en"
) -> dict:
    """Explain how each answer contributed to the final scores."""
    answers = _latest_answers(answers)
    question_map = {question.id: question for question in questions}
    breakdown: dict[str, list[dict]] = {ECONOMIC: [], SOCIAL: []}
    for answer in answers:
        question = question_map.get(answer.question_id)
        if question is None or question.category not in breakdown:
            continue
        breakdown[question.category].append(
            {
                "question_id": question.id,
                "question": question.prompt(language),
                "answer": answer.value,
                "points": effective_value(question, answer.value),
                "is_reversed": question.reversed,
            }
        )

    result = calculate_score(answers, questions)
    return {
        "economic_breakdown": breakdown[ECONOMIC],
        "social_breakdown": breakdown[SOCIAL],
        "totals": {
            ECONOMIC: sum(row["points"] for row in breakdown[ECONOMIC]),
            SOCIAL: sum(row["points"] for row in breakdown[SOCIAL]),
        },
        "final_scores": {"economic": result.economic, "social": result.social},
        "quadrant": str(result.quadrant),
        "grid_position": calculate_grid_position(result.economic, result.social).to_dict(),
    }
