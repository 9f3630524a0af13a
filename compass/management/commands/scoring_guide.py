from __future__ import annotations

import json

from django.core.management.base import BaseCommand, CommandError

from compass.constants import AXES
from compass.questions import questions_for_axis
from compass.scoring import Answer, score_walkthrough
from compass.utils import format_score, get_quadrant_label

ANSWER_LABELS = [
    (-2, "Strongly Disagree"),
    (-1, "Disagree"),
    (1, "Agree"),
    (2, "Strongly Agree"),
]

EXAMPLES = {
    "libertarian-right": {
        "description": "Strong libertarian right (liberal capitalist)",
        "answers": [
            {"questionId": 1, "value": 2},
            {"questionId": 2, "value": -2},
            {"questionId": 5, "value": -2},
            {"questionId": 14, "value": 2},
            {"questionId": 13, "value": -2},
            {"questionId": 16, "value": 2},
        ],
    },
    "authoritarian-left": {
        "description": "Strong authoritarian left (authoritarian socialist)",
        "answers": [
            {"questionId": 1, "value": -2},
            {"questionId": 2, "value": 2},
            {"questionId": 5, "value": 2},
            {"questionId": 14, "value": -2},
            {"questionId": 13, "value": 2},
            {"questionId": 15, "value": 2},
        ],
    },
}


class Command(BaseCommand):
    help = "Explain how answers are scored, with a walkthrough of example or supplied answers."

    def add_arguments(self, parser):
        parser.add_argument(
            "--example",
            choices=sorted(EXAMPLES),
            help="Walk through one of the bundled example answer sets.",
        )
        parser.add_argument(
            "--answers",
            help='JSON list of answers, e.g. \'[{"questionId": 1, "value": 2}]\'.',
        )
        parser.add_argument("--language", default="en", choices=["en", "si"])

    def handle(self, *args, **options):
        self._write_guide()

        answer_sets = []
        if options.get("answers"):
            answer_sets.append(("Supplied answers", self._parse_answers(options["answers"])))
        elif options.get("example"):
            example = EXAMPLES[options["example"]]
            answer_sets.append((example["description"], self._parse_answers(example["answers"])))
        else:
            for example in EXAMPLES.values():
                answer_sets.append((example["description"], self._parse_answers(example["answers"])))

        for title, answers in answer_sets:
            self._write_walkthrough(title, answers, options["language"])

    def _parse_answers(self, raw) -> list[Answer]:
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise CommandError(f"--answers is not valid JSON: {exc}") from exc
        if not isinstance(raw, list):
            raise CommandError("--answers must be a JSON list.")
        try:
            return [Answer(question_id=int(item["questionId"]), value=int(item["value"])) for item in raw]
        except (KeyError, TypeError, ValueError) as exc:
            raise CommandError(f"Malformed answer entry: {exc}") from exc

    def _write_guide(self):
        self.stdout.write(self.style.MIGRATE_HEADING("Political compass scoring guide"))
        self.stdout.write("Answer values:")
        for value, label in ANSWER_LABELS:
            self.stdout.write(f"  {label}: {value:+d}")
        self.stdout.write("Reversed statements flip the sign of the answer.")
        for axis in AXES:
            reversed_ids = [str(q.id) for q in questions_for_axis(axis) if q.reversed]
            self.stdout.write(f"  Reversed {axis} questions: {', '.join(reversed_ids)}")

    def _write_walkthrough(self, title: str, answers: list[Answer], language: str):
        walkthrough = score_walkthrough(answers, language=language)
        self.stdout.write("")
        self.stdout.write(self.style.MIGRATE_HEADING(title))
        for axis in AXES:
            for row in walkthrough[f"{axis}_breakdown"]:
                flag = " (reversed)" if row["is_reversed"] else ""
                self.stdout.write(
                    f"  [{axis}] Q{row['question_id']}{flag}: answer {row['answer']:+d} -> {row['points']:+d}"
                )
            self.stdout.write(f"  {axis} total: {walkthrough['totals'][axis]:+d}")
        scores = walkthrough["final_scores"]
        position = walkthrough["grid_position"]
        self.stdout.write(
            self.style.SUCCESS(
                f"Economic {format_score(scores['economic'])}, social {format_score(scores['social'])} "
                f"-> {get_quadrant_label(walkthrough['quadrant'], language)} "
                f"(block {position['block']}, x={position['x']}, y={position['y']})"
            )
        )
