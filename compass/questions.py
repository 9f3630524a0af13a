"""
Static bilingual question bank.

Every statement sits on one axis. Agreeing with a normal statement pushes the
score towards the right (economic) or authoritarian (social) end; ``reversed``
statements are worded the other way round and have their answers negated.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from .constants import DEFAULT_LANGUAGE, ECONOMIC, SOCIAL, normalize_language

QUESTION_BANK_VERSION = "2024.1"
DEFAULT_QUESTIONS_PER_PAGE = 6


@dataclass(frozen=True)
class Question:
    id: int
    text: dict = field(hash=False, compare=False)
    category: str
    reversed: bool = False

    def prompt(self, language: str | None = None) -> str:
        language = normalize_language(language)
        return self.text.get(language) or self.text[DEFAULT_LANGUAGE]


QUESTIONS: tuple[Question, ...] = (
    # Economic
    Question(
        1,
        {
            "en": "A company should be able to hire and fire employees without government interference.",
            "si": "සමාගමකට රජයේ මැදිහත්වීමකින් තොරව සේවකයන් බඳවා ගැනීමට සහ සේවයෙන් පහ කිරීමට හැකි විය යුතුය.",
        },
        ECONOMIC,
    ),
    Question(
        2,
        {
            "en": "Free markets should be regulated to protect workers and consumers.",
            "si": "කම්කරුවන් සහ පාරිභෝගිකයන් ආරක්ෂා කිරීම සඳහා නිදහස් වෙලඳපල නියාමනය කළ යුතුය.",
        },
        ECONOMIC,
        reversed=True,
    ),
    Question(
        3,
        {
            "en": "Private healthcare is more efficient than government-run healthcare.",
            "si": "රජය විසින් පවත්වාගෙන යනු ලබන සෞඛ්‍ය සේවාවට වඩා පුද්ගලික සෞඛ්‍ය සේවාව වඩා කාර්යක්ෂම ය.",
        },
        ECONOMIC,
    ),
    Question(
        4,
        {
            "en": "The government should provide universal basic income to all citizens.",
            "si": "රජය සියලුම පුරවැසියන්ට විශ්වීය මූලික ආදායමක් ලබා දිය යුතුය.",
        },
        ECONOMIC,
        reversed=True,
    ),
    Question(
        5,
        {
            "en": "High taxes on the wealthy are necessary for a fair society.",
            "si": "සාධාරණ සමාජයක් සඳහා ධනවතුන්ට ඉහළ බදු අවශ්‍ය වේ.",
        },
        ECONOMIC,
        reversed=True,
    ),
    Question(
        6,
        {
            "en": "Private property rights are fundamental to economic freedom.",
            "si": "ආර්ථික නිදහස සඳහා පුද්ගලික දේපල අයිතිවාසිකම් මූලික වේ.",
        },
        ECONOMIC,
    ),
    Question(
        7,
        {
            "en": "Labor unions do more harm than good to the economy.",
            "si": "කම්කරු සංගම් ආර්ථිකයට යහපත්ට වඩා අහිතකර ය.",
        },
        ECONOMIC,
    ),
    Question(
        8,
        {
            "en": "The government should own and control major industries.",
            "si": "රජය ප්‍රධාන කර්මාන්ත හිමි කර ගෙන පාලනය කළ යුතුය.",
        },
        ECONOMIC,
        reversed=True,
    ),
    Question(
        9,
        {
            "en": "Free trade benefits all countries involved.",
            "si": "නිදහස් වෙළඳාම සම්බන්ධ සියලුම රටවලට ප්‍රයෝජනවත් වේ.",
        },
        ECONOMIC,
    ),
    Question(
        10,
        {
            "en": "Economic inequality is a necessary part of a competitive society.",
            "si": "ආර්ථික අසමානතාවය තරඟකාරී සමාජයක අත්‍යවශ්‍ය කොටසකි.",
        },
        ECONOMIC,
    ),
    Question(
        11,
        {
            "en": "The minimum wage should be abolished to allow market forces to work.",
            "si": "වෙළඳපල බලවේගයන්ට ක්‍රියා කිරීමට ඉඩ දීම සඳහා අවම වැටුප අහෝසි කළ යුතුය.",
        },
        ECONOMIC,
    ),
    Question(
        12,
        {
            "en": "Government spending on social programs should be increased.",
            "si": "සමාජ වැඩසටහන් සඳහා රජයේ වියදම් වැඩි කළ යුතුය.",
        },
        ECONOMIC,
        reversed=True,
    ),
    # Social
    Question(
        13,
        {
            "en": "The government should have the right to monitor private communications for security purposes.",
            "si": "ආරක්ෂක අරමුණු සඳහා පුද්ගලික සන්නිවේදනයන් අධීක්ෂණය කිරීමේ අයිතිය රජයට තිබිය යුතුය.",
        },
        SOCIAL,
    ),
    Question(
        14,
        {
            "en": "Individual freedom should be prioritized over collective security.",
            "si": "සාමූහික ආරක්ෂාවට වඩා පුද්ගල නිදහසට ප්‍රමුඛත්වය දිය යුතුය.",
        },
        SOCIAL,
        reversed=True,
    ),
    Question(
        15,
        {
            "en": "Traditional values should be preserved and promoted by society.",
            "si": "සම්ප්‍රදායික වටිනාකම් සමාජය විසින් සංරක්ෂණය කර ප්‍රවර්ධනය කළ යුතුය.",
        },
        SOCIAL,
    ),
    Question(
        16,
        {
            "en": "People should be free to live their lives as they choose, even if it goes against social norms.",
            "si": "එය සමාජ සාමාන්‍යයන්ට විරුද්ධ වුවද මිනිසුන්ට තමන් කැමති ආකාරයට ජීවත් වීමට නිදහස තිබිය යුතුය.",
        },
        SOCIAL,
        reversed=True,
    ),
    Question(
        17,
        {
            "en": "Strict law enforcement is necessary to maintain social order.",
            "si": "සමාජ සාමය පවත්වා ගැනීම සඳහා දැඩි නීති ක්‍රියාත්මක කිරීම අවශ්‍ය වේ.",
        },
        SOCIAL,
    ),
    Question(
        18,
        {
            "en": "Censorship of offensive content in media is sometimes justified.",
            "si": "මාධ්‍යයේ අහිතකර අන්තර්ගත වාරණය කිරීම සමහර විට යුක්ති සහගත ය.",
        },
        SOCIAL,
    ),
    Question(
        19,
        {
            "en": "Religious beliefs should not influence government policy.",
            "si": "ආගමික විශ්වාස රජයේ ප්‍රතිපත්තිවලට බලපාන්නේ නැත.",
        },
        SOCIAL,
        reversed=True,
    ),
    Question(
        20,
        {
            "en": "Citizens should accept government authority without question.",
            "si": "පුරවැසියන් ප්‍රශ්න නොකර රජයේ අධිකාරිත්වය පිළිගත යුතුය.",
        },
        SOCIAL,
    ),
    Question(
        21,
        {
            "en": "Civil disobedience is acceptable when laws are unjust.",
            "si": "නීති අසාධාරණ වූ විට සිවිල් අකීකරුකම පිළිගත හැකිය.",
        },
        SOCIAL,
        reversed=True,
    ),
    Question(
        22,
        {
            "en": "The death penalty is an appropriate punishment for serious crimes.",
            "si": "බරපතළ අපරාධ සඳහා මරණ දණුවම සුදුසු දඬුවමකි.",
        },
        SOCIAL,
    ),
    Question(
        23,
        {
            "en": "Immigration should be strictly controlled to preserve national identity.",
            "si": "ජාතික අනන්‍යතාවය ආරක්ෂා කිරීම සඳහා ආගමනය දැඩි ලෙස පාලනය කළ යුතුය.",
        },
        SOCIAL,
    ),
    Question(
        24,
        {
            "en": "Personal drug use should be decriminalized.",
            "si": "පුද්ගලික මත්ද්‍රව්‍ය භාවිතය අපරාධකරණයෙන් ඉවත් කළ යුතුය.",
        },
        SOCIAL,
        reversed=True,
    ),
)


def questions_for_axis(category: str, questions: Sequence[Question] = QUESTIONS) -> list[Question]:
    return [question for question in questions if question.category == category]


def get_questions_for_page(
    page: int, per_page: int = DEFAULT_QUESTIONS_PER_PAGE, questions: Sequence[Question] = QUESTIONS
) -> list[Question]:
    """Return the 1-indexed ``page`` of the quiz; pages past the end are empty."""
    if page < 1 or per_page < 1:
        return []
    start = (page - 1) * per_page
    return list(questions[start : start + per_page])


def get_total_pages(per_page: int = DEFAULT_QUESTIONS_PER_PAGE, questions: Sequence[Question] = QUESTIONS) -> int:
    if per_page < 1:
        return 0
    return math.ceil(len(questions) / per_page)
