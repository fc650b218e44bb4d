"""
Name quality scoring.

Three independent metrics, each on a 0-100 scale:
- readability: length, internal case transitions and vowel balance
- context: whether the name is valid for its usage-site context
- semantic: how much of the expected meaning the name carries

They combine into ``overall = round(0.3*readability + 0.4*context + 0.3*semantic)``.
"""

import math
import re
from dataclasses import asdict, dataclass, replace
from typing import Optional

from . import constants
from .contexts import NamingContext

_CASE_TRANSITION = re.compile(r"[a-z][A-Z]")
_VOWELS = re.compile(r"[aeiouAEIOU]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class NameScore:
    """Overall score plus the three metrics it was computed from."""

    overall: int
    readability: int
    context: int
    semantic: float

    def with_overall(self, overall: int) -> "NameScore":
        return replace(self, overall=clamp_score(overall))

    def to_dict(self) -> dict:
        return asdict(self)


def clamp_score(value: float) -> int:
    return int(max(0, min(100, value)))


def round_half_up(value: float) -> int:
    # round() rounds halves to even; scores round halves up
    return int(math.floor(value + 0.5))


def count_case_transitions(name: str) -> int:
    """Number of lower-case to upper-case transitions ("showNewSection" -> 2)."""
    return len(_CASE_TRANSITION.findall(name))


def has_case_transition(name: str) -> bool:
    return _CASE_TRANSITION.search(name) is not None


def calculate_readability(name: str) -> int:
    score = 100

    if len(name) < constants.MIN_READABLE_LENGTH:
        score -= 20
    if len(name) > constants.MAX_READABLE_LENGTH:
        score -= 10

    score -= count_case_transitions(name) * 5

    low, high = constants.VOWEL_RATIO_RANGE
    vowel_ratio = len(_VOWELS.findall(name)) / len(name) if name else 0.0
    if vowel_ratio < low or vowel_ratio > high:
        score -= 10

    return clamp_score(score)


def check_context(name: str, context: Optional[NamingContext]) -> int:
    if context is None:
        return constants.NEUTRAL_SCORE
    return 100 if context.validate(name) else 0


def calculate_semantic(name: str, expected_meaning: Optional[str]) -> float:
    """
    Score how well ``name`` reflects ``expected_meaning``.

    Up to 50 points when either string contains the other, plus up to 50
    points for the share of meaning words found inside (or containing) a word
    of the name. Both sides are compared lower-case.
    """
    if not expected_meaning:
        return float(constants.NEUTRAL_SCORE)

    name_lower = name.lower()
    meaning_lower = expected_meaning.lower()
    score = 0.0

    if meaning_lower in name_lower or name_lower in meaning_lower:
        score += 50

    name_words = [w for w in _NON_ALNUM.split(name_lower) if w]
    meaning_words = [w for w in _NON_ALNUM.split(meaning_lower) if w]
    if meaning_words:
        matches = sum(
            1
            for meaning_word in meaning_words
            if any(meaning_word in word or word in meaning_word for word in name_words)
        )
        score += matches / len(meaning_words) * 50

    return min(100.0, score)


def calculate_overall_score(
    name: str,
    context: Optional[NamingContext],
    expected_meaning: Optional[str] = None,
) -> NameScore:
    readability = calculate_readability(name)
    context_score = check_context(name, context)
    semantic = calculate_semantic(name, expected_meaning)

    overall = round_half_up(
        readability * constants.READABILITY_WEIGHT
        + context_score * constants.CONTEXT_WEIGHT
        + semantic * constants.SEMANTIC_WEIGHT
    )
    return NameScore(
        overall=clamp_score(overall),
        readability=readability,
        context=context_score,
        semantic=semantic,
    )
