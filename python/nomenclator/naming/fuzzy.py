"""
Fuzzy name matching for duplicate and near-duplicate detection.

Similarity is Levenshtein-based on a 0-100 scale:
``round(100 * (max_len - distance) / max_len)``, with two empty strings
counting as identical.
"""

from dataclasses import dataclass
from typing import Iterable

from . import constants
from .quality import round_half_up


@dataclass(frozen=True)
class SimilarName:
    """An existing name that resembles the input."""

    name: str
    similarity: int

    def to_dict(self) -> dict:
        return {"name": self.name, "similarity": self.similarity}


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Edit distance between two names: insertions, deletions and substitutions
    each cost one ("kitten" -> "sitting" is 3).

    Keeps only the previous row of the table, sized by the shorter name.
    """
    longer, shorter = (s1, s2) if len(s1) >= len(s2) else (s2, s1)
    if not shorter:
        return len(longer)

    previous = list(range(len(shorter) + 1))
    for row, long_char in enumerate(longer, start=1):
        current = [row]
        for col, short_char in enumerate(shorter, start=1):
            current.append(
                min(
                    previous[col] + 1,
                    current[col - 1] + 1,
                    previous[col - 1] + (long_char != short_char),
                )
            )
        previous = current

    return previous[-1]


def similarity(s1: str, s2: str) -> int:
    """Similarity score 0-100 (100 = identical).

    Examples:
        >>> similarity("kitten", "sitting")
        57
        >>> similarity("", "")
        100
    """
    max_length = max(len(s1), len(s2))
    if max_length == 0:
        return 100

    distance = levenshtein_distance(s1, s2)
    return round_half_up(100 * (max_length - distance) / max_length)


def find_similar(
    query: str,
    existing_names: Iterable[str],
    threshold: int = constants.DEFAULT_SIMILARITY_THRESHOLD,
) -> list[SimilarName]:
    """
    Find existing names whose case-insensitive similarity to ``query`` is at
    least ``threshold``, most similar first (ties keep corpus order).
    """
    if not query:
        return []

    query_lower = query.lower()
    matches = []
    for name in existing_names:
        if not isinstance(name, str):
            continue
        score = similarity(query_lower, name.lower())
        if score >= threshold:
            matches.append(SimilarName(name=name, similarity=score))

    matches.sort(key=lambda m: m.similarity, reverse=True)
    return matches
