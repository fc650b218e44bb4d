"""
Suggestion generation: combinatorial candidate synthesis, scoring, dedup, ranking.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterator, Literal, Optional

from . import constants
from .contexts import NamingContext
from .parsers import extract_words
from .quality import NameScore, calculate_overall_score

logger = logging.getLogger("nomenclator.naming")

SuggestionType = Literal["base", "prefixed", "suffixed", "combined"]


@dataclass(frozen=True)
class Suggestion:
    """One scored candidate identifier."""

    name: str
    score: NameScore
    type: SuggestionType
    explanation: str = ""

    def with_score(self, score: NameScore) -> "Suggestion":
        return replace(self, score=score)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "score": self.score.to_dict(),
            "type": self.type,
            "explanation": self.explanation,
        }


def _candidate_phrases(
    words: list[str], context: NamingContext, include_combined: bool
) -> Iterator[tuple[str, SuggestionType]]:
    for word in words:
        yield word, "base"
        for prefix in context.prefixes:
            yield f"{prefix} {word}", "prefixed"
        for suffix in context.suffixes:
            yield f"{word} {suffix}", "suffixed"
        if include_combined:
            for prefix in context.prefixes:
                for suffix in context.suffixes:
                    yield f"{prefix} {word} {suffix}", "combined"


def explain_suggestion(suggestion_type: str, score: NameScore) -> str:
    """Short human-readable reasons for a candidate's ranking."""
    explanation = [f"Generated {suggestion_type} variant"]
    if score.semantic > 80:
        explanation.append("Strong semantic match with input")
    if score.context > 90:
        explanation.append("Follows naming conventions perfectly")
    if score.readability > 85:
        explanation.append("Highly readable")
    return ". ".join(explanation)


def remove_duplicates(suggestions: list[Suggestion]) -> list[Suggestion]:
    """Drop repeated names, keeping the first-generated occurrence."""
    seen = set()
    unique = []
    for suggestion in suggestions:
        if suggestion.name in seen:
            continue
        seen.add(suggestion.name)
        unique.append(suggestion)
    return unique


def generate_suggestions(
    raw_phrase: str,
    context: Optional[NamingContext],
    max_results: int = constants.DEFAULT_MAX_RESULTS,
    include_combined: bool = False,
    max_candidates: int = constants.MAX_CANDIDATES,
) -> list[Suggestion]:
    """
    Generate ranked identifier suggestions for a phrase in a context.

    For every base word of the phrase this produces the bare word, each
    prefix + word, each word + suffix and (with ``include_combined``) every
    prefix + word + suffix, all rendered in the context's convention. At most
    ``max_candidates`` candidates are generated. Candidates are scored against
    the raw phrase, deduplicated by name (first generated wins), sorted by
    overall score (ties keep generation order) and truncated to
    ``max_results``.

    Args:
        raw_phrase: Free-text description, e.g. "show new section"
        context: Naming context whose convention and vocabularies apply
        max_results: Maximum suggestions returned (default: 10)
        include_combined: Also emit prefix + word + suffix candidates
        max_candidates: Upper bound on generated candidates before scoring

    Returns:
        Suggestions, best first. Empty when the phrase or context is missing.
    """
    if not raw_phrase or context is None:
        return []

    words = extract_words(raw_phrase)
    convention = context.convention

    suggestions = []
    for phrase, suggestion_type in _candidate_phrases(words, context, include_combined):
        if len(suggestions) >= max_candidates:
            logger.debug(
                f"Candidate limit {max_candidates} reached for {raw_phrase!r}, "
                f"remaining combinations skipped"
            )
            break
        name = convention.transform(phrase)
        score = calculate_overall_score(name, context, raw_phrase)
        suggestions.append(
            Suggestion(
                name=name,
                score=score,
                type=suggestion_type,
                explanation=explain_suggestion(suggestion_type, score),
            )
        )

    suggestions = remove_duplicates(suggestions)
    suggestions.sort(key=lambda s: s.score.overall, reverse=True)
    return suggestions[: max(0, max_results)]
