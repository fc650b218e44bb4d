"""
Domain pattern detection: classify free text into a naming context.

Each domain vocabulary awards points for every prefix or suffix found as a
lower-case substring of the input. The best-scoring domain (earliest declared
on ties) decides the context; when nothing matches, keyword fallbacks apply
and the final default is the variable context.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from . import constants
from .contexts import CLASS_NAME, FUNCTION, PAGE_ID, VARIABLE, NamingContext

if TYPE_CHECKING:
    from .analysis import CorpusAnalysis

logger = logging.getLogger("nomenclator.naming")


@dataclass(frozen=True)
class DomainPattern:
    """A subject-matter vocabulary tied to the context its names usually live in."""

    name: str
    prefixes: tuple[str, ...]
    suffixes: tuple[str, ...]
    context: NamingContext

    def score(self, text: str) -> int:
        """Points for every vocabulary entry contained in ``text`` (case-insensitive)."""
        text_lower = text.lower()
        points = 0
        for term in self.prefixes + self.suffixes:
            if term.lower() in text_lower:
                points += constants.DOMAIN_MATCH_POINTS
        return points


AUDIO_ELEMENTS = DomainPattern(
    name="audio",
    prefixes=constants.AUDIO_PREFIXES,
    suffixes=constants.AUDIO_SUFFIXES,
    context=FUNCTION,
)

VISUAL_ELEMENTS = DomainPattern(
    name="visual",
    prefixes=constants.VISUAL_PREFIXES,
    suffixes=constants.VISUAL_SUFFIXES,
    context=FUNCTION,
)

TEXT_ELEMENTS = DomainPattern(
    name="text",
    prefixes=constants.TEXT_PREFIXES,
    suffixes=constants.TEXT_SUFFIXES,
    context=FUNCTION,
)

NAVIGATION = DomainPattern(
    name="navigation",
    prefixes=constants.NAVIGATION_PREFIXES,
    suffixes=constants.NAVIGATION_SUFFIXES,
    context=FUNCTION,
)

# Declaration order is the tie-break order
DOMAIN_PATTERNS: tuple[DomainPattern, ...] = (
    AUDIO_ELEMENTS,
    VISUAL_ELEMENTS,
    TEXT_ELEMENTS,
    NAVIGATION,
)


def detect_domain(text: str) -> Optional[DomainPattern]:
    """Return the best-matching domain pattern, or None when nothing matches."""
    if not text:
        return None

    best: Optional[DomainPattern] = None
    best_score = 0
    for pattern in DOMAIN_PATTERNS:
        points = pattern.score(text)
        if points > best_score:
            best, best_score = pattern, points
    return best


def detect_context(
    text: str, corpus_analysis: Optional["CorpusAnalysis"] = None
) -> NamingContext:
    """
    Pick the naming context for a free-text description or identifier.

    Never fails: unmatched or empty input resolves to the variable context.
    ``corpus_analysis`` is accepted so hosts can pass the engine's cached
    analysis; detection itself is driven by the domain vocabularies.

    Examples:
        >>> detect_context("audioPlayerVolume").name
        'function'
        >>> detect_context("about section").name
        'page'
        >>> detect_context("counter").name
        'variable'
    """
    if not text:
        return VARIABLE

    domain = detect_domain(text)
    if domain is not None:
        logger.debug(f"Detected {domain.name} domain for {text!r}")
        return domain.context

    text_lower = text.lower()
    if any(keyword in text_lower for keyword in constants.PAGE_KEYWORDS):
        return PAGE_ID
    if any(keyword in text_lower for keyword in constants.ACTION_KEYWORDS):
        return FUNCTION
    if any(keyword in text_lower for keyword in constants.STYLE_KEYWORDS):
        return CLASS_NAME

    return VARIABLE
