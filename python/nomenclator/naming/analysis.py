"""
Corpus analysis: summarise the naming habits of an existing codebase.

The identifiers themselves come from the host (live object graph, DOM
attributes, a static file list); this module only counts.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .conventions import CASE_DETECTORS
from .parsers import split_identifier

logger = logging.getLogger("nomenclator.naming")

# The convention detectors minus CONSTANT_CASE: corpus statistics count the
# four styles identifiers are written in, and screaming constants are left
# uncounted. Checked in order, first match counts.
_CASE_STYLES = CASE_DETECTORS[:4]


@dataclass
class CorpusAnalysis:
    """Case distribution and prefix/suffix frequencies of a set of identifiers."""

    case_distribution: Counter = field(default_factory=Counter)
    common_prefixes: Counter = field(default_factory=Counter)
    common_suffixes: Counter = field(default_factory=Counter)
    identifier_count: int = 0

    def dominant_case(self) -> Optional[str]:
        """Most frequent case style (first seen wins ties), or None if nothing was counted."""
        if not self.case_distribution:
            return None
        return self.case_distribution.most_common(1)[0][0]

    def top_prefixes(self, limit: int = 5) -> list[tuple[str, int]]:
        return self.common_prefixes.most_common(limit)

    def top_suffixes(self, limit: int = 5) -> list[tuple[str, int]]:
        return self.common_suffixes.most_common(limit)

    def to_dict(self) -> dict:
        return {
            "case_distribution": dict(self.case_distribution),
            "common_prefixes": dict(self.common_prefixes),
            "common_suffixes": dict(self.common_suffixes),
            "identifier_count": self.identifier_count,
        }


def categorize_identifier(identifier: str, analysis: CorpusAnalysis) -> None:
    """Add one identifier's case style and prefix/suffix to ``analysis``."""
    if not identifier:
        return

    analysis.identifier_count += 1

    for style, predicate in _CASE_STYLES:
        if predicate(identifier):
            analysis.case_distribution[style] += 1
            break

    words = split_identifier(identifier)
    if len(words) > 1:
        analysis.common_prefixes[words[0].lower()] += 1
        analysis.common_suffixes[words[-1].lower()] += 1


def analyze_existing_code(identifiers: Iterable[str]) -> CorpusAnalysis:
    """
    Build a corpus analysis from existing identifier strings.

    Non-string and empty entries are ignored.

    Examples:
        >>> analysis = analyze_existing_code(["showNewSection", "fadeInPage", "Page"])
        >>> dict(analysis.case_distribution)
        {'camelCase': 2, 'PascalCase': 1}
        >>> analysis.common_prefixes["show"]
        1
    """
    analysis = CorpusAnalysis()
    for identifier in identifiers:
        if isinstance(identifier, str):
            categorize_identifier(identifier, analysis)

    logger.info(
        f"Analyzed {analysis.identifier_count} identifiers "
        f"(dominant case: {analysis.dominant_case() or 'none'})"
    )
    return analysis
