"""
Identifier naming: conventions, contexts, domain detection, quality scoring,
suggestion generation and fuzzy matching.

Everything here is pure, synchronous and in-memory; the stateful,
preference-aware façade lives in ``nomenclator.engine``.
"""

from .analysis import CorpusAnalysis, analyze_existing_code
from .contexts import (
    CLASS_NAME,
    CONSTANT,
    CONTEXTS,
    FUNCTION,
    ID,
    PAGE_ID,
    VARIABLE,
    NamingContext,
    get_context,
)
from .conventions import (
    CAMEL_CASE,
    CASE_DETECTORS,
    CONSTANT_CASE,
    CONVENTIONS,
    KEBAB_CASE,
    MIXED_CASE,
    PASCAL_CASE,
    SNAKE_CASE,
    Convention,
    detect_case,
    get_convention,
)
from .fuzzy import SimilarName, find_similar, levenshtein_distance, similarity
from .parsers import extract_words, split_identifier, split_words
from .patterns import DOMAIN_PATTERNS, DomainPattern, detect_context, detect_domain
from .quality import (
    NameScore,
    calculate_overall_score,
    calculate_readability,
    calculate_semantic,
    check_context,
)
from .strategy import Suggestion, generate_suggestions

__all__ = [
    "CorpusAnalysis",
    "analyze_existing_code",
    "NamingContext",
    "CONTEXTS",
    "FUNCTION",
    "VARIABLE",
    "CONSTANT",
    "CLASS_NAME",
    "ID",
    "PAGE_ID",
    "get_context",
    "Convention",
    "CONVENTIONS",
    "CAMEL_CASE",
    "PASCAL_CASE",
    "SNAKE_CASE",
    "KEBAB_CASE",
    "CONSTANT_CASE",
    "CASE_DETECTORS",
    "MIXED_CASE",
    "detect_case",
    "get_convention",
    "SimilarName",
    "find_similar",
    "levenshtein_distance",
    "similarity",
    "extract_words",
    "split_identifier",
    "split_words",
    "DomainPattern",
    "DOMAIN_PATTERNS",
    "detect_context",
    "detect_domain",
    "NameScore",
    "calculate_overall_score",
    "calculate_readability",
    "calculate_semantic",
    "check_context",
    "Suggestion",
    "generate_suggestions",
]
