"""
Preference-adjusted name search engine.

``NameSearchEngine`` is the public façade over the naming package: it owns the
active user preferences and the cached corpus analysis and composes context
detection, suggestion generation, scoring and fuzzy matching.

Each engine instance carries mutable state (preferences, analysis cache) with
no locking. Hosts serving several users give each one its own engine.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional

from nomenclator.config import NomenclatorConfig
from nomenclator.naming import constants
from nomenclator.naming.analysis import CorpusAnalysis, analyze_existing_code
from nomenclator.naming.contexts import NamingContext
from nomenclator.naming.conventions import detect_case, get_convention
from nomenclator.naming.fuzzy import SimilarName, find_similar
from nomenclator.naming.patterns import detect_context
from nomenclator.naming.quality import NameScore, calculate_overall_score, has_case_transition
from nomenclator.naming.strategy import Suggestion, generate_suggestions
from nomenclator.preferences import USER_PROFILES, UserPreferences, get_profile, merge_preferences

logger = logging.getLogger("nomenclator.engine")

CorpusSource = Callable[[], Iterable[str]]

WELL_FORMED_MESSAGE = "Name is already well-formed"
ALTERNATIVES_MESSAGE = "Consider these alternatives:"
WELL_FORMED_THRESHOLD = 80
RECOMMENDATION_THRESHOLD = 70
IMPROVEMENT_RESULTS = 5


def default_corpus() -> Iterable[str]:
    return constants.KNOWN_IDENTIFIERS


@dataclass
class SearchResult:
    suggestions: list[Suggestion] = field(default_factory=list)
    similar: list[SimilarName] = field(default_factory=list)
    context: Optional[NamingContext] = None
    user_preferences: Optional[UserPreferences] = None
    analysis: Optional[CorpusAnalysis] = None

    def to_dict(self) -> dict:
        return {
            "suggestions": [s.to_dict() for s in self.suggestions],
            "similar": [s.to_dict() for s in self.similar],
            "context": self.context.name if self.context else None,
            "convention": self.context.convention.name if self.context else None,
            "user_preferences": self.user_preferences.to_dict() if self.user_preferences else None,
            "analysis": self.analysis.to_dict() if self.analysis else None,
        }


@dataclass
class ValidationResult:
    score: NameScore
    context: NamingContext
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score.to_dict(),
            "context": self.context.name,
            "convention": self.context.convention.name,
            "recommendations": list(self.recommendations),
        }


@dataclass
class ImprovementResult:
    message: str
    suggestions: list[Suggestion] = field(default_factory=list)
    issues: Optional[list[str]] = None

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "suggestions": [s.to_dict() for s in self.suggestions],
            "issues": self.issues,
        }


class NameSearchEngine:
    """
    Personalized identifier suggestion and validation.

    Example:
        >>> engine = NameSearchEngine().initialize()
        >>> engine.set_user_profile("WRITER")  # doctest: +ELLIPSIS
        <...NameSearchEngine...>
        >>> result = engine.search("story reader", max_results=3)
        >>> result.context.convention.name
        'snake_case'
    """

    def __init__(
        self,
        corpus_source: Optional[CorpusSource] = None,
        config: Optional[NomenclatorConfig] = None,
    ):
        self.config = config or NomenclatorConfig()
        if corpus_source is None and self.config.corpus is not None:
            corpus = list(self.config.corpus)
            corpus_source = lambda: corpus
        self.corpus_source: CorpusSource = corpus_source or default_corpus
        self.user_preferences: UserPreferences = USER_PROFILES["DEFAULT"]
        self.code_analysis: Optional[CorpusAnalysis] = None
        self.is_initialized = False

    def initialize(
        self,
        preferences: Optional[Mapping[str, Any]] = None,
        force: bool = False,
    ) -> "NameSearchEngine":
        """
        Build the corpus analysis and reset preferences to DEFAULT merged with
        ``preferences``.

        Idempotent: once initialized, further calls only merge ``preferences``
        into the current profile. ``force=True`` re-runs the full
        initialization, rebuilding the analysis from the corpus source.
        """
        if self.is_initialized and not force:
            if preferences:
                self.update_preferences(preferences)
            return self

        self.user_preferences = USER_PROFILES["DEFAULT"]
        if preferences:
            self.update_preferences(preferences)
        self.code_analysis = analyze_existing_code(self.corpus_source())
        self.is_initialized = True
        logger.info("Name search engine initialized")
        return self

    def _ensure_initialized(self) -> None:
        if not self.is_initialized:
            # Keep preferences chosen before the first search
            preferences = self.user_preferences
            self.initialize()
            self.user_preferences = preferences

    def set_user_profile(self, profile_name: str) -> "NameSearchEngine":
        """Swap in a built-in profile. Unknown names leave the current profile in place."""
        profile = get_profile(profile_name)
        if profile is None:
            logger.warning(
                f"Unknown profile {profile_name!r}; keeping current preferences "
                f"(known: {', '.join(USER_PROFILES)})"
            )
            return self
        self.user_preferences = profile
        logger.info(f"Switched to {profile_name.strip().upper()} profile")
        return self

    def update_preferences(self, preferences: Mapping[str, Any]) -> "NameSearchEngine":
        """Shallow-merge ``preferences`` into the current profile."""
        if not isinstance(preferences, Mapping):
            logger.warning(f"Ignoring preference update of type {type(preferences).__name__}")
            return self
        self.user_preferences, ignored = merge_preferences(self.user_preferences, preferences)
        if ignored:
            logger.warning(f"Ignoring unknown preference keys: {', '.join(map(str, ignored))}")
        return self

    def search(
        self,
        query: str,
        context: Optional[NamingContext] = None,
        max_results: Optional[int] = None,
        existing_names: Optional[Iterable[str]] = None,
    ) -> SearchResult:
        """
        Suggest identifiers for a free-text description.

        Args:
            query: What the identifier should mean, e.g. "audio player volume"
            context: Naming context override (default: detected from ``query``)
            max_results: Maximum suggestions (default: config.max_results)
            existing_names: Names to check for near-duplicates of ``query``

        Returns:
            SearchResult with ranked suggestions, similar existing names, the
            preference-adjusted context, active preferences and corpus analysis.
            Empty or non-string queries give an empty result with no context.
        """
        if not query or not isinstance(query, str):
            return SearchResult()

        self._ensure_initialized()

        if context is None:
            context = detect_context(query, self.code_analysis)
        context = self._apply_user_preferences(context)

        suggestions = generate_suggestions(
            query,
            context,
            max_results=self.config.max_results if max_results is None else max_results,
            include_combined=self.user_preferences.creativity_level != "conservative",
            max_candidates=self.config.max_candidates,
        )
        suggestions = self._apply_preference_filtering(suggestions, query)

        similar: list[SimilarName] = []
        if existing_names:
            similar = find_similar(query, existing_names, self.config.similarity_threshold)

        return SearchResult(
            suggestions=suggestions,
            similar=similar,
            context=context,
            user_preferences=self.user_preferences,
            analysis=self.code_analysis,
        )

    def validate_name(
        self,
        name: str,
        expected_meaning: Optional[str],
        context: Optional[NamingContext] = None,
    ) -> ValidationResult:
        """Score an existing name and explain what would improve it."""
        self._ensure_initialized()

        name = name if isinstance(name, str) else ""
        if context is None:
            context = detect_context(expected_meaning or "", self.code_analysis)
        score = calculate_overall_score(name, context, expected_meaning)
        score = self._adjust_score_for_preferences(score, name)

        return ValidationResult(
            score=score,
            context=context,
            recommendations=self._generate_recommendations(score, context),
        )

    def get_improvement_suggestions(
        self, current_name: str, expected_meaning: str
    ) -> ImprovementResult:
        """Alternatives for a name that scores below the well-formed threshold."""
        validation = self.validate_name(current_name, expected_meaning)

        if validation.score.overall >= WELL_FORMED_THRESHOLD:
            return ImprovementResult(message=WELL_FORMED_MESSAGE)

        result = self.search(
            expected_meaning,
            context=validation.context,
            max_results=IMPROVEMENT_RESULTS,
        )
        return ImprovementResult(
            message=ALTERNATIVES_MESSAGE,
            suggestions=result.suggestions,
            issues=validation.recommendations,
        )

    def _apply_user_preferences(self, context: NamingContext) -> NamingContext:
        # "medium" verbosity keeps the full vocabulary, same as "verbose"
        vocabulary_size = (
            constants.TERSE_VOCABULARY_SIZE
            if self.user_preferences.verbosity == "terse"
            else None
        )
        return context.adjusted(
            convention=get_convention(self.user_preferences.case_preference),
            vocabulary_size=vocabulary_size,
        )

    def _apply_preference_filtering(
        self, suggestions: list[Suggestion], original_input: str
    ) -> list[Suggestion]:
        adjusted = [
            s.with_score(self._adjust_score_for_preferences(s.score, s.name))
            for s in suggestions
        ]
        if self.user_preferences.abbreviation_tolerance == "none":
            min_length = len(original_input) * constants.MIN_LENGTH_RATIO
            adjusted = [s for s in adjusted if len(s.name) >= min_length]
        adjusted.sort(key=lambda s: s.score.overall, reverse=True)
        return adjusted

    def _adjust_score_for_preferences(self, score: NameScore, name: str) -> NameScore:
        overall = score.overall
        if detect_case(name) == self.user_preferences.case_preference:
            overall += constants.CASE_MATCH_BONUS
        else:
            overall -= constants.CASE_MISMATCH_PENALTY

        if self.user_preferences.abbreviation_tolerance == "none" and has_case_transition(name):
            overall -= constants.ABBREVIATION_PENALTY

        return score.with_overall(overall)

    def _generate_recommendations(self, score: NameScore, context: NamingContext) -> list[str]:
        recommendations = []
        if score.context < RECOMMENDATION_THRESHOLD:
            recommendations.append(f"Consider following {context.convention.name} convention")
        if score.readability < RECOMMENDATION_THRESHOLD:
            recommendations.append(
                "Improve readability by avoiding abbreviations or using more descriptive words"
            )
        if score.semantic < RECOMMENDATION_THRESHOLD:
            recommendations.append("Make the name more descriptive of its purpose")
        return recommendations
