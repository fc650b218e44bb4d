"""
Tests for suggestion generation.
"""

from nomenclator.naming.contexts import CLASS_NAME, FUNCTION, PAGE_ID, NamingContext
from nomenclator.naming.conventions import CAMEL_CASE, SNAKE_CASE
from nomenclator.naming.quality import NameScore
from nomenclator.naming.strategy import (
    Suggestion,
    explain_suggestion,
    generate_suggestions,
    remove_duplicates,
)


def _score(overall):
    return NameScore(overall=overall, readability=overall, context=overall, semantic=float(overall))


class TestGenerateSuggestions:
    """Candidate synthesis, ranking and truncation."""

    def test_base_prefixed_suffixed(self, small_context):
        suggestions = generate_suggestions("volume", small_context)

        assert [s.name for s in suggestions] == [
            "volume",
            "getVolume",
            "setVolume",
            "volumeHandler",
        ]
        assert [s.type for s in suggestions] == ["base", "prefixed", "prefixed", "suffixed"]

    def test_ranked_by_overall_score(self, small_context):
        suggestions = generate_suggestions("volume", small_context)

        assert suggestions[0].score.overall == 100
        assert [s.score.overall for s in suggestions[1:]] == [99, 99, 99]

    def test_combined_candidates(self, small_context):
        suggestions = generate_suggestions("volume", small_context, include_combined=True)
        names = {s.name for s in suggestions}

        assert len(suggestions) == 6
        assert {"getVolumeHandler", "setVolumeHandler"} <= names
        combined = [s for s in suggestions if s.type == "combined"]
        assert len(combined) == 2

    def test_duplicates_keep_first_generated(self):
        context = NamingContext(
            name="test",
            convention=CAMEL_CASE,
            prefixes=("get",),
            suffixes=("volume",),
        )

        suggestions = generate_suggestions("get volume", context)
        names = [s.name for s in suggestions]

        assert len(names) == len(set(names))
        get_volume = next(s for s in suggestions if s.name == "getVolume")
        # "get" + suffix "volume" is generated before prefix "get" + "volume"
        assert get_volume.type == "suffixed"

    def test_names_follow_context_convention(self):
        for suggestion in generate_suggestions("nav menu", CLASS_NAME):
            assert CLASS_NAME.validate(suggestion.name), suggestion.name

    def test_page_ids_keep_anchor(self):
        suggestions = generate_suggestions("about", PAGE_ID, include_combined=True)
        names = [s.name for s in suggestions]

        assert names[0] == "#about"
        assert "#about-page" in names
        assert "#about-section" in names
        assert all(PAGE_ID.validate(n) for n in names if n.startswith("#"))

    def test_swapped_convention(self, small_context):
        snake = small_context.adjusted(convention=SNAKE_CASE)

        names = [s.name for s in generate_suggestions("volume", snake)]

        assert "get_volume" in names
        assert "volume_handler" in names

    def test_max_results(self):
        assert len(generate_suggestions("show new section", FUNCTION, max_results=3)) == 3
        assert len(generate_suggestions("show new section", FUNCTION)) == 10

    def test_max_results_zero_or_negative(self, small_context):
        assert generate_suggestions("volume", small_context, max_results=0) == []
        assert generate_suggestions("volume", small_context, max_results=-1) == []

    def test_candidate_limit(self):
        suggestions = generate_suggestions(
            "volume", FUNCTION, max_results=100, max_candidates=5
        )

        assert [s.name for s in suggestions] == [
            "volume",
            "getVolume",
            "setVolume",
            "isVolume",
            "hasVolume",
        ]

    def test_empty_inputs(self, small_context):
        assert generate_suggestions("", small_context) == []
        assert generate_suggestions("!!!", small_context) == []
        assert generate_suggestions("volume", None) == []

    def test_explanations_attached(self, small_context):
        best = generate_suggestions("volume", small_context)[0]

        assert best.explanation == (
            "Generated base variant. Strong semantic match with input. "
            "Follows naming conventions perfectly. Highly readable"
        )


class TestExplainSuggestion:
    def test_low_scores_only_name_the_type(self):
        assert explain_suggestion("prefixed", _score(10)) == "Generated prefixed variant"

    def test_thresholds_are_strict(self):
        score = NameScore(overall=80, readability=85, context=90, semantic=80.0)

        assert explain_suggestion("base", score) == "Generated base variant"


class TestRemoveDuplicates:
    def test_first_occurrence_kept(self):
        first = Suggestion(name="getVolume", score=_score(10), type="prefixed")
        second = Suggestion(name="getVolume", score=_score(90), type="suffixed")
        other = Suggestion(name="setVolume", score=_score(50), type="prefixed")

        assert remove_duplicates([first, other, second]) == [first, other]


class TestSuggestion:
    def test_to_dict(self):
        suggestion = Suggestion(name="volume", score=_score(70), type="base", explanation="x")

        data = suggestion.to_dict()

        assert data["name"] == "volume"
        assert data["type"] == "base"
        assert data["score"]["overall"] == 70
        assert data["explanation"] == "x"

    def test_with_score(self):
        suggestion = Suggestion(name="volume", score=_score(70), type="base")

        assert suggestion.with_score(_score(40)).score.overall == 40
        assert suggestion.score.overall == 70
