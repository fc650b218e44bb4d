"""
Tests for corpus analysis of existing identifiers.
"""

from nomenclator.naming.analysis import _CASE_STYLES, CorpusAnalysis, analyze_existing_code
from nomenclator.naming.constants import KNOWN_IDENTIFIERS
from nomenclator.naming.conventions import CASE_DETECTORS


class TestAnalyzeExistingCode:
    def test_known_identifiers(self):
        analysis = analyze_existing_code(KNOWN_IDENTIFIERS)

        assert analysis.identifier_count == 9
        # "_pID" matches no case style
        assert dict(analysis.case_distribution) == {"camelCase": 6, "PascalCase": 2}
        assert analysis.dominant_case() == "camelCase"

    def test_prefix_and_suffix_counts(self):
        analysis = analyze_existing_code(KNOWN_IDENTIFIERS)

        assert analysis.common_suffixes["page"] == 2
        assert analysis.common_prefixes["show"] == 1
        assert analysis.top_suffixes(1) == [("page", 2)]

    def test_single_word_identifiers_have_no_affixes(self):
        analysis = analyze_existing_code(["Page", "Carousel"])

        assert analysis.common_prefixes == {}
        assert analysis.common_suffixes == {}
        assert analysis.dominant_case() == "PascalCase"

    def test_other_case_styles(self):
        analysis = analyze_existing_code(["nav_menu", "nav-menu", "NAV_MENU"])

        assert analysis.case_distribution["snake_case"] == 1
        assert analysis.case_distribution["kebab-case"] == 1
        assert analysis.identifier_count == 3
        assert analysis.common_prefixes["nav"] == 2

    def test_constant_case_not_tallied(self):
        analysis = analyze_existing_code(["MAX_VOLUME", "DEFAULT"])

        assert analysis.identifier_count == 2
        assert dict(analysis.case_distribution) == {"PascalCase": 1}

    def test_styles_follow_convention_detectors(self):
        assert [tag for tag, _ in _CASE_STYLES] == [tag for tag, _ in CASE_DETECTORS[:4]]
        assert "CONSTANT_CASE" not in dict(_CASE_STYLES)

    def test_skips_non_strings_and_empties(self):
        analysis = analyze_existing_code(["fooBar", None, 42, ""])

        assert analysis.identifier_count == 1

    def test_empty_corpus(self):
        analysis = analyze_existing_code([])

        assert analysis.dominant_case() is None
        assert analysis.top_prefixes() == []


class TestCorpusAnalysis:
    def test_to_dict(self):
        analysis = analyze_existing_code(["showNewSection"])

        assert analysis.to_dict() == {
            "case_distribution": {"camelCase": 1},
            "common_prefixes": {"show": 1},
            "common_suffixes": {"section": 1},
            "identifier_count": 1,
        }

    def test_default_is_empty(self):
        assert CorpusAnalysis().identifier_count == 0
