"""
Tests for Levenshtein-based similarity and near-duplicate lookup.
"""

import pytest

from nomenclator.naming.fuzzy import SimilarName, find_similar, levenshtein_distance, similarity


class TestLevenshteinDistance:
    @pytest.mark.parametrize(
        "s1,s2,expected",
        [
            ("kitten", "sitting", 3),
            ("pagesection", "pageselection", 2),
            ("", "abc", 3),
            ("abc", "", 3),
            ("same", "same", 0),
        ],
    )
    def test_distance(self, s1, s2, expected):
        assert levenshtein_distance(s1, s2) == expected

    def test_symmetric(self):
        assert levenshtein_distance("flaw", "lawn") == levenshtein_distance("lawn", "flaw")


class TestSimilarity:
    def test_rounded_percentage(self):
        assert similarity("kitten", "sitting") == 57

    def test_identical(self):
        assert similarity("fadeInPage", "fadeInPage") == 100

    def test_both_empty(self):
        assert similarity("", "") == 100

    def test_one_empty(self):
        assert similarity("abc", "") == 0


class TestFindSimilar:
    NAMES = ["pageSelection", "pageSectionTitle", "unrelatedName"]

    def test_threshold_70(self):
        assert find_similar("pageSection", self.NAMES, 70) == [
            SimilarName(name="pageSelection", similarity=85),
        ]

    def test_threshold_60(self):
        matches = find_similar("pageSection", self.NAMES, 60)

        assert [(m.name, m.similarity) for m in matches] == [
            ("pageSelection", 85),
            ("pageSectionTitle", 69),
        ]

    def test_default_threshold(self):
        assert [m.name for m in find_similar("pageSection", self.NAMES)] == ["pageSelection"]

    def test_case_insensitive_keeps_original_name(self):
        assert find_similar("FadeInPage", ["fadeInPage"]) == [
            SimilarName(name="fadeInPage", similarity=100),
        ]

    def test_ties_keep_input_order(self):
        matches = find_similar("abc", ["abd", "abe"], 50)

        assert [m.name for m in matches] == ["abd", "abe"]
        assert all(m.similarity == 67 for m in matches)

    def test_non_strings_skipped(self):
        assert [m.name for m in find_similar("abc", ["abc", None, 3], 50)] == ["abc"]

    def test_empty_query(self):
        assert find_similar("", self.NAMES, 0) == []

    def test_to_dict(self):
        assert SimilarName(name="a", similarity=90).to_dict() == {"name": "a", "similarity": 90}
