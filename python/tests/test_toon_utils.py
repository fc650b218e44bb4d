"""
Tests for output formatting (text, JSON, TOON).
"""

import logging

import pytest

from nomenclator.toon_utils import (
    flatten_suggestion,
    format_guidelines_text,
    format_improvement_text,
    format_output,
    format_suggestions_text,
    format_validation_text,
)

SUGGESTION = {
    "name": "audioPlayer",
    "score": {"overall": 94, "readability": 95, "context": 100, "semantic": 50.0},
    "type": "base",
    "explanation": "Generated base variant",
}


class TestFlattenSuggestion:
    def test_flattens_score(self):
        assert flatten_suggestion(SUGGESTION) == {
            "name": "audioPlayer",
            "type": "base",
            "overall": 94,
            "readability": 95,
            "context": 100,
            "semantic": 50.0,
        }

    def test_missing_fields(self):
        flat = flatten_suggestion({"name": "x"})

        assert flat["overall"] == 0
        assert flat["type"] == ""

    def test_semantic_rounded(self):
        flat = flatten_suggestion({"name": "x", "score": {"semantic": 33.33333}})

        assert flat["semantic"] == 33.3


class TestFormatOutput:
    def test_json_returns_data(self):
        data = {"a": 1}

        assert format_output(data, "json", "tool") is data

    def test_text_uses_formatter(self):
        assert format_output({"a": 1}, "text", "tool", text_formatter=lambda d: "A") == "A"
        assert format_output({"a": 1}, None, "tool", text_formatter=lambda d: "A") == "A"

    def test_text_without_formatter_falls_back(self, caplog):
        data = {"a": 1}

        with caplog.at_level(logging.WARNING, logger="nomenclator.output"):
            assert format_output(data, "text", "tool") is data

        assert "no text formatter" in caplog.text

    def test_unknown_format_returns_data(self):
        data = {"a": 1}

        assert format_output(data, "xml", "tool") is data

    def test_toon_encodes_flattened_rows(self):
        rows = [flatten_suggestion(SUGGESTION)]

        result = format_output({"suggestions": [SUGGESTION]}, "toon", "tool", toon_data=rows)

        assert isinstance(result, str)
        assert "audioPlayer" in result
        assert "overall" in result

    def test_toon_failure_falls_back_to_json(self, monkeypatch):
        import toon_format

        def broken(_):
            raise ValueError("boom")

        monkeypatch.setattr(toon_format, "encode", broken)
        data = {"a": 1}

        assert format_output(data, "toon", "tool") is data


class TestTextFormatters:
    def test_suggestions(self):
        text = format_suggestions_text(
            {
                "context": "function",
                "convention": "camelCase",
                "suggestions": [SUGGESTION],
                "similar": [{"name": "audioPlayers", "similarity": 92}],
            }
        )

        assert text.splitlines() == [
            "context: function (camelCase)",
            "audioPlayer  [94] base",
            "similar existing names:",
            "  audioPlayers (92%)",
        ]

    def test_no_suggestions(self):
        assert format_suggestions_text({"context": None, "suggestions": []}) == "No suggestions"

    def test_validation(self):
        text = format_validation_text(
            {
                "name": "a_b",
                "is_valid": False,
                "score": 40,
                "issues": ["Consider following camelCase convention"],
                "suggestions": ["audio", "audioPlayer"],
            }
        )

        assert text.splitlines() == [
            "a_b: needs work (score 40)",
            "- Consider following camelCase convention",
            "try: audio, audioPlayer",
        ]

    def test_valid_name(self):
        text = format_validation_text(
            {"name": "audioPlayer", "is_valid": True, "score": 94, "issues": [], "suggestions": []}
        )

        assert text == "audioPlayer: valid (score 94)"

    def test_improvement(self):
        text = format_improvement_text(
            {
                "message": "Consider these alternatives:",
                "suggestions": ["audioPlayer"],
                "issues": ["Make the name more descriptive of its purpose"],
            }
        )

        assert text.splitlines() == [
            "Consider these alternatives:",
            "  audioPlayer",
            "- Make the name more descriptive of its purpose",
        ]

    @pytest.mark.parametrize("issues", [None, []])
    def test_improvement_well_formed(self, issues):
        text = format_improvement_text(
            {"message": "Name is already well-formed", "suggestions": [], "issues": issues}
        )

        assert text == "Name is already well-formed"

    def test_guidelines(self):
        text = format_guidelines_text(
            {
                "conventions": {"functions": "showNewSection"},
                "domain_patterns": {"audio": {"prefixes": ["sound"], "suffixes": ["Player"]}},
                "user_profiles": ["DEFAULT", "ARTIST"],
                "best_practices": ["Use descriptive names"],
            }
        )

        assert text.splitlines() == [
            "Conventions:",
            "  functions: showNewSection",
            "Domain vocabularies:",
            "  audio: sound | Player",
            "Profiles: DEFAULT, ARTIST",
            "Best practices:",
            "  - Use descriptive names",
        ]
