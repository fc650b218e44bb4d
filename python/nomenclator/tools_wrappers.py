"""
MCP tool implementations - thin functions over the shared NamingAssistant.

server.py registers these with FastMCP; tests call them directly.
None of them raise on bad input: empty descriptions give empty results.
"""

from typing import Any, Literal, Optional, Union

from nomenclator import server_state
from nomenclator.naming.contexts import get_context
from nomenclator.toon_utils import (
    flatten_suggestion,
    format_guidelines_text,
    format_improvement_text,
    format_output,
    format_suggestions_text,
    format_validation_text,
)

NameKind = Literal["function", "variable", "constant", "page", "class", "id"]


def suggest_name(
    description: str,
    kind: Optional[NameKind] = None,
    max_results: int = 5,
    existing_names: Optional[list[str]] = None,
    output_format: Literal["text", "json", "toon"] = "text",
) -> Union[dict[str, Any], str]:
    """
    Suggest identifiers for a description of what the thing does or holds.

    The context (function, variable, page id, CSS class, ...) is detected from
    the description unless ``kind`` is given; the active profile decides the
    casing. Pass ``existing_names`` to be warned about near-duplicates.

    Examples:
        suggest_name("audio player volume")
        suggest_name("about section", kind="page")
        suggest_name("fade in page", existing_names=["fadeInPage", "fadeOutPage"])

    Args:
        description: Free text, e.g. "show new section"
        kind: Force a context instead of detecting it
        max_results: Maximum suggestions (default: 5)
        existing_names: Names already in use
        output_format: "text" (default), "json" or "toon"
    """
    engine = server_state.get_assistant().engine
    result = engine.search(
        description,
        context=get_context(kind),
        max_results=max_results,
        existing_names=existing_names,
    ).to_dict()
    result.pop("analysis", None)

    return format_output(
        result,
        output_format,
        "suggest_name",
        toon_data=[flatten_suggestion(s) for s in result["suggestions"]],
        text_formatter=format_suggestions_text,
    )


def validate_name(
    name: str,
    meaning: str,
    kind: Optional[NameKind] = None,
    output_format: Literal["text", "json", "toon"] = "text",
) -> Union[dict[str, Any], str]:
    """
    Check whether an existing name is well-formed for what it means.

    Args:
        name: The identifier in use, e.g. "shwNwSec"
        meaning: What it should express, e.g. "show new section"
        kind: Force a context instead of detecting it from ``meaning``
        output_format: "text" (default), "json" or "toon"
    """
    result = server_state.get_assistant().validate(name, meaning, kind)
    return format_output(result, output_format, "validate_name", text_formatter=format_validation_text)


def improve_name(
    name: str,
    meaning: str,
    output_format: Literal["text", "json", "toon"] = "text",
) -> Union[dict[str, Any], str]:
    """
    Suggest better alternatives for a weak name (none if it is already well-formed).

    Args:
        name: The identifier in use
        meaning: What it should express
        output_format: "text" (default), "json" or "toon"
    """
    result = server_state.get_assistant().improve(name, meaning)
    return format_output(result, output_format, "improve_name", text_formatter=format_improvement_text)


def naming_guidelines(
    output_format: Literal["text", "json", "toon"] = "text",
) -> Union[dict[str, Any], str]:
    """Project naming guidelines: conventions, domain vocabularies, profiles, best practices."""
    result = server_state.get_assistant().generate_guidelines()
    return format_output(result, output_format, "naming_guidelines", text_formatter=format_guidelines_text)


def set_naming_profile(profile: str) -> str:
    """
    Switch the personalization profile: DEFAULT, DEVELOPER, ARTIST, MUSICIAN or WRITER.

    Unknown profile names keep the current profile.
    """
    assistant = server_state.get_assistant()
    assistant.set_profile(profile)
    preferences = assistant.engine.user_preferences
    return (
        f"Active preferences: case={preferences.case_preference}, "
        f"verbosity={preferences.verbosity}, creativity={preferences.creativity_level}, "
        f"abbreviations={preferences.abbreviation_tolerance}"
    )
