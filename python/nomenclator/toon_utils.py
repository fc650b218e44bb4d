"""
Output formatting for tool results: lean text, JSON, or TOON.

TOON (Token-Oriented Object Notation) is a compact tabular encoding that
costs far fewer tokens than JSON for lists of uniform records such as
suggestion tables.
"""

import logging
from typing import Any, Callable, Literal, Optional, Union

logger = logging.getLogger("nomenclator.output")

OutputFormat = Literal["text", "json", "toon"]


def flatten_suggestion(suggestion: dict[str, Any]) -> dict[str, Any]:
    """
    Flatten a suggestion dict into primitives for TOON's table form.

    Every row gets the same keys so TOON can emit a single header line.
    """
    score = suggestion.get("score") or {}
    return {
        "name": suggestion.get("name", ""),
        "type": suggestion.get("type", ""),
        "overall": score.get("overall", 0),
        "readability": score.get("readability", 0),
        "context": score.get("context", 0),
        "semantic": round(float(score.get("semantic", 0)), 1),
    }


def format_output(
    json_data: Any,
    output_format: Optional[str],
    tool_name: str,
    toon_data: Any = None,
    text_formatter: Optional[Callable[[Any], str]] = None,
) -> Union[str, Any]:
    """
    Return text, TOON, or JSON based on ``output_format``.

    Args:
        json_data: Full result (returned as-is in JSON mode)
        output_format: "text" (default), "json" or "toon"
        tool_name: Tool name for logging
        toon_data: Flattened structure for TOON (default: json_data)
        text_formatter: function(json_data) -> str for text mode

    Returns:
        - Text mode: formatted string (JSON data if no formatter is given)
        - TOON mode: TOON string, or JSON data if encoding fails
        - JSON mode / unknown formats: json_data
    """
    if output_format in (None, "text"):
        if text_formatter:
            return text_formatter(json_data)
        logger.warning(f"{tool_name} has no text formatter, falling back to JSON")
        return json_data

    if output_format == "toon":
        from toon_format import encode as toon_encode

        try:
            return toon_encode(json_data if toon_data is None else toon_data)
        except Exception as e:
            logger.warning(f"{tool_name} TOON encoding failed, falling back to JSON: {e}")
            return json_data

    return json_data


def format_suggestions_text(data: dict[str, Any]) -> str:
    """Render a suggestion result as one line per name."""
    lines = []
    header = data.get("context")
    if header:
        lines.append(f"context: {header} ({data.get('convention', '')})")
    suggestions = data.get("suggestions") or []
    if not suggestions:
        lines.append("No suggestions")
    for suggestion in suggestions:
        if isinstance(suggestion, dict):
            score = (suggestion.get("score") or {}).get("overall", "")
            lines.append(f"{suggestion.get('name', '')}  [{score}] {suggestion.get('type', '')}")
        else:
            lines.append(str(suggestion))
    similar = data.get("similar") or []
    if similar:
        lines.append("similar existing names:")
        lines.extend(f"  {s['name']} ({s['similarity']}%)" for s in similar)
    return "\n".join(lines)


def format_validation_text(data: dict[str, Any]) -> str:
    verdict = "valid" if data.get("is_valid") else "needs work"
    lines = [f"{data.get('name', '')}: {verdict} (score {data.get('score')})"]
    lines.extend(f"- {issue}" for issue in data.get("issues") or [])
    if data.get("suggestions"):
        lines.append("try: " + ", ".join(data["suggestions"]))
    return "\n".join(lines)


def format_improvement_text(data: dict[str, Any]) -> str:
    lines = [data.get("message", "")]
    lines.extend(f"  {name}" for name in data.get("suggestions") or [])
    lines.extend(f"- {issue}" for issue in data.get("issues") or [])
    return "\n".join(lines)


def format_guidelines_text(data: dict[str, Any]) -> str:
    lines = ["Conventions:"]
    lines.extend(f"  {kind}: {example}" for kind, example in data["conventions"].items())
    lines.append("Domain vocabularies:")
    for domain, vocabulary in data["domain_patterns"].items():
        lines.append(f"  {domain}: {', '.join(vocabulary['prefixes'])} | {', '.join(vocabulary['suffixes'])}")
    lines.append("Profiles: " + ", ".join(data["user_profiles"]))
    lines.append("Best practices:")
    lines.extend(f"  - {practice}" for practice in data["best_practices"])
    return "\n".join(lines)
