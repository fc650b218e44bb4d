"""
Integration API: simple string-in, string-out helpers over the search engine.

Hosts that only need "give me a good function name for X" use
``NamingAssistant`` instead of working with contexts and score objects.
"""

import logging
from typing import Any, Iterable, Mapping, Optional

from nomenclator.engine import NameSearchEngine
from nomenclator.naming.analysis import CorpusAnalysis
from nomenclator.naming.contexts import CLASS_NAME, CONSTANT, FUNCTION, PAGE_ID, VARIABLE, get_context
from nomenclator.naming.patterns import DOMAIN_PATTERNS
from nomenclator.preferences import USER_PROFILES

logger = logging.getLogger("nomenclator.assistant")

VALID_THRESHOLD = 70
DEFAULT_SUGGESTIONS = 5
VALIDATION_SUGGESTIONS = 3

BEST_PRACTICES = (
    "Use descriptive names that clearly indicate purpose",
    "Follow consistent casing conventions throughout the project",
    "Prefer full words over abbreviations for better readability",
    "Use domain-specific prefixes (sound, vision, words, etc.)",
    "Keep function names action-oriented with verbs",
    "Use nouns for variables and data structures",
    "Follow the established patterns in the existing codebase",
)


class NamingAssistant:
    """Convenience wrapper returning plain names, flags and messages."""

    def __init__(self, engine: Optional[NameSearchEngine] = None, profile: Optional[str] = None):
        self.engine = engine or NameSearchEngine()
        self.engine.initialize()
        if profile:
            self.engine.set_user_profile(profile)

    def suggest(
        self,
        description: str,
        kind: Optional[str] = None,
        max_results: int = DEFAULT_SUGGESTIONS,
        existing_names: Optional[Iterable[str]] = None,
    ) -> list[str]:
        """
        Suggested names for ``description``, best first.

        Args:
            description: What the name should mean
            kind: "function", "variable", "constant", "page", "class" or "id";
                anything else auto-detects the context
            max_results: Maximum names returned
            existing_names: Names to compare against for near-duplicates
        """
        result = self.engine.search(
            description,
            context=get_context(kind),
            max_results=max_results,
            existing_names=existing_names,
        )
        return [s.name for s in result.suggestions]

    def suggest_best(self, description: str, kind: Optional[str] = None) -> Optional[str]:
        suggestions = self.suggest(description, kind)
        return suggestions[0] if suggestions else None

    def validate(self, name: str, meaning: str, kind: Optional[str] = None) -> dict[str, Any]:
        """
        Check an existing name.

        Returns:
            Dict with is_valid (overall >= 70), score, issues and, for invalid
            names, up to three suggested replacements.
        """
        result = self.engine.validate_name(name, meaning, get_context(kind))
        is_valid = result.score.overall >= VALID_THRESHOLD
        return {
            "name": name,
            "is_valid": is_valid,
            "score": result.score.overall,
            "issues": result.recommendations,
            "suggestions": (
                [] if is_valid else self.suggest(meaning, kind, max_results=VALIDATION_SUGGESTIONS)
            ),
        }

    def improve(self, name: str, meaning: str) -> dict[str, Any]:
        result = self.engine.get_improvement_suggestions(name, meaning)
        return {
            "name": name,
            "message": result.message,
            "suggestions": [s.name for s in result.suggestions],
            "issues": result.issues,
        }

    def set_profile(self, profile_name: str) -> "NamingAssistant":
        self.engine.set_user_profile(profile_name)
        return self

    def analyze_codebase(self) -> Optional[CorpusAnalysis]:
        return self.engine.code_analysis

    def generate_guidelines(self) -> dict[str, Any]:
        """Project naming guidelines: convention per context, domain vocabularies, profiles."""
        return {
            "conventions": {
                "functions": FUNCTION.convention.example,
                "variables": VARIABLE.convention.example,
                "page_ids": PAGE_ID.convention.example,
                "class_names": CLASS_NAME.convention.example,
                "constants": CONSTANT.convention.example,
            },
            "domain_patterns": {
                pattern.name: {
                    "prefixes": list(pattern.prefixes),
                    "suffixes": list(pattern.suffixes),
                }
                for pattern in DOMAIN_PATTERNS
            },
            "user_profiles": list(USER_PROFILES),
            "active_profile": self.engine.user_preferences.to_dict(),
            "best_practices": list(BEST_PRACTICES),
        }

    def audit_names(
        self,
        page_ids: Optional[Mapping[str, str]] = None,
        function_names: Iterable[str] = (),
    ) -> dict[str, dict[str, Any]]:
        """
        Validate existing page ids and function names, reporting the invalid ones.

        Page ids are checked against the meaning "<key> page"; function names
        against themselves, which catches convention and readability problems.

        Returns:
            Mapping of key (page ids) or name (functions) to
            {current, suggestions, issues} for every name that failed.
        """
        findings: dict[str, dict[str, Any]] = {}

        for key, page_id in (page_ids or {}).items():
            validation = self.validate(page_id, f"{key} page", "page")
            if not validation["is_valid"]:
                findings[key] = {
                    "current": page_id,
                    "suggestions": validation["suggestions"],
                    "issues": validation["issues"],
                }

        for function_name in function_names:
            validation = self.validate(function_name, function_name, "function")
            if not validation["is_valid"]:
                findings[function_name] = {
                    "current": function_name,
                    "suggestions": validation["suggestions"],
                    "issues": validation["issues"],
                }

        if findings:
            logger.info(f"Audit found {len(findings)} names needing attention")
        return findings


def suggest_function_name(assistant: NamingAssistant, description: str) -> Optional[str]:
    return assistant.suggest_best(description, "function")


def suggest_variable_name(assistant: NamingAssistant, description: str) -> Optional[str]:
    return assistant.suggest_best(description, "variable")


def suggest_page_id(assistant: NamingAssistant, description: str) -> Optional[str]:
    return assistant.suggest_best(description, "page")


def suggest_class_name(assistant: NamingAssistant, description: str) -> Optional[str]:
    return assistant.suggest_best(description, "class")
