"""
User preference profiles for personalized naming.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Literal, Mapping, Optional

Verbosity = Literal["terse", "medium", "verbose"]
CreativityLevel = Literal["conservative", "balanced", "creative"]
AbbreviationTolerance = Literal["none", "low", "medium", "high"]


@dataclass(frozen=True)
class UserPreferences:
    """
    A personalization bundle that reweights and filters suggestions.

    case_preference: Convention name suggestions are rendered in
        ("camelCase", "PascalCase", "snake_case", "kebab-case", "CONSTANT_CASE")
    verbosity: "terse" keeps only the first three prefixes/suffixes of a context;
        "medium" and "verbose" keep them all
    domain_focus: "audio", "visual", "text", "navigation" or "general"
    creativity_level: "conservative" disables prefix + word + suffix candidates
    abbreviation_tolerance: "none" penalises case transitions and drops
        candidates much shorter than the input
    """

    case_preference: str = "camelCase"
    verbosity: Verbosity = "medium"
    domain_focus: str = "general"
    creativity_level: CreativityLevel = "balanced"
    abbreviation_tolerance: AbbreviationTolerance = "low"

    def to_dict(self) -> dict:
        return asdict(self)


PREFERENCE_FIELDS = frozenset(f.name for f in fields(UserPreferences))

USER_PROFILES: dict[str, UserPreferences] = {
    "DEFAULT": UserPreferences(),
    "DEVELOPER": UserPreferences(
        case_preference="camelCase",
        verbosity="terse",
        domain_focus="general",
        creativity_level="conservative",
        abbreviation_tolerance="medium",
    ),
    "ARTIST": UserPreferences(
        case_preference="kebab-case",
        verbosity="verbose",
        domain_focus="visual",
        creativity_level="creative",
        abbreviation_tolerance="low",
    ),
    "MUSICIAN": UserPreferences(
        case_preference="camelCase",
        verbosity="medium",
        domain_focus="audio",
        creativity_level="creative",
        abbreviation_tolerance="low",
    ),
    "WRITER": UserPreferences(
        case_preference="snake_case",
        verbosity="verbose",
        domain_focus="text",
        creativity_level="creative",
        abbreviation_tolerance="none",
    ),
}


def get_profile(name: Optional[str]) -> Optional[UserPreferences]:
    """Look up a built-in profile by name, case-insensitively ("Artist" == "ARTIST")."""
    if not isinstance(name, str):
        return None
    return USER_PROFILES.get(name.strip().upper())


def merge_preferences(
    preferences: UserPreferences, partial: Mapping[str, Any]
) -> tuple[UserPreferences, list[str]]:
    """
    Shallow-merge ``partial`` into ``preferences``.

    Returns:
        The merged preferences and the keys that were ignored because they
        are not preference fields.
    """
    known = {k: v for k, v in partial.items() if k in PREFERENCE_FIELDS}
    ignored = [k for k in partial if k not in PREFERENCE_FIELDS]
    return replace(preferences, **known), ignored
