"""
Convention registry: casing rules and phrase-to-identifier transforms.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from .constants import ANCHOR
from .parsers import split_words

_MAX_SETTLE_PASSES = 4


def _camel_words(words: list[str]) -> list[str]:
    return [words[0].lower()] + [w.capitalize() for w in words[1:]]


def _pascal_words(words: list[str]) -> list[str]:
    return [w.capitalize() for w in words]


def _lower_words(words: list[str]) -> list[str]:
    return [w.lower() for w in words]


def _upper_words(words: list[str]) -> list[str]:
    return [w.upper() for w in words]


@dataclass(frozen=True)
class Convention:
    """A named casing rule with a validity predicate and a transform."""

    name: str
    pattern: re.Pattern
    separator: str
    recase: Callable[[list[str]], list[str]]
    example: str

    def test(self, candidate: str) -> bool:
        """Return True if ``candidate`` is structurally valid for this convention."""
        return bool(candidate) and self.pattern.fullmatch(candidate) is not None

    def transform(self, raw_phrase: str) -> str:
        """
        Turn a phrase (or an identifier in any convention) into this convention.

        A leading anchor character ("#") survives the transform so element ids
        keep it; every other non-alphanumeric character acts as a separator.
        The transform is idempotent.

        Examples:
            >>> CAMEL_CASE.transform("show new section")
            'showNewSection'
            >>> CONSTANT_CASE.transform("show new section")
            'SHOW_NEW_SECTION'
            >>> KEBAB_CASE.transform("# about page")
            '#about-page'
        """
        if not raw_phrase:
            return ""

        stripped = raw_phrase.strip()
        anchor = ANCHOR if stripped.startswith(ANCHOR) else ""
        body = self._join(stripped[len(anchor):])

        # Re-splitting a result can regroup single-letter words
        # ("a b" -> "AB" -> "Ab"); settle on the fixed point
        for _ in range(_MAX_SETTLE_PASSES):
            settled = self._join(body)
            if settled == body:
                break
            body = settled

        return anchor + body

    def _join(self, text: str) -> str:
        words = split_words(text)
        if not words:
            return ""
        return self.separator.join(self.recase(words))


CAMEL_CASE = Convention(
    name="camelCase",
    pattern=re.compile(r"[a-z][a-zA-Z0-9]*"),
    separator="",
    recase=_camel_words,
    example="showNewSection",
)

PASCAL_CASE = Convention(
    name="PascalCase",
    pattern=re.compile(r"[A-Z][a-zA-Z0-9]*"),
    separator="",
    recase=_pascal_words,
    example="PageData",
)

SNAKE_CASE = Convention(
    name="snake_case",
    pattern=re.compile(r"[a-z][a-z0-9_]*"),
    separator="_",
    recase=_lower_words,
    example="show_new_section",
)

KEBAB_CASE = Convention(
    name="kebab-case",
    pattern=re.compile(r"[a-z][a-z0-9\-]*"),
    separator="-",
    recase=_lower_words,
    example="show-new-section",
)

CONSTANT_CASE = Convention(
    name="CONSTANT_CASE",
    pattern=re.compile(r"[A-Z][A-Z0-9_]*"),
    separator="_",
    recase=_upper_words,
    example="SHOW_NEW_SECTION",
)

CONVENTIONS: dict[str, Convention] = {
    c.name: c for c in (CAMEL_CASE, PASCAL_CASE, SNAKE_CASE, KEBAB_CASE, CONSTANT_CASE)
}

MIXED_CASE = "mixed"

# Evaluated in order; the first matching convention names the case. A single
# lower-case word matches camelCase, snake_case and kebab-case and is reported
# as camelCase.
CASE_DETECTORS: tuple[tuple[str, Callable[[str], bool]], ...] = tuple(
    (c.name, c.test) for c in (CAMEL_CASE, PASCAL_CASE, SNAKE_CASE, KEBAB_CASE, CONSTANT_CASE)
)


def get_convention(name: Optional[str]) -> Optional[Convention]:
    """Look up a convention by its name ("camelCase", "kebab-case", ...)."""
    if not name:
        return None
    return CONVENTIONS.get(name)


def detect_case(name: str) -> str:
    """Classify an identifier by the first matching convention, else ``"mixed"``."""
    for tag, predicate in CASE_DETECTORS:
        if predicate(name):
            return tag
    return MIXED_CASE
