"""
Context rules: usage-site vocabularies bound to a convention.

Contexts are immutable templates. Callers that need a different convention or
a shorter vocabulary derive a copy with ``dataclasses.replace`` (see
``NamingContext.adjusted``) so no caller ever sees another caller's changes.
"""

import re
from dataclasses import dataclass, replace
from typing import Optional

from . import constants
from .conventions import CAMEL_CASE, CONSTANT_CASE, KEBAB_CASE, Convention


@dataclass(frozen=True)
class NamingContext:
    """A usage-site classification: one convention plus prefix/suffix vocabularies."""

    name: str
    convention: Convention
    prefixes: tuple[str, ...]
    suffixes: tuple[str, ...]
    # Leading character the context accepts in front of a valid name
    anchor: Optional[str] = None
    anchor_required: bool = False
    # Full-name pattern for anchored names; None checks the rest with the convention
    anchored_pattern: Optional[re.Pattern] = None

    def validate(self, name: str) -> bool:
        """Check ``name`` against the bound convention (and anchor rules)."""
        if not name:
            return False
        if self.anchor and name.startswith(self.anchor):
            if self.anchored_pattern is not None:
                return self.anchored_pattern.fullmatch(name) is not None
            return self.convention.test(name[len(self.anchor):])
        if self.anchor_required:
            return False
        return self.convention.test(name)

    def adjusted(
        self,
        convention: Optional[Convention] = None,
        vocabulary_size: Optional[int] = None,
    ) -> "NamingContext":
        """Return a copy with a substituted convention and/or truncated vocabularies."""
        changes = {}
        if convention is not None:
            changes["convention"] = convention
        if vocabulary_size is not None:
            changes["prefixes"] = self.prefixes[:vocabulary_size]
            changes["suffixes"] = self.suffixes[:vocabulary_size]
        return replace(self, **changes) if changes else self


FUNCTION = NamingContext(
    name="function",
    convention=CAMEL_CASE,
    prefixes=constants.FUNCTION_PREFIXES,
    suffixes=constants.FUNCTION_SUFFIXES,
)

VARIABLE = NamingContext(
    name="variable",
    convention=CAMEL_CASE,
    prefixes=constants.VARIABLE_PREFIXES,
    suffixes=constants.VARIABLE_SUFFIXES,
)

CONSTANT = NamingContext(
    name="constant",
    convention=CONSTANT_CASE,
    prefixes=constants.CONSTANT_PREFIXES,
    suffixes=constants.CONSTANT_SUFFIXES,
)

CLASS_NAME = NamingContext(
    name="class",
    convention=KEBAB_CASE,
    prefixes=constants.CLASS_NAME_PREFIXES,
    suffixes=constants.CLASS_NAME_SUFFIXES,
)

ID = NamingContext(
    name="id",
    convention=CAMEL_CASE,
    prefixes=constants.ID_PREFIXES,
    suffixes=constants.ID_SUFFIXES,
    anchor=constants.ANCHOR,
    anchored_pattern=re.compile(re.escape(constants.ANCHOR) + r"[a-zA-Z][a-zA-Z0-9]*"),
)

PAGE_ID = NamingContext(
    name="page",
    convention=KEBAB_CASE,
    prefixes=constants.PAGE_ID_PREFIXES,
    suffixes=constants.PAGE_ID_SUFFIXES,
    anchor=constants.ANCHOR,
    anchor_required=True,
)

CONTEXTS: dict[str, NamingContext] = {
    c.name: c for c in (FUNCTION, VARIABLE, CONSTANT, CLASS_NAME, ID, PAGE_ID)
}


def get_context(name: Optional[str]) -> Optional[NamingContext]:
    """Look up a context by kind ("function", "variable", "page", ...)."""
    if not name:
        return None
    return CONTEXTS.get(name.lower())
