"""
Word parsing for identifiers and free-text phrases.
"""

import re

# Acronym run before a capitalised word, a word holding at least one lower-case
# letter, or an upper-case/digit run: "HTTPServer" -> HTTP, Server;
# "OAuth2Client" -> O, Auth2, Client; "2D_CANVAS" -> 2D, CANVAS
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]*[a-z][a-z0-9]*|[A-Z0-9]+")
_SEPARATORS = re.compile(r"[\s_\-]+")
_NON_WORD = re.compile(r"[^a-z0-9\s\-_]")
_BOUNDARIES = re.compile(r"(?=[A-Z])|[\-_]")


def split_words(phrase: str) -> list[str]:
    """
    Split a phrase or identifier into words, keeping the original casing.

    Splits on whitespace, hyphens and underscores, then on case transitions
    inside each chunk. Characters that are neither letters nor digits are
    dropped.

    Examples:
        >>> split_words("show new section")
        ['show', 'new', 'section']
        >>> split_words("showNewSection")
        ['show', 'New', 'Section']
        >>> split_words("HTTPServer")
        ['HTTP', 'Server']
        >>> split_words("SHOW_NEW_SECTION")
        ['SHOW', 'NEW', 'SECTION']
    """
    if not phrase:
        return []

    words = []
    for chunk in _SEPARATORS.split(phrase):
        words.extend(_WORD_PATTERN.findall(chunk))
    return words


def extract_words(phrase: str) -> list[str]:
    """
    Extract the lower-case base words used to seed suggestion generation.

    Everything outside ``[a-z0-9]``, whitespace, hyphen and underscore becomes a
    separator; case transitions are not split.

    Examples:
        >>> extract_words("Show the NEW section!")
        ['show', 'the', 'new', 'section']
    """
    if not phrase:
        return []

    cleaned = _NON_WORD.sub(" ", phrase.lower())
    return [word for word in _SEPARATORS.split(cleaned) if word]


def split_identifier(identifier: str) -> list[str]:
    """
    Split an existing identifier before every capital letter and on ``-``/``_``.

    Used for prefix/suffix statistics, where "HTTPServer" counting as
    H, T, T, P, Server is acceptable and cheap.
    """
    if not identifier:
        return []
    return [part for part in _BOUNDARIES.split(identifier) if part]
