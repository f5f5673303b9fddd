"""Identifier and list utilities.

Provides the slug function used for every persisted track and mission
identifier, plus the small list helpers used when reading config values.
"""

from __future__ import annotations

import re
from typing import Iterable

# ASCII-only on purpose: str.isalnum() would accept non-ASCII letters
# and digits, and identifiers must not depend on the Unicode database.
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def slugify(text: str) -> str:
    """Normalize free text into an identifier-safe slug.

    Every maximal run of non-alphanumeric characters becomes a single
    underscore. Leading and trailing runs are kept as one underscore each.

    Args:
        text: Title or other free text.

    Returns:
        Slug string. Idempotent: ``slugify(slugify(x)) == slugify(x)``.

    Examples:
        >>> slugify("abcXYZ123_")
        'abcXYZ123_'
        >>> slugify(", 'A[]\\nB#$_")
        '_A_B_'
        >>> slugify("Hello, World!")
        'Hello_World_'
    """
    return _NON_ALNUM.sub("_", text)


def mission_id(track_id: str, title: str) -> str:
    """Build the canonical mission identifier ``<track_id>:<slug(title)>``.

    Examples:
        >>> mission_id("Python_Basics", "Hello world")
        'Python_Basics:Hello_world'
    """
    return f"{track_id}:{slugify(title)}"


def split_list(value: str | None) -> list[str]:
    """Split a comma-separated config value into trimmed, non-empty items.

    Examples:
        >>> split_list(" loops, ,functions ")
        ['loops', 'functions']
        >>> split_list(None)
        []
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def ordered_unique(items: Iterable[str]) -> tuple[str, ...]:
    """Drop repeated items, keeping first-occurrence order."""
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return tuple(result)
