"""Common utilities shared across the importer."""

from __future__ import annotations

from .slugs import (
    slugify,
    mission_id,
    split_list,
    ordered_unique,
)

__all__ = [
    "slugify",
    "mission_id",
    "split_list",
    "ordered_unique",
]
