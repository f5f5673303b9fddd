"""
Module: tracks

Purpose:
    Provides the Track dataclass - a named curriculum unit whose
    subdirectories hold the track's missions.

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - core.models.missions.Mission (back-reference)
    - importer.tracks: Creates one Track per recognized directory
    - importer.repository: Persists tracks
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_REWARD = 10


@dataclass(frozen=True)
class Track:
    """
    Curriculum track (immutable).

    Attributes:
        id: Slug of the title, unique within one import
        title: Display title
        description_html: Rendered track.md
        default_languages: Ordered, de-duplicated language names inherited
            by missions that do not list their own
        default_reward: Reward inherited by missions without a reward key
        path: Source directory, for diagnostics only

    Example:
        >>> t = Track(id="Python_Basics", title="Python Basics", description_html="")
        >>> t.default_reward
        10
    """

    id: str
    title: str
    description_html: str
    default_languages: tuple[str, ...] = ()
    default_reward: int = DEFAULT_REWARD
    path: Optional[Path] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Track id cannot be empty")

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "title": self.title,
            "description_html": self.description_html,
            "default_languages": list(self.default_languages),
            "default_reward": self.default_reward,
        }
        if self.path is not None:
            d["path"] = str(self.path)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Track:
        return cls(
            id=data["id"],
            title=data["title"],
            description_html=data.get("description_html", ""),
            default_languages=tuple(data.get("default_languages", [])),
            default_reward=data.get("default_reward", DEFAULT_REWARD),
            path=Path(data["path"]) if data.get("path") else None,
        )

    def __repr__(self) -> str:
        return f"Track({self.id!r}, languages={list(self.default_languages)})"
