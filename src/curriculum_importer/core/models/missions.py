"""
Module: missions

Purpose:
    Provides the Mission dataclass (immutable, canonical parents) and the
    MissionDraft builder (mutable, human-typed requirement names).

    Missions are built in two passes. The first pass creates a MissionDraft
    for every mission directory, keeping the prerequisite names exactly as
    typed in config.ini. Once every draft of the track exists, the second
    pass resolves those names to canonical identifiers and freezes each
    draft into a Mission. This allows a mission to require one that is
    discovered later in the directory listing.

Key Functions:
    - MissionDraft.freeze(parents): Build the final Mission
    - Mission.to_dict() / Mission.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .stars.Star, .testcases.TestCase, .tracks.Track

Used By:
    - importer.missions: Mission graph builder
    - importer.repository: Persists missions
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .stars import Star
from .testcases import TestCase
from .tracks import Track


@dataclass(frozen=True)
class Mission:
    """
    Single exercise unit (immutable).

    Attributes:
        id: ``<track_id>:<slug(title)>``
        track_id: Owning track identifier
        title: Display title
        description_html: Rendered mission.md
        path: Source directory, for diagnostics only
        parents: Canonical identifiers of prerequisite missions
        solve_reward: Reward for solving the mission
        languages: Ordered language names
        stars: Optional scoring goals
        testsuite: Ordered test cases
        track: Back-reference to the owning Track (not compared, not serialized)

    Invariants:
        - id starts with ``track_id + ":"``
        - parents never contains id itself
    """

    id: str
    track_id: str
    title: str
    description_html: str
    path: Optional[Path] = None
    parents: tuple[str, ...] = ()
    solve_reward: int = 0
    languages: tuple[str, ...] = ()
    stars: tuple[Star, ...] = ()
    testsuite: tuple[TestCase, ...] = ()
    track: Optional[Track] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.id.startswith(f"{self.track_id}:"):
            raise ValueError(
                f"Mission id {self.id!r} must start with track id {self.track_id!r}"
            )
        if self.id in self.parents:
            raise ValueError(f"Mission {self.id!r} cannot require itself")

    @property
    def test_count(self) -> int:
        return len(self.testsuite)

    def summary(self) -> str:
        """One-line import summary: identifier, test count, languages."""
        return (
            f"{self.id}: {self.test_count} tests, "
            f"languages: {', '.join(self.languages) or '-'}"
        )

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "track_id": self.track_id,
            "title": self.title,
            "description_html": self.description_html,
            "parents": list(self.parents),
            "solve_reward": self.solve_reward,
            "languages": list(self.languages),
            "stars": [star.to_dict() for star in self.stars],
            "testsuite": [case.to_dict() for case in self.testsuite],
        }
        if self.path is not None:
            d["path"] = str(self.path)
        return d

    @classmethod
    def from_dict(cls, data: dict, track: Optional[Track] = None) -> Mission:
        return cls(
            id=data["id"],
            track_id=data["track_id"],
            title=data["title"],
            description_html=data.get("description_html", ""),
            path=Path(data["path"]) if data.get("path") else None,
            parents=tuple(data.get("parents", [])),
            solve_reward=data.get("solve_reward", 0),
            languages=tuple(data.get("languages", [])),
            stars=tuple(Star.from_dict(s) for s in data.get("stars", [])),
            testsuite=tuple(TestCase.from_dict(c) for c in data.get("testsuite", [])),
            track=track,
        )


@dataclass
class MissionDraft:
    """
    Mutable builder for a Mission before its requirements are resolved.

    ``requirements`` holds prerequisite names as typed by the author: the
    base names of sibling mission directories, not identifiers.
    """

    id: str
    track: Track
    title: str
    description_html: str
    path: Path
    requirements: list[str] = field(default_factory=list)
    solve_reward: int = 0
    languages: tuple[str, ...] = ()
    stars: list[Star] = field(default_factory=list)
    testsuite: list[TestCase] = field(default_factory=list)

    def freeze(self, parents: list[str]) -> Mission:
        """Build the immutable Mission with canonical parent identifiers."""
        return Mission(
            id=self.id,
            track_id=self.track.id,
            title=self.title,
            description_html=self.description_html,
            path=self.path,
            parents=tuple(parents),
            solve_reward=self.solve_reward,
            languages=self.languages,
            stars=tuple(self.stars),
            testsuite=tuple(self.testsuite),
            track=self.track,
        )
