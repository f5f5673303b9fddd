"""
Module: stars

Purpose:
    Provides the Star dataclass - an optional scoring goal attached to a
    mission. Two kinds exist: a time goal (CPU / instruction budget) and a
    size goal (code-size budget).

Key Functions:
    - Star.time(goal): Create a time-budget star
    - Star.size(goal): Create a code-size star

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.missions.Mission
    - importer.missions: Builds stars from config.ini goals
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StarKind(str, Enum):
    """Kind of budget a star measures."""
    TIME = "time"
    SIZE = "size"


STAR_LABELS = {
    StarKind.TIME: "Fast solution",
    StarKind.SIZE: "Short solution",
}


@dataclass(frozen=True, slots=True)
class Star:
    """
    Named scoring goal (immutable).

    Attributes:
        kind: StarKind.TIME or StarKind.SIZE
        name: Stable machine name ("time" or "size")
        label: Display label
        weight: Relative weight when scoring
        goal: Numeric threshold to beat (instructions or bytes)

    Invariants:
        - goal >= 0
        - weight >= 0
    """

    kind: StarKind
    name: str
    label: str
    weight: int
    goal: int

    def __post_init__(self) -> None:
        if self.goal < 0:
            raise ValueError(f"Star goal cannot be negative: {self.goal}")
        if self.weight < 0:
            raise ValueError(f"Star weight cannot be negative: {self.weight}")

    @classmethod
    def time(cls, goal: int, weight: int = 1) -> Star:
        """Create a time-budget star."""
        return cls(
            kind=StarKind.TIME,
            name=StarKind.TIME.value,
            label=STAR_LABELS[StarKind.TIME],
            weight=weight,
            goal=goal,
        )

    @classmethod
    def size(cls, goal: int, weight: int = 1) -> Star:
        """Create a code-size star."""
        return cls(
            kind=StarKind.SIZE,
            name=StarKind.SIZE.value,
            label=STAR_LABELS[StarKind.SIZE],
            weight=weight,
            goal=goal,
        )

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "label": self.label,
            "weight": self.weight,
            "goal": self.goal,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Star:
        kind = StarKind(data["kind"])
        return cls(
            kind=kind,
            name=data.get("name", kind.value),
            label=data.get("label", STAR_LABELS[kind]),
            weight=data.get("weight", 1),
            goal=data["goal"],
        )

    def __repr__(self) -> str:
        return f"Star({self.name!r}, goal={self.goal}, weight={self.weight})"
