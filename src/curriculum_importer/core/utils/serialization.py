"""
Serialization Utilities

Provides to/from JSON utilities for Track and Mission records.

- Clean separation: ``serialize_*`` and ``deserialize_*`` functions
- All models have ``to_dict()`` and ``from_dict()`` methods
- Basic field checks before deserialization
- Mission back-references are re-attached from the loaded tracks
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from ..models.missions import Mission
from ..models.tracks import Track


class SerializationError(ValueError):
    """Raised when a record cannot be turned back into a model."""


_TRACK_REQUIRED = ("id", "title")
_MISSION_REQUIRED = ("id", "track_id", "title")


def _check_required(data: dict[str, Any], required: tuple[str, ...], kind: str) -> None:
    missing = [f for f in required if f not in data]
    if missing:
        raise SerializationError(f"{kind} record missing required fields: {missing}")


# ─────────────────────────────────────────────────────────────────────────────
# Track Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_track(track: Track) -> dict[str, Any]:
    return track.to_dict()


def deserialize_track(data: dict[str, Any]) -> Track:
    _check_required(data, _TRACK_REQUIRED, "Track")
    return Track.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Mission Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_mission(mission: Mission) -> dict[str, Any]:
    """
    Serialize a Mission to a dictionary.

    The track back-reference is not included; ``track_id`` identifies it.
    """
    return mission.to_dict()


def deserialize_mission(
    data: dict[str, Any],
    *,
    tracks: Optional[dict[str, Track]] = None,
) -> Mission:
    """
    Deserialize a Mission from a dictionary.

    Args:
        data: Dictionary from JSON
        tracks: Optional mapping of track id to Track used to restore the
            back-reference

    Raises:
        SerializationError: If required fields are missing or invalid
    """
    _check_required(data, _MISSION_REQUIRED, "Mission")
    track = (tracks or {}).get(data["track_id"])
    try:
        return Mission.from_dict(data, track=track)
    except (KeyError, ValueError) as e:
        raise SerializationError(f"Invalid mission record {data.get('id')!r}: {e}") from e


# ─────────────────────────────────────────────────────────────────────────────
# JSONL Files
# ─────────────────────────────────────────────────────────────────────────────

def _read_jsonl(path: Path) -> list[dict[str, Any]]:
    records = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise SerializationError(f"{path.name}:{line_no}: {e}") from e
    return records


def load_tracks_jsonl(path: Path) -> dict[str, Track]:
    """Load tracks keyed by id. Later records for the same id win."""
    return {t.id: t for t in (deserialize_track(r) for r in _read_jsonl(path))}


def load_missions_jsonl(
    path: Path,
    tracks: Optional[dict[str, Track]] = None,
) -> dict[str, Mission]:
    """Load missions keyed by id. Later records for the same id win."""
    missions = (deserialize_mission(r, tracks=tracks) for r in _read_jsonl(path))
    return {m.id: m for m in missions}
