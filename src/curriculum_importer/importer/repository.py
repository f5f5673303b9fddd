"""
Module: importer.repository

Purpose:
    Destinations for finished Track and Mission records.

Key Classes:
    - Repository: Protocol the importer saves through
    - InMemoryRepository: Dict-backed, used by tests and embedding callers
    - JsonlRepository: Appends records to tracks.jsonl / missions.jsonl

Dependencies:
    - importer.file_locking: Locked JSONL appends

Used By:
    - importer.pipeline / importer.missions
    - scripts/import_curriculum.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Protocol

from curriculum_importer.core.models import Mission, Track
from curriculum_importer.core.utils.serialization import serialize_mission, serialize_track

from .file_locking import locked_append_jsonl

logger = logging.getLogger(__name__)

TRACKS_FILENAME = "tracks.jsonl"
MISSIONS_FILENAME = "missions.jsonl"


class Repository(Protocol):
    def save_track(self, track: Track) -> None:
        ...

    def save_mission(self, mission: Mission) -> None:
        ...


class InMemoryRepository:
    """Keeps saved records keyed by id; saving an id again replaces it."""

    def __init__(self):
        self.tracks: Dict[str, Track] = {}
        self.missions: Dict[str, Mission] = {}

    def save_track(self, track: Track) -> None:
        self.tracks[track.id] = track

    def save_mission(self, mission: Mission) -> None:
        self.missions[mission.id] = mission

    def missions_for(self, track_id: str) -> list[Mission]:
        return [m for m in self.missions.values() if m.track_id == track_id]


class JsonlRepository:
    """
    Appends one JSON line per saved record.

    Each import pass appends; readers keep the last record per id
    (see ``core.utils.serialization.load_missions_jsonl``).
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    @property
    def tracks_path(self) -> Path:
        return self.output_dir / TRACKS_FILENAME

    @property
    def missions_path(self) -> Path:
        return self.output_dir / MISSIONS_FILENAME

    def save_track(self, track: Track) -> None:
        locked_append_jsonl(self.tracks_path, serialize_track(track))
        logger.debug(f"Saved track {track.id}")

    def save_mission(self, mission: Mission) -> None:
        locked_append_jsonl(self.missions_path, serialize_mission(mission))
        logger.debug(f"Saved mission {mission.id}")
