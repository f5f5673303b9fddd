"""
Module: importer.pipeline

Purpose:
    Main entry point for a curriculum import pass. Walks the track
    directories under a root, saves each Track, then builds and saves the
    track's missions.

Key Functions:
    - import_tracks(): Run one import pass

Key Classes:
    - ImportResult: Container for import output

Used By:
    - scripts/import_curriculum.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from curriculum_importer.core.models import Mission, Track

from .config import ImportConfig
from .diagnostics import DiagnosticsCollector
from .missions import build_missions
from .repository import Repository
from .resources import ResourceStore
from .tracks import load_track

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """
    Result of one import pass.

    Attributes:
        tracks: Saved tracks in directory order.
        missions: Saved missions, grouped by track, in directory order.
        diagnostics: Every recoverable issue found.
        store_root: Resource store directory.
    """
    tracks: List[Track]
    missions: List[Mission]
    diagnostics: DiagnosticsCollector
    store_root: Path
    summaries: List[str] = field(default_factory=list)

    @property
    def mission_count(self) -> int:
        return len(self.missions)

    def missions_for(self, track_id: str) -> List[Mission]:
        return [m for m in self.missions if m.track_id == track_id]


def import_tracks(
    root: Path,
    repository: Repository,
    *,
    config: Optional[ImportConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> ImportResult:
    """
    Import every track directory directly under ``root``.

    Tracks are processed one at a time in name order; each track's
    prerequisite graph is built from scratch, so requirements never cross
    tracks. Recoverable problems are recorded in ``diagnostics`` and the
    pass always runs to completion.

    Args:
        root: Directory whose children are track directories.
        repository: Receives every Track and Mission.
        config: Optional import configuration.
        diagnostics: Optional collector to record into.

    Returns:
        ImportResult with saved records and diagnostics.

    Raises:
        FileNotFoundError: If root is not a directory.

    Example:
        >>> repo = InMemoryRepository()
        >>> result = import_tracks(Path("curriculum"), repo)
        >>> print(f"Imported {result.mission_count} missions")
        Imported 12 missions
    """
    config = config or ImportConfig()
    diagnostics = diagnostics if diagnostics is not None else DiagnosticsCollector()

    if not root.is_dir():
        raise FileNotFoundError(f"Curriculum root not found: {root}")

    store = ResourceStore(config.store_root, config.public_path)
    tracks: List[Track] = []
    missions: List[Mission] = []
    seen_tracks: Dict[str, Track] = {}

    for track_dir in sorted(root.iterdir(), key=lambda p: p.name):
        track = load_track(
            track_dir,
            diagnostics=diagnostics,
            config=config,
            store=store,
            known=seen_tracks,
        )
        if track is None:
            continue
        seen_tracks[track.id] = track

        repository.save_track(track)
        tracks.append(track)
        missions.extend(
            build_missions(
                track,
                track_dir,
                repository=repository,
                diagnostics=diagnostics,
                config=config,
                store=store,
            )
        )

    logger.info(
        f"Imported {len(tracks)} tracks, {len(missions)} missions, "
        f"{diagnostics.issue_count} issues"
    )
    return ImportResult(
        tracks=tracks,
        missions=missions,
        diagnostics=diagnostics,
        store_root=store.root,
        summaries=[m.summary() for m in missions],
    )
