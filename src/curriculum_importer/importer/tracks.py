"""
Module: importer.tracks

Purpose:
    Build a Track from one track directory.

    A directory is a track only if it contains track.md. track.ini is
    optional and supplies the title, default languages and default reward.

Key Functions:
    - is_track_dir(): Recognition check
    - load_track(): Build the Track

Used By:
    - importer.pipeline
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

from curriculum_importer.common.slugs import slugify
from curriculum_importer.core.models import Track

from .config import ImportConfig
from .diagnostics import DiagnosticsCollector
from .loading import read_config, read_int, read_languages, read_title, render_description
from .resources import ResourceRewriter, ResourceStore

logger = logging.getLogger(__name__)


def is_track_dir(path: Path, config: ImportConfig) -> bool:
    return path.is_dir() and (path / config.track_description_name).is_file()


def load_track(
    track_dir: Path,
    *,
    diagnostics: DiagnosticsCollector,
    config: ImportConfig,
    store: ResourceStore,
    known: Optional[Mapping[str, Track]] = None,
) -> Optional[Track]:
    """
    Build the Track for ``track_dir``.

    Args:
        track_dir: Directory possibly holding track.md and track.ini.
        diagnostics: Receives missing title / empty description / invalid
            config / missing resource / duplicate identifier issues.
        config: Import configuration.
        store: Resource store for images and links in track.md.
        known: Tracks already imported, by id.

    Returns:
        Track, or None when track_dir has no track.md or its id is
        already in ``known``.
    """
    if not is_track_dir(track_dir, config):
        logger.debug(f"Skipping {track_dir}: no {config.track_description_name}")
        return None

    subject = track_dir.name
    cfg = read_config(track_dir / config.track_config_name, diagnostics, subject)
    title = read_title(cfg, track_dir.name, diagnostics, subject)
    track_id = slugify(title)
    if known is not None and track_id in known:
        diagnostics.add_duplicate_identifier(subject, track_id, known[track_id].path)
        return None

    rewriter = ResourceRewriter(store, track_dir, diagnostics, subject)
    description = render_description(
        track_dir / config.track_description_name, rewriter, diagnostics, subject
    )

    track = Track(
        id=track_id,
        title=title,
        description_html=description,
        default_languages=read_languages(cfg),
        default_reward=read_int(cfg, "reward", config.default_reward, diagnostics, subject),
        path=track_dir,
    )
    logger.info(f"Loaded track {track.id} from {track_dir}")
    return track
