"""
Module: importer.missions

Purpose:
    Mission graph builder. Turns the mission directories of one track into
    Mission records whose ``parents`` are canonical mission identifiers
    forming a cycle-free prerequisite relation.

    Pass 1 builds a MissionDraft per mission directory, keeping the ``req``
    names exactly as typed (sibling directory base names), and adds every
    draft to the track's DependencyGraph as a node.

    Pass 2 resolves each draft's names. An unknown name or a requirement
    that would close a cycle is reported and dropped; every other
    requirement becomes an edge ``required -> mission`` and its canonical
    id is recorded. The draft is then frozen and saved.

Key Functions:
    - is_mission_dir(): Recognition check
    - load_mission_draft(): Pass 1 for one directory
    - resolve_requirements(): Pass 2 for one draft
    - build_missions(): Both passes for a track

Dependencies:
    - importer.graph: DependencyGraph
    - importer.loading / importer.resources

Used By:
    - importer.pipeline
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from curriculum_importer.common.slugs import mission_id, split_list
from curriculum_importer.core.models import Mission, MissionDraft, Star, StarKind, Track

from .config import ImportConfig
from .diagnostics import DiagnosticsCollector
from .graph import DependencyGraph
from .loading import (
    read_config,
    read_int,
    read_languages,
    read_testsuite,
    read_title,
    render_description,
)
from .repository import Repository
from .resources import ResourceRewriter, ResourceStore

logger = logging.getLogger(__name__)

_STAR_FACTORIES = {
    StarKind.TIME: Star.time,
    StarKind.SIZE: Star.size,
}


def is_mission_dir(path: Path, config: ImportConfig) -> bool:
    return path.is_dir() and (path / config.mission_description_name).is_file()


def load_mission_draft(
    mission_dir: Path,
    track: Track,
    *,
    diagnostics: DiagnosticsCollector,
    config: ImportConfig,
    store: ResourceStore,
    known: Optional[Mapping[str, MissionDraft]] = None,
) -> Optional[MissionDraft]:
    """
    Build the pass-1 draft for ``mission_dir``.

    Title falls back to the directory name, languages to the track's
    default languages and reward to the track's default reward. Stars are
    created only for goal keys present in config.ini.

    Returns:
        The draft, or None when its id is already in ``known``. Duplicates
        are reported before the description is rendered, so none of their
        resources reach the store.
    """
    subject = f"{track.id}/{mission_dir.name}"
    cfg = read_config(mission_dir / config.mission_config_name, diagnostics, subject)
    title = read_title(cfg, mission_dir.name, diagnostics, subject)
    draft_id = mission_id(track.id, title)
    if known is not None and draft_id in known:
        diagnostics.add_duplicate_identifier(subject, draft_id, known[draft_id].path)
        return None

    rewriter = ResourceRewriter(store, mission_dir, diagnostics, subject)
    description = render_description(
        mission_dir / config.mission_description_name, rewriter, diagnostics, subject
    )

    stars: List[Star] = []
    for star_config in config.stars:
        goal = read_int(cfg, star_config.key, None, diagnostics, subject)
        if goal is None:
            continue
        try:
            stars.append(_STAR_FACTORIES[star_config.kind](goal, weight=config.star_weight))
        except ValueError as e:
            diagnostics.add_invalid_config(subject, f"{star_config.key}: {e}")

    return MissionDraft(
        id=draft_id,
        track=track,
        title=title,
        description_html=description,
        path=mission_dir,
        requirements=split_list(cfg.get_str("req")),
        solve_reward=read_int(cfg, "reward", track.default_reward, diagnostics, subject),
        languages=read_languages(cfg, track.default_languages),
        stars=stars,
        testsuite=read_testsuite(
            mission_dir / config.testsuite_name, config, diagnostics, subject
        ),
    )


def resolve_requirements(
    draft: MissionDraft,
    drafts_by_name: Dict[str, MissionDraft],
    graph: DependencyGraph,
    diagnostics: DiagnosticsCollector,
) -> List[str]:
    """
    Resolve a draft's requirement names to canonical ids, adding edges.

    Args:
        draft: Mission whose ``requirements`` are resolved.
        drafts_by_name: Track missions keyed by directory base name.
        graph: Track graph; gains one edge per accepted requirement.
        diagnostics: Receives unknown/circular requirement issues.

    Returns:
        Canonical parent ids in ``req`` order, each at most once.
    """
    parents: List[str] = []
    for name in draft.requirements:
        required = drafts_by_name.get(name)
        if required is None:
            diagnostics.add_unknown_requirement(draft.id, name)
            continue
        if required.id in parents:
            continue
        if graph.would_create_cycle(required.id, draft.id):
            diagnostics.add_circular_requirement(draft.id, required.id)
            continue
        graph.add_edge(required.id, draft.id)
        parents.append(required.id)
    return parents


def build_missions(
    track: Track,
    track_dir: Path,
    *,
    repository: Repository,
    diagnostics: DiagnosticsCollector,
    config: ImportConfig,
    store: ResourceStore,
    graph: Optional[DependencyGraph] = None,
) -> List[Mission]:
    """
    Build, validate and save every mission of ``track``.

    Process:
    1. List track_dir children in name order
    2. Load a draft for each directory holding mission.md
    3. Add every draft to the graph
    4. Resolve requirements per draft, in the same order
    5. Freeze each draft with its canonical parents and save it

    Args:
        track: Owning track (already saved).
        track_dir: The track's directory.
        repository: Receives each finished Mission.
        diagnostics: Receives every recoverable issue.
        config: Import configuration.
        store: Resource store shared by the import pass.
        graph: Optional empty graph to populate, for callers that want to
            inspect the result. A new one is used otherwise.

    Returns:
        Saved missions in directory order.
    """
    graph = graph if graph is not None else DependencyGraph()
    drafts: List[MissionDraft] = []
    drafts_by_name: Dict[str, MissionDraft] = {}
    drafts_by_id: Dict[str, MissionDraft] = {}

    for child in sorted(track_dir.iterdir(), key=lambda p: p.name):
        if not is_mission_dir(child, config):
            continue
        draft = load_mission_draft(
            child,
            track,
            diagnostics=diagnostics,
            config=config,
            store=store,
            known=drafts_by_id,
        )
        if draft is None:
            continue
        drafts.append(draft)
        drafts_by_name[child.name] = draft
        drafts_by_id[draft.id] = draft

    for draft in drafts:
        graph.add_node(draft.id)

    missions: List[Mission] = []
    for draft in drafts:
        parents = resolve_requirements(draft, drafts_by_name, graph, diagnostics)
        mission = draft.freeze(parents)
        repository.save_mission(mission)
        missions.append(mission)
        logger.info(mission.summary())

    logger.info(f"Track {track.id}: {len(missions)} missions, {len(graph.edges)} requirements")
    logger.debug(f"Track {track.id} order: {', '.join(graph.topological_order())}")
    return missions
