"""
Module: importer.config

Purpose:
    Configuration dataclasses for the import pipeline. Provides immutable
    settings for file names, the resource store location and defaults.

Key Classes:
    - ImportConfig: Main configuration for an import pass
    - StarConfig: Maps a config.ini goal key to a star kind

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - importer.pipeline: Passes ImportConfig to every stage
    - importer.tracks / importer.missions: File names and defaults
    - importer.resources: Store root and public path
"""

from dataclasses import dataclass, field
from pathlib import Path

from curriculum_importer.core.models.stars import StarKind
from curriculum_importer.core.models.tracks import DEFAULT_REWARD


@dataclass(frozen=True)
class StarConfig:
    """
    Goal key for one star kind.

    Attributes:
        kind: Star kind created when the key is present
        key: config.ini key holding the integer goal
    """
    kind: StarKind
    key: str


DEFAULT_STARS = (
    StarConfig(kind=StarKind.TIME, key="star.time.goal"),
    StarConfig(kind=StarKind.SIZE, key="star.size_goal"),
)


@dataclass(frozen=True)
class ImportConfig:
    """
    Configuration for one import pass.

    Attributes:
        store_root: Directory receiving content-addressed resources
        public_path: URL prefix under which store_root is served
        track_config_name: Track key/value file (optional)
        track_description_name: Track markdown; its presence marks a track
        mission_config_name: Mission key/value file (optional)
        mission_description_name: Mission markdown; its presence marks a mission
        testsuite_name: Mission test file (optional)
        default_reward: Track reward used when track.ini has none
        test_start_marker: Line starting a test case in tests.txt
        test_separator: Line separating input from output in tests.txt
        star_weight: Weight given to every star
        stars: Goal keys read for stars
    """
    store_root: Path = Path("static/resources")
    public_path: str = "/static/resources"
    track_config_name: str = "track.ini"
    track_description_name: str = "track.md"
    mission_config_name: str = "config.ini"
    mission_description_name: str = "mission.md"
    testsuite_name: str = "tests.txt"
    default_reward: int = DEFAULT_REWARD
    test_start_marker: str = "==="
    test_separator: str = "---"
    star_weight: int = 1
    stars: tuple[StarConfig, ...] = field(default=DEFAULT_STARS)
