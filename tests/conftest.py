import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import curriculum_importer
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from curriculum_importer.importer import DiagnosticsCollector, ImportConfig, ResourceStore


LOGO_BYTES = b"\x89PNG\r\n\x1a\nfake-logo"


def write_mission(
    track_dir: Path,
    name: str,
    config: str = "",
    description: str = "Solve it.\n",
    tests: str | None = None,
) -> Path:
    """Create a mission directory with mission.md and optional files."""
    mission_dir = track_dir / name
    mission_dir.mkdir(parents=True, exist_ok=True)
    (mission_dir / "mission.md").write_text(description, encoding="utf-8")
    if config:
        (mission_dir / "config.ini").write_text(config, encoding="utf-8")
    if tests is not None:
        (mission_dir / "tests.txt").write_text(tests, encoding="utf-8")
    return mission_dir


def write_track(root: Path, name: str, config: str = "", description: str = "A track.\n") -> Path:
    """Create a track directory with track.md and optional track.ini."""
    track_dir = root / name
    track_dir.mkdir(parents=True, exist_ok=True)
    (track_dir / "track.md").write_text(description, encoding="utf-8")
    if config:
        (track_dir / "track.ini").write_text(config, encoding="utf-8")
    return track_dir


# Common test fixtures
@pytest.fixture
def import_config(tmp_path: Path) -> ImportConfig:
    """Import configuration with the store inside tmp_path."""
    return ImportConfig(store_root=tmp_path / "store", public_path="/static/resources")


@pytest.fixture
def store(import_config: ImportConfig) -> ResourceStore:
    return ResourceStore(import_config.store_root, import_config.public_path)


@pytest.fixture
def diagnostics() -> DiagnosticsCollector:
    return DiagnosticsCollector()


@pytest.fixture
def curriculum_root(tmp_path: Path) -> Path:
    """
    Build a small curriculum:

    python_basics/            title "Python Basics", languages python, python3
        logo.png
        01_hello/             tests, no config languages
        02_loops/             requires 01_hello, stars, own languages
        03_functions/         requires 02_loops and an unknown mission
        notes/                no mission.md, ignored
    drafts/                   no track.md, ignored
    """
    root = tmp_path / "curriculum"
    track_dir = write_track(
        root,
        "python_basics",
        config="title = Python Basics\nlanguages = python, python3, python\nreward = 15\n",
        description="# Python\n\n![logo](logo.png)\n",
    )
    (track_dir / "logo.png").write_bytes(LOGO_BYTES)

    write_mission(
        track_dir,
        "01_hello",
        config="title = Hello World\n",
        tests="===\nAda\n---\nHello, Ada!\n===\nBob\n---\nHello, Bob!\n",
    )
    write_mission(
        track_dir,
        "02_loops",
        config=(
            "title = Loops\n"
            "req = 01_hello\n"
            "languages = python\n"
            "reward = 20\n"
            "star.time.goal = 1000\n"
            "star.size_goal = 200\n"
        ),
        description=(
            "Reuse the logo: ![logo](../logo.png)\n\n"
            "Remote: ![remote](https://example.com/x.png)\n"
        ),
    )
    write_mission(
        track_dir,
        "03_functions",
        config="title = Functions\nreq = 02_loops, 99_missing\n",
    )
    (track_dir / "notes").mkdir()
    (track_dir / "notes" / "todo.txt").write_text("nothing\n")

    drafts = root / "drafts"
    drafts.mkdir()
    (drafts / "readme.txt").write_text("not a track\n")
    return root


@pytest.fixture
def make_track():
    return write_track


@pytest.fixture
def make_mission():
    return write_mission
