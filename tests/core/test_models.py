"""
Unit Tests for Track, Mission, Star and TestCase models.
"""

import pytest
from dataclasses import FrozenInstanceError
from pathlib import Path

from curriculum_importer.core.models import (
    Mission,
    MissionDraft,
    Star,
    StarKind,
    TestCase,
    Track,
)


@pytest.fixture
def track() -> Track:
    return Track(
        id="Python_Basics",
        title="Python Basics",
        description_html="<p>Intro</p>",
        default_languages=("python",),
    )


class TestTrack:

    def test_init_when_no_reward_then_defaults_to_ten(self, track):
        assert track.default_reward == 10

    def test_init_when_empty_id_then_raises_error(self):
        with pytest.raises(ValueError, match="Track id cannot be empty"):
            Track(id="", title="", description_html="")

    def test_track_is_frozen(self, track):
        with pytest.raises(FrozenInstanceError):
            track.title = "Other"  # type: ignore[misc]

    def test_from_dict_restores_track(self, track):
        assert Track.from_dict(track.to_dict()) == track


class TestStar:

    def test_time_star_has_time_kind(self):
        star = Star.time(1000)
        assert star.kind is StarKind.TIME
        assert star.name == "time"
        assert star.goal == 1000
        assert star.weight == 1

    def test_size_star_has_size_kind(self):
        star = Star.size(200, weight=2)
        assert star.kind is StarKind.SIZE
        assert star.weight == 2

    def test_init_when_negative_goal_then_raises_error(self):
        with pytest.raises(ValueError, match="goal cannot be negative"):
            Star.time(-1)

    def test_to_dict_uses_kind_value(self):
        assert Star.size(50).to_dict()["kind"] == "size"


class TestMission:

    def test_init_when_id_outside_track_then_raises_error(self, track):
        with pytest.raises(ValueError, match="must start with track id"):
            Mission(id="Other:Loops", track_id=track.id, title="Loops", description_html="")

    def test_init_when_requires_itself_then_raises_error(self, track):
        with pytest.raises(ValueError, match="cannot require itself"):
            Mission(
                id="Python_Basics:Loops",
                track_id=track.id,
                title="Loops",
                description_html="",
                parents=("Python_Basics:Loops",),
            )

    def test_equality_ignores_track_back_reference(self, track):
        a = Mission(id="Python_Basics:A", track_id=track.id, title="A", description_html="", track=track)
        b = Mission(id="Python_Basics:A", track_id=track.id, title="A", description_html="")
        assert a == b

    def test_to_dict_excludes_track_back_reference(self, track):
        m = Mission(id="Python_Basics:A", track_id=track.id, title="A", description_html="", track=track)
        assert "track" not in m.to_dict()

    def test_summary_lists_tests_and_languages(self, track):
        m = Mission(
            id="Python_Basics:A",
            track_id=track.id,
            title="A",
            description_html="",
            languages=("python", "c"),
            testsuite=(TestCase("1\n", "1\n"),),
        )
        assert m.summary() == "Python_Basics:A: 1 tests, languages: python, c"


class TestMissionDraft:

    def test_freeze_replaces_requirements_with_parents(self, track):
        draft = MissionDraft(
            id="Python_Basics:Loops",
            track=track,
            title="Loops",
            description_html="",
            path=Path("/curriculum/python_basics/02_loops"),
            requirements=["01_hello", "unknown"],
            solve_reward=10,
            languages=("python",),
            stars=[Star.time(100)],
            testsuite=[TestCase("a\n", "b\n")],
        )

        mission = draft.freeze(["Python_Basics:Hello"])

        assert mission.parents == ("Python_Basics:Hello",)
        assert mission.track is track
        assert mission.track_id == "Python_Basics"
        assert mission.stars == (Star.time(100),)
        assert mission.testsuite == (TestCase("a\n", "b\n"),)
