"""Core utilities."""

from .serialization import (
    SerializationError,
    serialize_track,
    deserialize_track,
    serialize_mission,
    deserialize_mission,
    load_tracks_jsonl,
    load_missions_jsonl,
)

__all__ = [
    "SerializationError",
    "serialize_track",
    "deserialize_track",
    "serialize_mission",
    "deserialize_mission",
    "load_tracks_jsonl",
    "load_missions_jsonl",
]
