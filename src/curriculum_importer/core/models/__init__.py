"""
Core Models Package

Immutable data models for imported curriculum data.

All persisted models are frozen dataclasses; the only mutable type is
MissionDraft, which exists solely between the two passes of the mission
graph builder.
"""

from .stars import Star, StarKind
from .testcases import TestCase
from .tracks import Track, DEFAULT_REWARD
from .missions import Mission, MissionDraft

__all__ = [
    "Star",
    "StarKind",
    "TestCase",
    "Track",
    "DEFAULT_REWARD",
    "Mission",
    "MissionDraft",
]
