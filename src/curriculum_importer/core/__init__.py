"""
Curriculum Importer Core Package

Shared data models and serialization helpers. These models are the single
source of truth for everything the importer produces.

1. **Immutable Data Models**
   - Track, Mission, Star and TestCase are frozen dataclasses
   - Changes produce new instances (``dataclasses.replace``)

2. **Canonical Identifiers Only**
   - A Mission's ``parents`` holds canonical mission ids, never the names
     typed in config.ini
"""

from .models import Star, StarKind, TestCase, Track, Mission, MissionDraft

__all__ = [
    "Star",
    "StarKind",
    "TestCase",
    "Track",
    "Mission",
    "MissionDraft",
]
