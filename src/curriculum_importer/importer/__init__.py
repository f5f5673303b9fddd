"""
Curriculum import pipeline.

Public API:
- import_tracks: Run one import pass over a curriculum root
- ImportConfig: Pass configuration
- DiagnosticsCollector: Structured issue collection
- InMemoryRepository / JsonlRepository: Record destinations
"""

from .config import ImportConfig, StarConfig
from .diagnostics import DiagnosticsCollector, ImportIssue, Severity
from .graph import DependencyGraph, CycleError, UnknownNodeError
from .pipeline import ImportResult, import_tracks
from .repository import InMemoryRepository, JsonlRepository, Repository
from .resources import ResourceRewriter, ResourceStore
from .testsuite import parse_testsuite

__all__ = [
    "ImportConfig",
    "StarConfig",
    "DiagnosticsCollector",
    "ImportIssue",
    "Severity",
    "DependencyGraph",
    "CycleError",
    "UnknownNodeError",
    "ImportResult",
    "import_tracks",
    "InMemoryRepository",
    "JsonlRepository",
    "Repository",
    "ResourceRewriter",
    "ResourceStore",
    "parse_testsuite",
]
