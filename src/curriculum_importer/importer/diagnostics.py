"""
Module: importer.diagnostics

Captures recoverable anomalies found during an import pass and generates
diagnostic reports for the operator.

Every issue has a severity, an issue type, a subject (the track or mission
directory or identifier it concerns) and a human-readable message. The
collector is passed explicitly through the pipeline; nothing in the
importer writes to output streams directly.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


_LOG_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
}


@dataclass(frozen=True)
class ImportIssue:
    """
    A single import issue.

    Fields:
    - subject: "python_basics/02_loops" or a mission id
    - issue_type: "unknown_requirement", "missing_resource", ...
    """
    severity: Severity
    issue_type: str
    subject: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity.value,
            "issue_type": self.issue_type,
            "subject": self.subject,
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.subject}: {self.message}"


class DiagnosticsCollector:
    """
    Thread-safe collector for import issues.

    Each recorded issue is also logged at the matching level so that a
    configured logging handler sees it as it happens.
    """

    def __init__(self):
        self._issues: List[ImportIssue] = []
        self._lock = threading.Lock()

    def add(self, severity: Severity, issue_type: str, subject: str, message: str) -> ImportIssue:
        issue = ImportIssue(
            severity=severity,
            issue_type=issue_type,
            subject=subject,
            message=message,
        )
        with self._lock:
            self._issues.append(issue)
        logger.log(_LOG_LEVELS[severity], f"{subject}: {message}")
        return issue

    def error(self, issue_type: str, subject: str, message: str) -> ImportIssue:
        return self.add(Severity.ERROR, issue_type, subject, message)

    def warning(self, issue_type: str, subject: str, message: str) -> ImportIssue:
        return self.add(Severity.WARNING, issue_type, subject, message)

    def info(self, issue_type: str, subject: str, message: str) -> ImportIssue:
        return self.add(Severity.INFO, issue_type, subject, message)

    # ─────────────────────────────────────────────────────────────────────
    # Typed helpers
    # ─────────────────────────────────────────────────────────────────────

    def add_missing_title(self, subject: str, fallback: str) -> None:
        """Record a track or mission without a title key."""
        self.error("missing_title", subject, f"No title, using {fallback!r}")

    def add_empty_description(self, subject: str, path: Path) -> None:
        """Record a description file with no content."""
        self.error("empty_description", subject, f"Description {path.name} is empty")

    def add_invalid_config(self, subject: str, message: str) -> None:
        """Record a config value that could not be used."""
        self.error("invalid_config", subject, message)

    def add_unreadable_file(self, subject: str, path: Path, error: Exception) -> None:
        """Record a text file that could not be decoded."""
        self.error("unreadable_file", subject, f"Cannot read {path.name}: {error}")

    def add_unknown_requirement(self, mission_id: str, requirement: str) -> None:
        """Record a prerequisite name that matches no mission in the track."""
        self.error(
            "unknown_requirement",
            mission_id,
            f"Unknown requirement {requirement!r}",
        )

    def add_circular_requirement(self, mission_id: str, requirement_id: str) -> None:
        """Record a prerequisite that would close a cycle."""
        self.error(
            "circular_requirement",
            mission_id,
            f"Circular requirement {requirement_id!r} ignored",
        )

    def add_missing_resource(self, subject: str, reference: str, resolved: Path) -> None:
        """Record a local link or image whose file does not exist."""
        self.error(
            "missing_resource",
            subject,
            f"Resource {reference!r} not found at {resolved}",
        )

    def add_duplicate_identifier(self, subject: str, identifier: str, first: Optional[Path]) -> None:
        """Record a second track/mission producing an identifier already in use."""
        where = f" (already used by {first})" if first else ""
        self.error(
            "duplicate_identifier",
            subject,
            f"Identifier {identifier!r} already in use{where}, skipped",
        )

    # ─────────────────────────────────────────────────────────────────────

    @property
    def issues(self) -> List[ImportIssue]:
        with self._lock:
            return list(self._issues)

    @property
    def issue_count(self) -> int:
        with self._lock:
            return len(self._issues)

    @property
    def has_errors(self) -> bool:
        with self._lock:
            return any(i.severity is Severity.ERROR for i in self._issues)

    def of_type(self, issue_type: str) -> List[ImportIssue]:
        with self._lock:
            return [i for i in self._issues if i.issue_type == issue_type]

    def generate_report(self) -> "ImportDiagnosticsReport":
        with self._lock:
            return ImportDiagnosticsReport.from_issues(list(self._issues))


@dataclass
class ImportDiagnosticsReport:
    """Complete diagnostics report."""
    generated_at: str
    total_issues: int
    summary_by_type: Dict[str, int]
    issues: List[ImportIssue]

    @classmethod
    def from_issues(cls, issues: List[ImportIssue]) -> "ImportDiagnosticsReport":
        summary_by_type: Dict[str, int] = {}
        for issue in issues:
            summary_by_type[issue.issue_type] = summary_by_type.get(issue.issue_type, 0) + 1

        return cls(
            generated_at=datetime.now(timezone.utc).isoformat(),
            total_issues=len(issues),
            summary_by_type=summary_by_type,
            issues=issues,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "total_issues": self.total_issues,
            "summary_by_type": self.summary_by_type,
            "issues": [issue.to_dict() for issue in self.issues],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json())
        logger.info(f"Import diagnostics saved: {path}")
