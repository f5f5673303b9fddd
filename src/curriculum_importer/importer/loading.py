"""
Module: importer.loading

Purpose:
    Reading steps shared by track and mission loading: config files,
    titles, integer values and rendered descriptions. Each step records a
    diagnostic and falls back to a default instead of raising.

Key Functions:
    - read_config(): ConfigReader, empty on parse failure
    - read_title(): ``title`` then ``name``, else a fallback
    - read_int(): Integer value or default
    - render_description(): Markdown file to HTML with resource rewriting
    - read_testsuite(): tests.txt cases, empty when absent or undecodable

Used By:
    - importer.tracks
    - importer.missions
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from curriculum_importer.common.slugs import ordered_unique, split_list
from curriculum_importer.core.models import TestCase

from .config import ImportConfig
from .config_reader import ConfigError, ConfigReader
from .diagnostics import DiagnosticsCollector
from .rendering import LinkRewriter, render_markdown
from .testsuite import load_testsuite

logger = logging.getLogger(__name__)

TITLE_KEYS = ("title", "name")


def read_config(path: Path, diagnostics: DiagnosticsCollector, subject: str) -> ConfigReader:
    try:
        return ConfigReader.from_path(path)
    except ConfigError as e:
        diagnostics.add_invalid_config(subject, str(e))
        return ConfigReader({}, path=path)


def read_title(
    config: ConfigReader,
    fallback: str,
    diagnostics: DiagnosticsCollector,
    subject: str,
) -> str:
    for key in TITLE_KEYS:
        title = config.get_str(key)
        if title:
            return title
    diagnostics.add_missing_title(subject, fallback)
    return fallback


def read_int(
    config: ConfigReader,
    key: str,
    default: Optional[int],
    diagnostics: DiagnosticsCollector,
    subject: str,
) -> Optional[int]:
    try:
        return config.get_int(key, default)
    except ConfigError as e:
        diagnostics.add_invalid_config(subject, f"{e}, using {default!r}")
        return default


def read_languages(config: ConfigReader, default: tuple[str, ...] = ()) -> tuple[str, ...]:
    """Ordered, de-duplicated ``languages`` list, or ``default`` when absent."""
    languages = ordered_unique(split_list(config.get_str("languages")))
    return languages or default


def render_description(
    path: Path,
    rewrite_link: LinkRewriter,
    diagnostics: DiagnosticsCollector,
    subject: str,
) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        diagnostics.add_unreadable_file(subject, path, e)
        return ""
    if not text.strip():
        diagnostics.add_empty_description(subject, path)
        return ""
    return render_markdown(text, rewrite_link)


def read_testsuite(
    path: Path,
    config: ImportConfig,
    diagnostics: DiagnosticsCollector,
    subject: str,
) -> List[TestCase]:
    """Test cases from ``path``; none when the file is absent or undecodable."""
    if not path.is_file():
        return []
    try:
        return load_testsuite(path, config.test_start_marker, config.test_separator)
    except UnicodeDecodeError as e:
        diagnostics.add_unreadable_file(subject, path, e)
        return []
