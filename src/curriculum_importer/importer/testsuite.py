"""
Module: importer.testsuite

Purpose:
    Parse a mission's tests.txt into ordered input/output test cases.

    Format::

        ===
        <input lines>
        ---
        <expected output lines>
        ===
        <input lines>
        ---
        <expected output lines>

    The leading ``===`` is optional. The end of the document closes the
    last case as if another ``===`` followed it.

Key Functions:
    - parse_testsuite(): Parse text into TestCase records
    - load_testsuite(): Read and parse a file

Used By:
    - importer.missions: Mission test suites
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from curriculum_importer.core.models.testcases import TestCase

logger = logging.getLogger(__name__)

START_MARKER = "==="
SEPARATOR = "---"


def parse_testsuite(
    text: str,
    start_marker: str = START_MARKER,
    separator: str = SEPARATOR,
) -> List[TestCase]:
    """
    Parse delimited test text into TestCase records.

    Input lines accumulate until the first separator line of a case; every
    following line belongs to the output until the next start marker, so a
    separator inside an output section is plain output. Each accumulated
    line keeps a trailing newline. Empty sections are kept as "". Lines end
    at ``\\n`` (an ``\\r`` before it is dropped).

    Args:
        text: Raw content of tests.txt.
        start_marker: Line that starts a case.
        separator: Line between input and output.

    Returns:
        Cases in document order. Blank documents yield no cases.

    Example:
        >>> cases = parse_testsuite("===\\n1 2\\n---\\n3\\n")
        >>> cases[0].input, cases[0].output
        ('1 2\\n', '3\\n')
    """
    if not text.strip():
        return []

    # Only "\n" ends a line; other control characters are case content.
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    if lines and lines[0] == start_marker:
        lines = lines[1:]
    lines.append(start_marker)

    cases: List[TestCase] = []
    input_lines: List[str] = []
    output_lines: List[str] = []
    in_output = False

    for line in lines:
        if line == start_marker:
            cases.append(TestCase("".join(input_lines), "".join(output_lines)))
            input_lines, output_lines = [], []
            in_output = False
        elif line == separator and not in_output:
            in_output = True
        elif in_output:
            output_lines.append(line + "\n")
        else:
            input_lines.append(line + "\n")

    return cases


def load_testsuite(
    path: Path,
    start_marker: str = START_MARKER,
    separator: str = SEPARATOR,
) -> List[TestCase]:
    """Read ``path`` as UTF-8 and parse it."""
    cases = parse_testsuite(path.read_text(encoding="utf-8"), start_marker, separator)
    logger.debug(f"Parsed {len(cases)} test cases from {path}")
    return cases
