"""
Module: testcases

Purpose:
    Provides the TestCase dataclass - one (input, expected output) pair
    from a mission's tests.txt file. Order within a mission is significant.

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.missions.Mission
    - importer.testsuite
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TestCase:
    """
    Single input/output test case.

    Text blocks are stored exactly as accumulated by the parser: every
    line keeps its trailing newline and nothing is trimmed.

    Example:
        >>> case = TestCase("1 2\\n", "3\\n")
        >>> case.input
        '1 2\\n'
    """

    # Not a pytest test class despite the name.
    __test__ = False

    input: str
    output: str

    def to_dict(self) -> dict:
        return {"input": self.input, "output": self.output}

    @classmethod
    def from_dict(cls, data: dict) -> TestCase:
        return cls(input=data.get("input", ""), output=data.get("output", ""))
