"""Models for classified test output."""

from dataclasses import dataclass
from enum import StrEnum


class Outcome(StrEnum):
    """Category assigned to a line of test output."""

    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"
    RUN = "run"
    UNCATEGORIZED = "uncategorized"


@dataclass(kw_only=True)
class ResultSummary:
    """Running counts of classified lines.

    Counters only ever increase. Uncategorized lines are not counted, so
    ``total`` can be smaller than the number of lines consumed.
    """

    passed: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        """Number of lines counted in any category."""
        return self.passed + self.failed + self.skipped
