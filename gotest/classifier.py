"""Classify lines of ``go test`` output."""

from gotest.config import GotestConfig
from gotest.models.summary import Outcome, ResultSummary

RUN_PREFIX = "=== RUN"
NO_TEST_FILES = "[no test files]"
PASS_PREFIXES = ("--- PASS", "ok", "PASS")
SKIP_PREFIXES = ("--- SKIP",)
FAIL_PREFIXES = ("--- FAIL", "FAIL")


def classify(line: str, summary: ResultSummary, config: GotestConfig) -> Outcome | None:
    """Classify one line of output and update ``summary`` accordingly.

    Rules are matched against the line with surrounding whitespace removed,
    in order, first match wins:

    1. ``=== RUN`` lines are never counted and are printed unmodified.
    2. Lines mentioning ``[no test files]`` are suppressed when
       ``config.skip_no_test_files`` is set, otherwise uncategorized.
    3. ``--- PASS``, ``ok`` and ``PASS`` lines count as passed.
    4. ``--- SKIP`` lines count as skipped.
    5. ``--- FAIL`` and ``FAIL`` lines count as failed.

    Returns:
        The outcome of the line, or None if the line must not be printed.

    """
    trimmed = line.strip()

    if trimmed.startswith(RUN_PREFIX):
        return Outcome.RUN

    if NO_TEST_FILES in trimmed:
        if config.skip_no_test_files:
            return None
        return Outcome.UNCATEGORIZED

    if trimmed.startswith(PASS_PREFIXES):
        summary.passed += 1
        return Outcome.PASS

    if trimmed.startswith(SKIP_PREFIXES):
        summary.skipped += 1
        return Outcome.SKIP

    if trimmed.startswith(FAIL_PREFIXES):
        summary.failed += 1
        return Outcome.FAIL

    return Outcome.UNCATEGORIZED
