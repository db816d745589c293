"""Tests for colored output."""

import io

from colorama import Fore, Style

from gotest.models.summary import ResultSummary
from gotest.output import ColorWriter
from gotest.palette import Color


def test_write_line_with_color() -> None:
    """Sets the color, writes the line, then resets."""
    stream = io.StringIO()

    ColorWriter(stream=stream).write_line("--- PASS: TestFoo", Color.GREEN)

    assert stream.getvalue() == f"{Fore.GREEN}--- PASS: TestFoo\n{Style.RESET_ALL}"


def test_write_line_always_resets() -> None:
    """Uncolored lines are still followed by a reset."""
    stream = io.StringIO()

    ColorWriter(stream=stream).write_line("coverage: 80%", None)

    assert stream.getvalue() == f"coverage: 80%\n{Style.RESET_ALL}"


def test_write_line_without_color_support() -> None:
    """No escape sequences are written when colors are disabled."""
    stream = io.StringIO()

    ColorWriter(stream=stream, color=False).write_line("FAIL", Color.HIRED)

    assert stream.getvalue() == "FAIL\n"


def test_write_plain() -> None:
    """Plain lines are written unmodified."""
    stream = io.StringIO()

    ColorWriter(stream=stream).write_plain("=== RUN   TestFoo")

    assert stream.getvalue() == "=== RUN   TestFoo\n"


def test_write_summary_plain() -> None:
    """Summary lists total, pass, skip and fail counts."""
    stream = io.StringIO()

    ColorWriter(stream=stream, color=False).write_summary(
        ResultSummary(passed=3, failed=1, skipped=2)
    )

    assert stream.getvalue() == (
        "Summary:\nTotal: 6\nPASS: 3\nSKIP: 2\nFAIL: 1\n"
    )


def test_write_summary_colors() -> None:
    """Summary colors are fixed regardless of palette."""
    stream = io.StringIO()

    ColorWriter(stream=stream).write_summary(ResultSummary(passed=1))

    lines = stream.getvalue().splitlines()
    assert lines == [
        f"{Fore.CYAN}Summary:{Style.RESET_ALL}",
        f"{Fore.WHITE}Total: 1{Style.RESET_ALL}",
        f"{Fore.GREEN}PASS: 1{Style.RESET_ALL}",
        f"{Fore.YELLOW}SKIP: 0{Style.RESET_ALL}",
        f"{Fore.RED}FAIL: 0{Style.RESET_ALL}",
    ]
