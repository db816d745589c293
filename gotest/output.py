"""Write classified lines and the final summary to the terminal."""

import sys
from dataclasses import dataclass, field
from typing import TextIO

from colorama import Fore, Style

from gotest.models.summary import ResultSummary
from gotest.palette import Color

SUMMARY_HEADER = "Summary:"


@dataclass(frozen=True, kw_only=True)
class ColorWriter:
    """Writes lines to a text stream, optionally wrapped in ANSI colors."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)
    color: bool = True

    def write_line(self, line: str, color: Color | None) -> None:
        """Write ``line`` in ``color``, then reset the terminal color.

        The reset is emitted even when no color was selected.
        """
        if self.color and color is not None:
            self.stream.write(color.ansi)
        self.stream.write(f"{line}\n")
        if self.color:
            self.stream.write(Style.RESET_ALL)
        self.stream.flush()

    def write_plain(self, line: str) -> None:
        """Write ``line`` unmodified, without touching the terminal color."""
        self.stream.write(f"{line}\n")
        self.stream.flush()

    def write_summary(self, summary: ResultSummary) -> None:
        """Write the end-of-run counts in fixed colors."""
        self._write_colored(Fore.CYAN, SUMMARY_HEADER)
        self._write_colored(Fore.WHITE, f"Total: {summary.total}")
        self._write_colored(Fore.GREEN, f"PASS: {summary.passed}")
        self._write_colored(Fore.YELLOW, f"SKIP: {summary.skipped}")
        self._write_colored(Fore.RED, f"FAIL: {summary.failed}")
        self.stream.flush()

    def _write_colored(self, ansi: str, text: str) -> None:
        if self.color:
            self.stream.write(f"{ansi}{text}{Style.RESET_ALL}\n")
        else:
            self.stream.write(f"{text}\n")
