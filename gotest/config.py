"""Configuration read from the environment at startup."""

import os
import sys
from collections.abc import Mapping
from typing import TextIO

from pydantic import Field

from gotest.models.base import Model
from gotest.palette import Palette

PALETTE_ENV = "GOTEST_PALETTE"
SKIP_NO_TESTS_ENV = "GOTEST_SKIPNOTESTS"
LOG_LEVEL_ENV = "GOTEST_LOG_LEVEL"

# Values of $CI that force colored output on.
CI_PROVIDERS = frozenset({"true", "travis", "appveyor", "gitlab_ci", "circleci"})


class GotestConfig(Model):
    """Settings shared by the classifier, consumer and supervisor."""

    palette: Palette = Field(default_factory=Palette)
    skip_no_test_files: bool = Field(
        default=False, description="Suppress '[no test files]' lines"
    )
    color: bool = Field(default=True, description="Emit ANSI color sequences")

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        stream: TextIO | None = None,
    ) -> "GotestConfig":
        """Build the configuration from environment variables.

        Malformed values are ignored and the defaults kept.
        """
        if environ is None:
            environ = os.environ
        if stream is None:
            stream = sys.stdout

        return cls(
            palette=Palette.parse(environ.get(PALETTE_ENV, "")),
            skip_no_test_files=parse_skip_no_tests(environ.get(SKIP_NO_TESTS_ENV, "")),
            color=color_enabled(environ, stream),
        )


def parse_skip_no_tests(value: str) -> bool:
    """Return True only for a case-insensitive ``"true"``."""
    return value.lower() == "true"


def is_ci(environ: Mapping[str, str]) -> bool:
    """Check whether $CI names a provider known to render ANSI colors."""
    return environ.get("CI", "").lower() in CI_PROVIDERS


def color_enabled(environ: Mapping[str, str], stream: TextIO) -> bool:
    """Decide whether output written to ``stream`` should be colored."""
    if is_ci(environ):
        return True
    if "NO_COLOR" in environ or environ.get("TERM") == "dumb":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
