"""CLI entry point wrapping ``go test`` with colored output."""

import asyncio
import logging
import os
import sys
from collections.abc import Sequence

from gotest.config import LOG_LEVEL_ENV, GotestConfig
from gotest.supervisor import run

DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(level_name: str) -> None:
    """Send log records to stderr, away from the test output."""
    level = logging.getLevelNamesMapping().get(level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point.

    Every argument is passed through to ``go test``; there are no options of
    our own.
    """
    args = sys.argv[1:] if argv is None else list(argv)

    configure_logging(os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))
    config = GotestConfig.from_environ()

    exit_code = asyncio.run(run(args, config))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
