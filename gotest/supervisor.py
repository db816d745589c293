"""Run ``go test`` and supervise it until its output is fully drained."""

import asyncio
import logging
import os
from collections.abc import Sequence

from gotest.config import GotestConfig
from gotest.consumer import consume
from gotest.output import ColorWriter
from gotest.signals import forward_signals

log = logging.getLogger(__name__)

GO_PROGRAM = "go"
TEST_SUBCOMMAND = "test"
# Reader buffer size; longer lines are read in pieces.
LINE_LIMIT = 1024 * 1024


async def run(
    args: Sequence[str],
    config: GotestConfig,
    *,
    writer: ColorWriter | None = None,
    program: str = GO_PROGRAM,
) -> int:
    """Run ``go test`` with ``args`` and return the exit code to report.

    Both output streams of the child are merged into a single pipe that is
    classified and printed while the child runs. The exit code is only
    computed once the summary has been printed.

    Args:
        args: Arguments passed verbatim after ``go test``
        config: Startup configuration
        writer: Destination for colored output (default: stdout)
        program: Executable providing the ``test`` subcommand

    Returns:
        The child's exit status, or 1 if it could not be started or did not
        exit normally.

    """
    if writer is None:
        writer = ColorWriter(color=config.color)

    argv = [program, TEST_SUBCOMMAND, *args]
    log.debug("Starting %s", " ".join(argv))
    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
            env=os.environ.copy(),
            limit=LINE_LIMIT,
        )
    except OSError as exc:
        log.error("Failed to start %s: %s", program, exc)
        return 1

    if process.stdout is None:
        raise RuntimeError("go test output pipe was not created")
    consumer = asyncio.create_task(consume(process.stdout, config, writer))

    async with forward_signals(process):
        returncode = await process.wait()

    await consumer
    log.debug("%s exited with %d", program, returncode)

    return exit_code(returncode)


def exit_code(returncode: int | None) -> int:
    """Map a child return code to this program's exit code.

    Negative return codes mean the child was killed by a signal and has no
    exit status of its own.
    """
    if returncode is None or returncode < 0:
        return 1
    return returncode
