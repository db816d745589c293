"""Drain the wrapped process's output and classify it line by line."""

import asyncio
import logging

from gotest.classifier import classify
from gotest.config import GotestConfig
from gotest.models.summary import Outcome, ResultSummary
from gotest.output import ColorWriter

log = logging.getLogger(__name__)

NEWLINE = b"\n"
DISCARD_CHUNK_SIZE = 64 * 1024


async def read_line(reader: asyncio.StreamReader) -> bytes:
    """Read one line, however long, including its trailing newline.

    Lines longer than the reader's limit are collected in pieces. At EOF the
    remaining bytes are returned without a newline, or ``b""`` if none are
    left.
    """
    line = bytearray()
    while True:
        try:
            line += await reader.readuntil(NEWLINE)
        except asyncio.LimitOverrunError as exc:
            line += await reader.readexactly(exc.consumed)
            continue
        except asyncio.IncompleteReadError as exc:
            line += exc.partial
        return bytes(line)


async def discard(reader: asyncio.StreamReader) -> None:
    """Read and drop everything up to EOF so the writer never blocks."""
    try:
        while await reader.read(DISCARD_CHUNK_SIZE):
            pass
    except OSError as exc:
        log.debug("Stopped discarding test output: %s", exc)


async def consume(
    reader: asyncio.StreamReader,
    config: GotestConfig,
    writer: ColorWriter,
) -> ResultSummary:
    """Classify and print every line from ``reader``, then print the summary.

    A trailing chunk without a newline is dropped. A read error ends
    consumption early; the summary of what was read so far is still printed.
    If the output itself cannot be written, the rest of the stream is
    discarded and no summary is printed.

    Returns:
        The summary of the lines classified.

    """
    summary = ResultSummary()

    while True:
        try:
            raw = await read_line(reader)
        except OSError as exc:
            log.error("Reading test output failed: %s", exc)
            await discard(reader)
            break

        if not raw.endswith(NEWLINE):
            break

        line = raw.decode(errors="replace").removesuffix("\n").removesuffix("\r")
        outcome = classify(line, summary, config)
        if outcome is None:
            continue
        try:
            if outcome is Outcome.RUN:
                writer.write_plain(line)
            else:
                writer.write_line(line, config.palette.color_for(outcome))
        except OSError as exc:
            log.error("Writing test output failed: %s", exc)
            await discard(reader)
            return summary

    try:
        writer.write_summary(summary)
    except OSError as exc:
        log.error("Writing test summary failed: %s", exc)
    return summary
