"""Relay signals received by this process to the wrapped process."""

import asyncio
import logging
import signal
from collections.abc import AsyncGenerator, Iterable
from contextlib import asynccontextmanager
from typing import Any

log = logging.getLogger(__name__)

# Uncatchable and fault signals, plus SIGCHLD which the event loop relies on
UNFORWARDABLE = frozenset(
    getattr(signal, name)
    for name in (
        "SIGKILL",
        "SIGSTOP",
        "SIGSEGV",
        "SIGBUS",
        "SIGFPE",
        "SIGILL",
        "SIGCHLD",
    )
    if hasattr(signal, name)
)


def forwardable_signals() -> frozenset[signal.Signals]:
    """Return every signal that can be relayed to a child process."""
    return frozenset(
        sig
        for sig in signal.valid_signals()
        if isinstance(sig, signal.Signals) and sig not in UNFORWARDABLE
    )


async def _relay(
    process: asyncio.subprocess.Process,
    queue: asyncio.Queue[signal.Signals | None],
) -> None:
    while (sig := await queue.get()) is not None:
        log.debug("Forwarding %s to pid %d", sig.name, process.pid)
        try:
            process.send_signal(sig)
        except ProcessLookupError:
            log.debug("Process %d already exited", process.pid)


@asynccontextmanager
async def forward_signals(
    process: asyncio.subprocess.Process,
    signals: Iterable[signal.Signals] | None = None,
) -> AsyncGenerator[None]:
    """Forward signals to ``process`` while the context is active.

    On exit the relay task is stopped and awaited and the previous signal
    dispositions are restored.
    """
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[signal.Signals | None] = asyncio.Queue()
    installed: dict[signal.Signals, Any] = {}

    for sig in forwardable_signals() if signals is None else signals:
        previous = signal.getsignal(sig)
        try:
            loop.add_signal_handler(sig, queue.put_nowait, sig)
        except NotImplementedError:
            log.debug("Signal forwarding is not supported on this platform")
            break
        except (OSError, RuntimeError, ValueError) as exc:
            log.debug("Cannot forward %s: %s", sig.name, exc)
            continue
        installed[sig] = previous

    relay = asyncio.create_task(_relay(process, queue))
    try:
        yield
    finally:
        queue.put_nowait(None)
        await relay
        for sig, previous in installed.items():
            loop.remove_signal_handler(sig)
            if previous is not None:
                signal.signal(sig, previous)
