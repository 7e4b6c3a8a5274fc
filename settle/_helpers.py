"""Internal helpers shared by the combinator modules.

Not part of the public API, but usable when wiring the *M combinators
to a custom monad."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine, Iterable

from kungfu import Result

from .writer import LazyCoroResultWriter, Log, WriterResult

def identity[T](x: T) -> T:
    """Return the argument unchanged."""
    return x

# Extract functions (Raw -> Result[T, E])
def extract_writer_result[T, E, W](wr: WriterResult[T, E, Log[W]]) -> Result[T, E]:
    """Pull the Result out of a WriterResult."""
    return wr.result

# Wrap functions (Fn -> M)
def wrap_lazy_coro_result_writer[T, E, W](
    fn: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]]
) -> LazyCoroResultWriter[T, E, W]:
    """Standard wrap for the LazyCoroResultWriter sugar functions."""
    return LazyCoroResultWriter(fn)

def merge_logs[W](logs: Iterable[Log[W]]) -> Log[W]:
    """
    Merge logs left to right using the monoidal combine.

    Usage:
        merged = merge_logs(wr.log for wr in settled)
    """
    result = Log[W]()
    for log in logs:
        result = result.combine(log)
    return result

def spawn_all[Raw](
    interps: Iterable[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]],
) -> list[asyncio.Task[Raw]]:
    """Start every interp as a task on the running loop, in input order."""
    return [asyncio.create_task(i()) for i in interps]

def cancel_pending(tasks: Iterable[asyncio.Task[typing.Any]]) -> None:
    """Cancel what is still running; mark stored exceptions of the rest as retrieved."""
    for t in tasks:
        if not t.done():
            t.cancel()
        elif not t.cancelled():
            t.exception()

__all__ = (
    "identity",
    "extract_writer_result",
    "wrap_lazy_coro_result_writer",
    "merge_logs",
    "spawn_all",
    "cancel_pending",
)
