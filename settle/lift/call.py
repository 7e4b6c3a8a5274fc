"""
Calling async functions as tasks.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult, Result

from .._types import Interp


def call[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Interp[T, E]:
    """
    Defer ``func(*args, **kwargs)`` into a task.

    Nothing runs until the task does, and every run calls ``func`` again.

    Example:
        totals = chain([L.call(shard.fetch_count) for shard in shards], operator.add)
    """
    async def invoke() -> Result[T, E]:
        return await func(*args, **kwargs)

    return LazyCoroResult(invoke)


def wrap_async[T, E](
    thunk: Callable[[], Awaitable[Result[T, E]]],
) -> Interp[T, E]:
    """call() for a zero-argument thunk."""
    return call(thunk)


__all__ = (
    "call",
    "wrap_async",
)
