"""
Already-settled tasks, and bridges from exception-based code.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import Interp


def pure[T](value: T) -> Interp[T, Never]:
    """
    Task that settles as ``Ok(value)``.

    Example:
        from settle import lift as L

        result = await L.up.pure(7)  # Ok(7)
    """
    return LazyCoroResult.pure(value)


def fail[E](error: E) -> Interp[Never, E]:
    """Task that settles as ``Error(error)``. Dual of pure()."""
    async def settled() -> Result[Never, E]:
        return Error(error)

    return LazyCoroResult(settled)


def catching_async[T, E](
    thunk: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Exception], E],
) -> Interp[T, E]:
    """
    Await ``thunk()``; an exception settles the task as Error(on_error(exc)).

    Keeps the original exception reachable through ``on_error`` where
    chain() would otherwise just count the raise as a failure.
    """
    async def guarded() -> Result[T, E]:
        try:
            value = await thunk()
        except Exception as exc:
            return Error(on_error(exc))
        return Ok(value)

    return LazyCoroResult(guarded)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Interp[T, E]:
    """Sync flavour of catching_async()."""
    async def run_sync() -> T:
        return thunk()

    return catching_async(run_sync, on_error=on_error)


__all__ = (
    "pure",
    "fail",
    "catching",
    "catching_async",
)
