"""Delay combinators

Sleep before running. Gives tasks a deterministic settlement time."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine

from kungfu import LazyCoroResult

from .._helpers import wrap_lazy_coro_result_writer
from ..writer import LazyCoroResultWriter

# Generic combinator (extract + wrap pattern)
def delayM[M, Raw](
    interp: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    *,
    seconds: float,
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """Generic delay combinator."""
    if seconds < 0.0:
        raise ValueError("delay seconds must be >= 0")

    async def run() -> Raw:
        if seconds > 0.0:
            await asyncio.sleep(seconds)
        return await interp()

    return wrap(run)

# Sugar for LazyCoroResult
def delay[T, E](
    interp: LazyCoroResult[T, E],
    *,
    seconds: float,
) -> LazyCoroResult[T, E]:
    """Sleep, then run."""
    return delayM(interp, seconds=seconds, wrap=LazyCoroResult)

# Sugar for LazyCoroResultWriter
def delay_w[T, E, W](
    interp: LazyCoroResultWriter[T, E, W],
    *,
    seconds: float,
) -> LazyCoroResultWriter[T, E, W]:
    """Sleep, then run. Log untouched."""
    return delayM(interp, seconds=seconds, wrap=wrap_lazy_coro_result_writer)

__all__ = ("delay", "delay_w", "delayM")
