"""
Race combinators
================

First-to-settle: the result is whatever settles first, Ok or Error.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import LazyCoroResult

from .._helpers import cancel_pending, spawn_all, wrap_lazy_coro_result_writer
from ..writer import LazyCoroResultWriter
from .policy import RacePolicy


def fastestM[M, Raw](
    interps: Sequence[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]],
    *,
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
    policy: RacePolicy = RacePolicy(),
) -> M:
    """
    Generic first-to-settle combinator.

    No extract needed: the winner's raw is returned untouched.
    """

    async def run() -> Raw:
        if not interps:
            raise ValueError("fastestM() requires at least one interpretation")

        tasks = spawn_all(interps)
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
            # Several may finish in the same loop step; input order breaks the tie.
            winner = next(t for t in tasks if t in done)
            return winner.result()
        finally:
            if policy.cancel_pending:
                cancel_pending(tasks)

    return wrap(run)


def fastest[T, E](
    interps: Sequence[LazyCoroResult[T, E]],
    *,
    policy: RacePolicy = RacePolicy(),
) -> LazyCoroResult[T, E]:
    """Settle exactly like the first input to settle."""
    return fastestM(interps, wrap=LazyCoroResult, policy=policy)


def fastest_w[T, E, W](
    interps: Sequence[LazyCoroResultWriter[T, E, W]],
    *,
    policy: RacePolicy = RacePolicy(),
) -> LazyCoroResultWriter[T, E, W]:
    """
    Settle exactly like the first input to settle.

    NOTE: Only the winner's log is preserved.
    """
    return fastestM(interps, wrap=wrap_lazy_coro_result_writer, policy=policy)


__all__ = ("fastest", "fastest_w", "fastestM")
