"""
Chain combinators
=================

Settle-all-then-reduce: wait for every task to settle, keep what
succeeded in the order it settled, fold it with a binary action.
"""

from __future__ import annotations

import asyncio
import functools
import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import NoSuccessfulResultsError
from .._helpers import (
    cancel_pending,
    extract_writer_result,
    identity,
    merge_logs,
    spawn_all,
    wrap_lazy_coro_result_writer,
)
from .._types import Reducer
from ..writer import LazyCoroResultWriter, Log, WriterResult


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def chainM[M, T, E, RawIn, RawOut](
    interps: Sequence[Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    action: Reducer[T],
    *,
    extract: Callable[[RawIn], Result[T, E]],
    combine_ok: Callable[[T, list[RawIn]], RawOut],
    combine_empty: Callable[[list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic settle-all-then-reduce combinator.

    Args:
        interps: Computations to run concurrently
        action: Binary fold, applied left to right over successful values
                in settlement order, seeded with the first of them
        extract: Function to extract Result[T, E] from each RawIn
        combine_ok: Builds RawOut from the folded value and every settled
                    raw (settlement order), so logs can be merged
        combine_empty: Builds RawOut when nothing succeeded
        wrap: Constructor to wrap the thunk back into monad M

    Failed inputs only count as settled, whether they produced an Error or
    raised. Their errors never reach RawOut. Cancellation still propagates.
    """

    async def run() -> RawOut:
        tasks = spawn_all(interps)
        try:
            settled: list[RawIn] = []
            successes: list[T] = []

            for fut in asyncio.as_completed(tasks):
                try:
                    raw = await fut
                except Exception:
                    # A raising task settles as a failure.
                    continue
                settled.append(raw)
                match extract(raw):
                    case Ok(value):
                        successes.append(value)
                    case Error(_):
                        pass

            if not successes:
                return combine_empty(settled)
            return combine_ok(functools.reduce(action, successes), settled)
        finally:
            cancel_pending(tasks)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def chain[T, E](
    interps: Sequence[LazyCoroResult[T, E]],
    action: Reducer[T],
) -> LazyCoroResult[T, NoSuccessfulResultsError]:
    """
    Run all, fold the successes with ``action`` in settlement order.

    Individual failures are skipped, Error results and raised exceptions
    alike. Fails with NoSuccessfulResultsError
    only when nothing succeeded (including an empty ``interps``).

    Example:
        await chain([pure(1), pure(2), pure(3)], operator.add)  # Ok(6)
    """
    def combine_ok(value: T, raws: list[Result[T, E]]) -> Result[T, NoSuccessfulResultsError]:
        _ = raws
        return Ok(value)

    def combine_empty(raws: list[Result[T, E]]) -> Result[T, NoSuccessfulResultsError]:
        _ = raws
        return Error(NoSuccessfulResultsError(len(interps)))

    return chainM(
        interps,
        action,
        extract=identity,
        combine_ok=combine_ok,
        combine_empty=combine_empty,
        wrap=LazyCoroResult,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def chain_w[T, E, W](
    interps: Sequence[LazyCoroResultWriter[T, E, W]],
    action: Reducer[T],
) -> LazyCoroResultWriter[T, NoSuccessfulResultsError, W]:
    """
    Run all, fold the successes in settlement order.

    Logs of every settled computation are merged in settlement order,
    failed ones included.
    """
    def combine_ok(
        value: T,
        raws: list[WriterResult[T, E, Log[W]]],
    ) -> WriterResult[T, NoSuccessfulResultsError, Log[W]]:
        return WriterResult(Ok(value), merge_logs(wr.log for wr in raws))

    def combine_empty(
        raws: list[WriterResult[T, E, Log[W]]],
    ) -> WriterResult[T, NoSuccessfulResultsError, Log[W]]:
        merged = merge_logs(wr.log for wr in raws)
        return WriterResult(Error(NoSuccessfulResultsError(len(interps))), merged)

    return chainM(
        interps,
        action,
        extract=extract_writer_result,
        combine_ok=combine_ok,
        combine_empty=combine_empty,
        wrap=wrap_lazy_coro_result_writer,
    )


__all__ = ("chain", "chain_w", "chainM")
