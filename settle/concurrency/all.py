"""
Aggregate-all combinators
=========================

All-or-nothing: every value in input order, or the first failure to settle.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import (
    cancel_pending,
    extract_writer_result,
    identity,
    merge_logs,
    spawn_all,
    wrap_lazy_coro_result_writer,
)
from ..writer import LazyCoroResultWriter, Log, WriterResult
from .policy import AllPolicy


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def process_allM[M, T, E, RawIn, RawOut](
    interps: Sequence[Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    *,
    extract: Callable[[RawIn], Result[T, E]],
    combine_ok: Callable[[list[tuple[T, RawIn]]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
    policy: AllPolicy = AllPolicy(),
) -> M:
    """
    Generic aggregate-all combinator.

    Args:
        interps: Computations to run concurrently
        extract: Function to extract Result[T, E] from each RawIn
        combine_ok: Receives (value, raw) pairs in input order
        combine_err: Receives the first error to settle and every raw
                     settled up to and including it, in settlement order
        wrap: Constructor to wrap the thunk back into monad M
        policy: Whether to cancel what is still running after a failure
    """

    async def run() -> RawOut:
        tasks = spawn_all(interps)
        try:
            settled: list[RawIn] = []
            for fut in asyncio.as_completed(tasks):
                raw = await fut
                settled.append(raw)
                match extract(raw):
                    case Error(e):
                        return combine_err(e, settled)
                    case Ok(_):
                        pass

            # Everything settled Ok; re-read in input order.
            raws = [t.result() for t in tasks]
            return combine_ok([(extract(raw).unwrap(), raw) for raw in raws])
        finally:
            if policy.cancel_pending:
                cancel_pending(tasks)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def process_all[T, E](
    interps: Sequence[LazyCoroResult[T, E]],
    *,
    policy: AllPolicy = AllPolicy(),
) -> LazyCoroResult[list[T], E]:
    """Run all concurrently. Every value in input order, or the first error to settle."""
    def combine_ok(pairs: list[tuple[T, Result[T, E]]]) -> Result[list[T], E]:
        return Ok([v for v, _ in pairs])

    def combine_err(e: E, raws: list[Result[T, E]]) -> Result[list[T], E]:
        _ = raws
        return Error(e)

    return process_allM(
        interps,
        extract=identity,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=LazyCoroResult,
        policy=policy,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def process_all_w[T, E, W](
    interps: Sequence[LazyCoroResultWriter[T, E, W]],
    *,
    policy: AllPolicy = AllPolicy(),
) -> LazyCoroResultWriter[list[T], E, W]:
    """
    Run all concurrently. Every value in input order, or the first error to settle.

    On success logs merge in input order. On failure only the logs of what
    settled before the failure (and the failure itself) are kept.
    """
    def combine_ok(
        pairs: list[tuple[T, WriterResult[T, E, Log[W]]]]
    ) -> WriterResult[list[T], E, Log[W]]:
        values = [v for v, _ in pairs]
        return WriterResult(Ok(values), merge_logs(wr.log for _, wr in pairs))

    def combine_err(
        e: E,
        raws: list[WriterResult[T, E, Log[W]]],
    ) -> WriterResult[list[T], E, Log[W]]:
        return WriterResult(Error(e), merge_logs(wr.log for wr in raws))

    return process_allM(
        interps,
        extract=extract_writer_result,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=wrap_lazy_coro_result_writer,
        policy=policy,
    )


__all__ = ("process_all", "process_all_w", "process_allM")
