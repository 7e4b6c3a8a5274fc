"""LazyCoroResultWriter

A task whose run yields ``WriterResult(result, log)``. The *_w combinators
take and return these, merging the logs of every task they observe."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, Ok

from .log import Log
from .result import WriterResult

class LazyCoroResultWriter[T, E, W]:
    """Deferred computation producing ``WriterResult[T, E, Log[W]]``."""

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]],
        /,
    ) -> None:
        self._value = value

    @staticmethod
    def tell[LogEntry](
        *entries: LogEntry,
    ) -> LazyCoroResultWriter[None, typing.Never, LogEntry]:
        """Settle as Ok(None) having written ``entries``."""
        return writer_ok(None, *entries)

    def censor(
        self,
        f: Callable[[Log[W]], Log[W]],
        /,
    ) -> LazyCoroResultWriter[T, E, W]:
        """Rewrite the log once the computation has settled."""

        async def rewritten() -> WriterResult[T, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result, f(wr.log))

        return LazyCoroResultWriter(rewritten)

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Append ``entries`` after the computation settles."""
        return self.censor(lambda log: log.combine(Log.of(*entries)))

    def listen(self) -> LazyCoroResultWriter[tuple[T, Log[W]], E, W]:
        """Pair the success value with the log. The log itself is kept."""

        async def paired() -> WriterResult[tuple[T, Log[W]], E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result.map(lambda value: (value, wr.log)), wr.log)

        return LazyCoroResultWriter(paired)

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]:
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self().__await__()

def writer_ok[T, W](
    value: T,
    *log_entries: W,
) -> LazyCoroResultWriter[T, typing.Never, W]:
    """Already-settled successful writer."""

    async def settled() -> WriterResult[T, typing.Never, Log[W]]:
        return WriterResult(Ok(value), Log.of(*log_entries))

    return LazyCoroResultWriter(settled)

def writer_error[E, W](
    error: E,
    *log_entries: W,
) -> LazyCoroResultWriter[typing.Never, E, W]:
    """Already-settled failed writer."""

    async def settled() -> WriterResult[typing.Never, E, Log[W]]:
        return WriterResult(Error(error), Log.of(*log_entries))

    return LazyCoroResultWriter(settled)

__all__ = (
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
)
