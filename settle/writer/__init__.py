"""
Writer monad
============

LazyCoroResultWriter pairs a lazy Result-producing coroutine with a Log.
It is how settle records what happened during a run: every combinator
has a ``*_w`` flavour that merges the logs of the tasks it observed.
"""

from .log import Log
from .result import WriterResult
from .monad import LazyCoroResultWriter, writer_error, writer_ok

__all__ = (
    "Log",
    "WriterResult",
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
)
