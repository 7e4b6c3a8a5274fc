"""
WriterResult - a settled Result and the log gathered on the way
===============================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Result


@dataclass(frozen=True, slots=True)
class WriterResult[T, E, W]:
    """What a LazyCoroResultWriter produces when run."""

    result: Result[T, E]
    log: W


__all__ = ("WriterResult",)
