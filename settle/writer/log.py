"""
Log - monoidal accumulator for the Writer
=========================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Append-only list of log entries.

    Log() is the identity and combine() concatenates, so merging the logs
    of settled tasks in any grouping yields the same sequence. Neither
    combine() nor tell() mutates the receiver.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Example:
            Log.of("a").combine(Log.of("b", "c"))  # Log(["a", "b", "c"])
        """
        return Log([*self, *other])

    def tell(self, item: A, /) -> Log[A]:
        return Log([*self, item])


__all__ = ("Log",)
