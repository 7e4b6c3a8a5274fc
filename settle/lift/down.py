"""
Running a task and taking its outcome out.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._types import Interp


async def to_result[T, E](interp: Interp[T, E]) -> Result[T, E]:
    return await interp()


async def unsafe[T, E](interp: Interp[T, E]) -> T:
    """
    Run and unwrap, raising on Error.

    NOTE: For tasks that cannot fail, or where failure should propagate.
    """
    return (await interp()).unwrap()


async def or_else[T, E](interp: Interp[T, E], default: T) -> T:
    """Run; ``default`` stands in for any Error."""
    match await interp():
        case Ok(value):
            return value
        case Error(_):
            return default


__all__ = (
    "to_result",
    "unsafe",
    "or_else",
)
