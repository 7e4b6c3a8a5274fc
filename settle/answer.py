"""
Answer helper
=============

The smallest possible task: settle immediately from a yes/no answer.
"""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Ok, Result

from ._errors import InvalidAnswerError
from ._types import Interp

YES = 'Hooray!!! She said "Yes"!'
NO = 'Oh no, she said "No".'


def answer(is_positive: object) -> Interp[str, InvalidAnswerError]:
    """
    Resolve with YES for True, NO for False.

    Anything that is not exactly a bool fails with InvalidAnswerError.
    Truthy/falsy values such as 1, 0 or None are rejected too.

    Example:
        await answer(True)   # Ok('Hooray!!! She said "Yes"!')
        await answer(None)   # Error(InvalidAnswerError())
    """

    async def run() -> Result[str, InvalidAnswerError]:
        if not isinstance(is_positive, bool):
            return Error(InvalidAnswerError())
        return Ok(YES if is_positive else NO)

    return LazyCoroResult(run)


__all__ = ("NO", "YES", "answer")
