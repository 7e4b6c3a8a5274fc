"""
Lift helpers.

    from settle import lift as L

    L.up.pure(7)                  # settled Ok
    L.up.fail(ValueError("boom")) # settled Error
    L.call(fetch_count, "eu")     # deferred call
    await L.down.unsafe(task)     # run and unwrap
"""

from __future__ import annotations

from . import down, up
from .call import call, wrap_async
from .down import or_else, to_result, unsafe
from .up import catching, catching_async, fail, pure

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "catching",
    "catching_async",
    # Call
    "call",
    "wrap_async",
    # Down
    "to_result",
    "unsafe",
    "or_else",
)
