"""
Core type definitions for settle.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import LazyCoroResult

# Reducer = pure binary operation folded over settled values
type Reducer[T] = Callable[[T, T], T]

# Interp = the task handle most combinators accept and return.
# For other monads use the *M variants with extract + wrap.
type Interp[T, E] = LazyCoroResult[T, E]

__all__ = (
    "Reducer",
    "Interp",
)
