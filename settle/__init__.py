"""
Async composition primitives over kungfu Result tasks.

- chain: wait for every task to settle, fold what succeeded
- process_all: every value or the first failure
- fastest: whatever settles first
- answer: a task settled from a yes/no answer

Architecture:
- Generic combinators (*M functions) work with any monad via extract + wrap
- Sugar functions for LazyCoroResult (no suffix)
- Sugar functions for LazyCoroResultWriter (*_w suffix)
"""

# Core types
from ._types import Reducer

# Lift helpers
from . import lift
from .lift import (
    call,
    catching,
    catching_async,
    fail,
    pure,
    wrap_async,
)

# Writer monad
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult, writer_error, writer_ok

# Answer helper
from .answer import answer

# Settle-all-then-reduce
from .collection import chain, chain_w, chainM

# Concurrency
from .concurrency import (
    AllPolicy,
    RacePolicy,
    # LazyCoroResult
    fastest,
    process_all,
    # LazyCoroResultWriter
    fastest_w,
    process_all_w,
    # Generic
    fastestM,
    process_allM,
)

# Time
from .time import delay, delay_w, delayM

# Errors
from ._errors import InvalidAnswerError, NoSuccessfulResultsError

__all__ = (
    # Types
    "Reducer",
    # Lift
    "lift",
    "call",
    "catching",
    "catching_async",
    "fail",
    "pure",
    "wrap_async",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    "writer_ok",
    "writer_error",
    # Answer
    "answer",
    # Chain
    "chain",
    "chain_w",
    "chainM",
    # Concurrency
    "AllPolicy",
    "RacePolicy",
    "fastest",
    "process_all",
    "fastest_w",
    "process_all_w",
    "fastestM",
    "process_allM",
    # Time
    "delay",
    "delay_w",
    "delayM",
    # Errors
    "InvalidAnswerError",
    "NoSuccessfulResultsError",
)
