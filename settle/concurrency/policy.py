from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AllPolicy:
    """Configuration for process_all: cancel the rest once one input fails."""

    cancel_pending: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.cancel_pending, bool):
            raise ValueError("AllPolicy.cancel_pending must be a bool")


@dataclass(frozen=True, slots=True)
class RacePolicy:
    """Configuration for fastest: cancel the losers once one input settles."""

    cancel_pending: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.cancel_pending, bool):
            raise ValueError("RacePolicy.cancel_pending must be a bool")


__all__ = ("AllPolicy", "RacePolicy")
