from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(slots=True)
class FakeShard:
    """A shard that reports a partial count after a delay, or fails."""

    name: str
    count: int
    delay_seconds: float = 0.0
    down: bool = False

    async def fetch_count(self) -> Result[int, Failure]:
        await asyncio.sleep(self.delay_seconds)
        if self.down:
            return Error(Failure(f"{self.name}: unavailable"))
        return Ok(self.count)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
