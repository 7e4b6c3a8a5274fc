"""Test configuration and fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest
from kungfu import Error, LazyCoroResult, Ok, Result


@dataclass
class Probe:
    """Records which timed tasks started, finished, or were cancelled."""

    started: list[str] = field(default_factory=list)
    finished: list[str] = field(default_factory=list)
    cancelled: list[str] = field(default_factory=list)

    def ok(self, name: str, value: object, seconds: float = 0.0) -> LazyCoroResult:
        return self._task(name, Ok(value), seconds)

    def err(self, name: str, error: object, seconds: float = 0.0) -> LazyCoroResult:
        return self._task(name, Error(error), seconds)

    def _task(self, name: str, result: Result, seconds: float) -> LazyCoroResult:
        async def run() -> Result:
            self.started.append(name)
            try:
                await asyncio.sleep(seconds)
            except asyncio.CancelledError:
                self.cancelled.append(name)
                raise
            self.finished.append(name)
            return result

        return LazyCoroResult(run)


@pytest.fixture
def probe() -> Probe:
    """Provide a fresh task probe."""
    return Probe()
