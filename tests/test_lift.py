"""Tests for lift helpers."""

import json

import pytest
from kungfu import Error, Ok, Result

from settle import lift as L


def unwrap_err(result: Result):
    match result:
        case Error(err):
            return err
        case Ok(value):
            pytest.fail(f"expected Error, got Ok({value!r})")


class TestUp:
    @pytest.mark.asyncio
    async def test_pure(self):
        assert await L.down.unsafe(L.pure(42)) == 42

    @pytest.mark.asyncio
    async def test_fail(self):
        assert unwrap_err(await L.down.to_result(L.fail("nope"))) == "nope"

    @pytest.mark.asyncio
    async def test_catching(self):
        parsed = L.catching(lambda: json.loads('{"a": 1}'), on_error=str)
        assert await L.down.unsafe(parsed) == {"a": 1}

        broken = L.catching(lambda: json.loads("{"), on_error=lambda e: type(e).__name__)
        assert unwrap_err(await L.down.to_result(broken)) == "JSONDecodeError"

    @pytest.mark.asyncio
    async def test_catching_async(self):
        async def boom() -> int:
            raise KeyError("k")

        result = await L.down.to_result(L.catching_async(boom, on_error=lambda e: "caught"))
        assert unwrap_err(result) == "caught"


class TestCall:
    @pytest.mark.asyncio
    async def test_call_is_lazy_and_reruns(self):
        calls = []

        async def fetch(x: int, *, scale: int) -> Result[int, str]:
            calls.append(x)
            return Ok(x * scale)

        task = L.call(fetch, 21, scale=2)
        assert calls == []
        assert await L.down.unsafe(task) == 42
        assert await L.down.unsafe(task) == 42
        assert calls == [21, 21]

    @pytest.mark.asyncio
    async def test_wrap_async(self):
        async def value() -> Result[str, str]:
            return Ok("again")

        assert await L.down.unsafe(L.wrap_async(value)) == "again"


class TestDown:
    @pytest.mark.asyncio
    async def test_or_else(self):
        assert await L.down.or_else(L.pure(1), default=0) == 1
        assert await L.down.or_else(L.fail("x"), default=0) == 0

    @pytest.mark.asyncio
    async def test_unsafe_raises_on_error(self):
        with pytest.raises(Exception):
            await L.down.unsafe(L.fail(ValueError("boom")))
