"""Tests for aggregate-all and first-to-settle."""

import asyncio

import pytest
from kungfu import Error, Ok

from settle import (
    AllPolicy,
    RacePolicy,
    delay,
    delay_w,
    fail,
    fastest,
    fastest_w,
    process_all,
    process_all_w,
    pure,
    writer_error,
    writer_ok,
)
from settle import lift as L


class TestProcessAll:
    @pytest.mark.asyncio
    async def test_values_keep_input_order(self):
        tasks = [
            delay(pure(1), seconds=0.03),
            delay(pure(2), seconds=0.01),
            delay(pure(3), seconds=0.02),
        ]
        assert await L.down.unsafe(process_all(tasks)) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_first_failure_to_settle_wins(self):
        tasks = [
            delay(fail("slow"), seconds=0.05),
            pure(1),
            delay(fail("fast"), seconds=0.01),
        ]
        match await L.down.to_result(process_all(tasks)):
            case Error(err):
                assert err == "fast"
            case Ok(value):
                pytest.fail(f"expected failure, got Ok({value!r})")

    @pytest.mark.asyncio
    async def test_empty_input_succeeds_with_empty_list(self):
        assert await L.down.unsafe(process_all([])) == []

    @pytest.mark.asyncio
    async def test_failure_cancels_pending(self, probe):
        tasks = [probe.err("bad", "x", seconds=0.01), probe.ok("slow", 1, seconds=0.2)]
        assert await L.down.or_else(process_all(tasks), default=None) is None
        await asyncio.sleep(0.01)
        assert probe.cancelled == ["slow"]

    @pytest.mark.asyncio
    async def test_failure_can_leave_pending_running(self, probe):
        tasks = [probe.err("bad", "x", seconds=0.01), probe.ok("slow", 1, seconds=0.03)]
        policy = AllPolicy(cancel_pending=False)
        assert await L.down.or_else(process_all(tasks, policy=policy), default=None) is None
        await asyncio.sleep(0.05)
        assert probe.cancelled == []
        assert probe.finished == ["bad", "slow"]

    @pytest.mark.asyncio
    async def test_writer_merges_logs_in_input_order(self):
        tasks = [
            delay_w(writer_ok("a", "log-a"), seconds=0.02),
            writer_ok("b", "log-b"),
        ]
        wr = await process_all_w(tasks)()
        assert wr.result.unwrap() == ["a", "b"]
        assert list(wr.log) == ["log-a", "log-b"]

    @pytest.mark.asyncio
    async def test_writer_failure_keeps_logs_settled_so_far(self):
        tasks = [
            writer_ok("a", "log-a"),
            delay_w(writer_error("boom", "log-boom"), seconds=0.01),
            delay_w(writer_ok("c", "log-c"), seconds=0.2),
        ]
        wr = await process_all_w(tasks)()
        match wr.result:
            case Error(err):
                assert err == "boom"
            case Ok(value):
                pytest.fail(f"expected failure, got Ok({value!r})")
        assert list(wr.log) == ["log-a", "log-boom"]


class TestFastest:
    @pytest.mark.asyncio
    async def test_first_success_wins(self):
        tasks = [delay(pure("second"), seconds=0.05), pure("first")]
        assert await L.down.unsafe(fastest(tasks)) == "first"

    @pytest.mark.asyncio
    async def test_first_failure_wins(self):
        tasks = [delay(pure("late"), seconds=0.05), delay(fail("early"), seconds=0.01)]
        match await L.down.to_result(fastest(tasks)):
            case Error(err):
                assert err == "early"
            case Ok(value):
                pytest.fail(f"expected failure, got Ok({value!r})")

    @pytest.mark.asyncio
    async def test_same_step_tie_goes_to_input_order(self):
        assert await L.down.unsafe(fastest([pure(1), pure(2)])) == 1

    @pytest.mark.asyncio
    async def test_losers_are_cancelled(self, probe):
        tasks = [probe.ok("fast", 1), probe.ok("slow", 2, seconds=0.2)]
        assert await L.down.unsafe(fastest(tasks)) == 1
        await asyncio.sleep(0.01)
        assert probe.cancelled == ["slow"]

    @pytest.mark.asyncio
    async def test_losers_can_keep_running(self, probe):
        tasks = [probe.ok("fast", 1), probe.ok("slow", 2, seconds=0.02)]
        policy = RacePolicy(cancel_pending=False)
        assert await L.down.unsafe(fastest(tasks, policy=policy)) == 1
        await asyncio.sleep(0.04)
        assert probe.finished == ["fast", "slow"]

    @pytest.mark.asyncio
    async def test_empty_input_raises(self):
        with pytest.raises(ValueError):
            await fastest([])()

    @pytest.mark.asyncio
    async def test_writer_keeps_only_winner_log(self):
        tasks = [delay_w(writer_ok(1, "slow"), seconds=0.05), writer_ok(2, "fast")]
        wr = await fastest_w(tasks)()
        assert wr.result.unwrap() == 2
        assert list(wr.log) == ["fast"]


class TestPolicies:
    def test_all_policy_rejects_non_bool(self):
        with pytest.raises(ValueError):
            AllPolicy(cancel_pending="yes")

    def test_race_policy_rejects_non_bool(self):
        with pytest.raises(ValueError):
            RacePolicy(cancel_pending=1)

    def test_policies_are_frozen(self):
        policy = AllPolicy()
        with pytest.raises(AttributeError):
            policy.cancel_pending = False
