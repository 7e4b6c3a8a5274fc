from __future__ import annotations

import operator

from _infra import Failure, FakeShard, banner, run

from kungfu import Error, Ok, Result
from settle import LazyCoroResultWriter, chain_w
from settle.writer import Log, WriterResult


async def fetch_count_w(shard: FakeShard) -> WriterResult[int, Failure, Log[str]]:
    """Writer function: the Result plus a log line, no side effects."""
    result: Result[int, Failure] = await shard.fetch_count()
    match result:
        case Ok(_):
            status = "ok"
        case Error(_):
            status = "failed"
    return WriterResult(result, Log.of(f"{shard.name}:{status}"))


async def main() -> None:
    banner("03_writer_logs: chain_w keeps every shard's log")

    shards = [
        FakeShard(name="eu", count=10, delay_seconds=0.02),
        FakeShard(name="us", count=20, delay_seconds=0.01, down=True),
        FakeShard(name="ap", count=30, delay_seconds=0.03),
    ]

    def lazy(shard: FakeShard) -> LazyCoroResultWriter[int, Failure, str]:
        return LazyCoroResultWriter(lambda: fetch_count_w(shard))

    wr = await chain_w([lazy(s) for s in shards], operator.add).with_log("reduced")()
    match wr.result:
        case Ok(total):
            print(f"ok: {total}")
        case Error(err):
            print(f"error: {err}")
    print(f"log: {list(wr.log)!r}")


if __name__ == "__main__":
    run(main)
