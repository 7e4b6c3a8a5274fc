from __future__ import annotations

import operator

from _infra import FakeShard, banner, run

from kungfu import Error, Ok
from settle import chain, lift as L


async def main() -> None:
    banner("01_chain: sum whatever the shards managed to report")

    shards = [
        FakeShard(name="eu", count=120, delay_seconds=0.03),
        FakeShard(name="us", count=340, delay_seconds=0.01, down=True),
        FakeShard(name="ap", count=75, delay_seconds=0.02),
    ]

    total = chain([L.call(s.fetch_count) for s in shards], operator.add)
    match await total:
        case Ok(count):
            print(f"partial total: {count}")
        case Error(err):
            print(f"error: {err}")

    # Joining is order-sensitive: the fold follows settlement order.
    order = chain([L.call(s.fetch_count) for s in shards], lambda a, b: f"{a} -> {b}")
    print(f"settled: {await L.down.or_else(order.map(str), default='nothing')}")


if __name__ == "__main__":
    run(main)
