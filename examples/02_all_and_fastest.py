from __future__ import annotations

from _infra import FakeShard, banner, run

from kungfu import Error, Ok
from settle import answer, fastest, lift as L, process_all


async def main() -> None:
    banner("02_all_and_fastest: all-or-nothing vs first-to-settle")

    healthy = [
        FakeShard(name="eu", count=1, delay_seconds=0.02),
        FakeShard(name="us", count=2, delay_seconds=0.01),
    ]
    print(f"all: {await L.down.unsafe(process_all([L.call(s.fetch_count) for s in healthy]))}")

    flaky = [*healthy, FakeShard(name="ap", count=3, delay_seconds=0.005, down=True)]
    match await process_all([L.call(s.fetch_count) for s in flaky]):
        case Ok(counts):
            print(f"all: {counts}")
        case Error(err):
            print(f"all failed fast: {err}")

    print(f"fastest: {await L.down.unsafe(fastest([L.call(s.fetch_count) for s in healthy]))}")

    for reply in (True, False, "maybe"):
        match await answer(reply):
            case Ok(text):
                print(text)
            case Error(err):
                print(f"error: {err}")


if __name__ == "__main__":
    run(main)
