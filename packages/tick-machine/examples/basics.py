"""Idle and Running -- the smallest useful tick-machine program.

Demonstrates:
- Starting a machine on a running asyncio loop with init()
- Registering states with entry callbacks and an on_exit hook
- Shifting between states while the driver keeps ticking
- Disposing the machine and waiting for the driver to finish

Run: python -m examples.basics
"""

import asyncio

from tick_machine import State, init


async def main() -> None:
    print("=== Idle / Running ===\n")

    # Ten ticks per second so the output is readable.
    machine = init(tps=10)
    counters = {"Idle": 0, "Running": 0}

    def count(state: State) -> None:
        counters[state.name] += 1
        print(f"  tick {machine.clock.tick_number + 1}  |  {state.identifier()}")

    def after_tick(state: State) -> None:
        # on_exit runs after every entry call, not only when leaving.
        if counters[state.name] == 3:
            print(f"  {state.name} has ticked 3 times")

    machine.create_state("Idle", count, {"on_exit": after_tick})
    machine.create_state("Running", count, {"on_exit": after_tick})

    machine.shift_state("Idle")
    await asyncio.sleep(0.35)

    machine.shift_state("Running")
    await asyncio.sleep(0.35)

    machine.dispose()
    await machine.join()

    print(f"\nDone. Idle={counters['Idle']} Running={counters['Running']}")


if __name__ == "__main__":
    asyncio.run(main())
