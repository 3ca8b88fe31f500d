"""Hauling agents example.

Demonstrates:
- Spawning emitters for item piles, a depot and a work site
- Running the emit -> diffuse -> degrade pipeline
- Agents choosing moves with upstream() instead of pathfinding
- Inspecting a tile's LocalSignals
"""

from dataclasses import dataclass

from scentfield import (
    Emitter,
    EmitterStore,
    Goal,
    HexCoord,
    HexMapGeometry,
    InMemoryHistoryStore,
    SignalPipeline,
    Signals,
    SignalStrength,
    SignalType,
)
from scentfield.logging import configure_logging


@dataclass(slots=True)
class Agent:
    name: str
    tile: HexCoord
    goal: Goal


def main() -> None:
    configure_logging(level="INFO")

    geometry = HexMapGeometry(radius=6, occupied=[HexCoord(0, r) for r in range(-3, 2)])
    signals = Signals()
    store = EmitterStore()

    pile = store.spawn(
        HexCoord(-4, 2),
        Emitter(
            [
                (SignalType.push("wood"), SignalStrength(4.0)),
                (SignalType.contains("wood"), SignalStrength(6.0)),
            ]
        ),
    )
    store.spawn(HexCoord(4, -1), Emitter([(SignalType.pull("wood"), SignalStrength(8.0))]))
    store.spawn(HexCoord(2, 3), Emitter([(SignalType.work("sawmill"), SignalStrength(5.0))]))

    history = InMemoryHistoryStore(max_ticks=50)
    pipeline = SignalPipeline(signals, geometry, store, history=history)

    agents = [
        Agent("hauler", HexCoord(-1, 0), Goal.pickup("wood")),
        Agent("courier", HexCoord(-2, 0), Goal.drop_off("wood")),
        Agent("sawyer", HexCoord(1, -4), Goal.work("sawmill")),
        Agent("idler", HexCoord(3, 2), Goal.wander()),
    ]

    for tick in range(40):
        pipeline.tick()

        # The pile shrinks as it is hauled away
        quantity = max(0.0, 6.0 - tick * 0.1)
        emitter = store.get(pile)
        if emitter is not None:
            emitter.set_signal(SignalType.contains("wood"), SignalStrength(quantity))

        if tick >= 20:
            for agent in agents:
                step = signals.upstream(agent.tile, agent.goal, geometry)
                if step is not None:
                    agent.tile = step

    for agent in agents:
        print(f"{agent.name:>8} ({agent.goal}) ended at {agent.tile}")

    print("\nSignals at the courier's tile:")
    print(signals.all_signals_at_position(agents[1].tile))
    print(f"History holds ticks {history.get_tick_range()}")


if __name__ == "__main__":
    main()
