"""Setting up and running the whole simulation."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence, TextIO

from .evento import Event, EventType, dispatch
from .fprio import PriorityQueue
from .mundo import N_BASES, N_HEROIS, N_MISSOES, Base, Hero, Mission, World, random_between

FIRST_ARRIVAL_WINDOW = 4320


def _schedule(queue: PriorityQueue, kind: EventType, time: int, actor: int, target: int) -> None:
    queue.push(Event(kind, time, actor, target), kind, time)


def build_world(
    rng: Optional[random.Random] = None, out: Optional[TextIO] = None
) -> tuple[World, PriorityQueue]:
    """Create the world and the initial event queue."""
    world = World(rng, out)
    queue = PriorityQueue()

    for ident in range(N_BASES):
        world.add_base(Base.create(ident, world.rng))

    for ident in range(N_HEROIS):
        hero = Hero.create(ident, world.rng)
        world.add_hero(hero)
        base_id = random_between(world.rng, 0, 9)
        time = random_between(world.rng, 0, FIRST_ARRIVAL_WINDOW)
        _schedule(queue, EventType.ARRIVE, time, hero.ident, base_id)

    for ident in range(N_MISSOES):
        mission = Mission.create(ident, world.rng)
        world.add_mission(mission)
        time = random_between(world.rng, 0, world.end_time)
        _schedule(queue, EventType.MISSION, time, mission.ident, -1)

    _schedule(queue, EventType.END, world.end_time, -1, -1)
    return world, queue


def run(seed: Optional[int] = None, out: Optional[TextIO] = None) -> World:
    """Run the simulation until the end event and return the final world."""
    world, queue = build_world(random.Random(seed), out)
    while True:
        event, _, _ = queue.pop()
        world.events_handled += 1
        world.clock = event.time
        dispatch(world, event, queue)
        if event.kind == EventType.END:
            return world


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="theboys", description="Discrete-event simulation of heroes and missions."
    )
    parser.add_argument("--seed", type=int, default=1, help="random seed (default: 1)")
    args = parser.parse_args(argv)
    run(args.seed, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())