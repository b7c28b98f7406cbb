"""Simulation events and the handlers that process them."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from .conjunto import BoundedSet
from .fprio import PriorityQueue
from .mundo import N_BASES, N_HABILIDADES, Distance, World, random_between

RETRY_DELAY = 24 * 60


class EventType(IntEnum):
    ARRIVE = 1
    WAIT = 2
    GIVE_UP = 3
    NOTIFY = 4
    ENTER = 5
    LEAVE = 6
    TRAVEL = 7
    DIE = 8
    MISSION = 9
    END = 10


@dataclass(eq=False)
class Event:
    """A scheduled event; ``actor`` and ``target`` depend on the kind."""

    kind: EventType
    time: int
    actor: int
    target: int


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def distance(x1: int, x2: int, y1: int, y2: int) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2), single precision."""
    return _f32(math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2))


def sort_distances(distances: list[Distance]) -> list[Distance]:
    """Return the distances in ascending order, keeping ties in order."""
    return sorted(distances, key=lambda entry: entry.distance)


def _emit(world: World, text: str) -> None:
    world.out.write(text)


def _schedule(
    queue: PriorityQueue, kind: EventType, time: int, actor: int, target: int
) -> Event:
    event = Event(kind, time, actor, target)
    queue.push(event, kind, time)
    return event


def _occupancy(base) -> str:
    return f"( {len(base.heroes):2d}/ {base.capacity:2d})"


def handle_arrive(world: World, event: Event, queue: PriorityQueue) -> int:
    """A hero reaches a base and decides whether to wait or give up."""
    hero_id, base_id = event.actor, event.target
    if hero_id > world.n_heroes:
        _emit(world, "heroi invalido\n")
    if base_id > world.n_bases:
        _emit(world, "base invalida\n")
    base = world.bases[base_id]
    hero = world.heroes[hero_id]

    line = (
        f"{world.clock:6d}: CHEGA HEROI {hero_id:2d} BASE {base_id} "
        f"{_occupancy(base)} "
    )
    if len(base.heroes) < base.capacity and len(base.waiting) == 0:
        waits = True
    else:
        waits = hero.patience > 10 * len(base.waiting)

    if waits:
        _emit(world, line + "ESPERA\n")
        _schedule(queue, EventType.WAIT, world.clock, hero_id, base_id)
    else:
        _emit(world, line + "DESISTE\n")
        _schedule(queue, EventType.GIVE_UP, world.clock, hero_id, base_id)
    return event.time


def handle_wait(world: World, event: Event, queue: PriorityQueue) -> int:
    """A hero joins the waiting line of a base."""
    hero_id, base_id = event.actor, event.target
    base = world.bases[base_id]
    waiting = len(base.waiting)
    _emit(
        world,
        f"{world.clock:6d}: ESPERA HEROI {hero_id:2d} BASE {base_id} "
        f"( {waiting:2d})\n",
    )
    if base.max_queue < waiting:
        base.max_queue = waiting
    base.waiting.insert(hero_id, -1)
    _schedule(queue, EventType.NOTIFY, world.clock, hero_id, base_id)
    return event.time


def handle_give_up(world: World, event: Event, queue: PriorityQueue) -> int:
    """A hero gives up on a base and travels to a random one."""
    hero_id = event.actor
    destination = random_between(world.rng, 0, N_BASES - 1)
    _emit(
        world,
        f"{world.clock:6d}: DESISTE HEROI {hero_id:2d} BASE {event.target}\n",
    )
    _schedule(queue, EventType.TRAVEL, world.clock, hero_id, destination)
    return event.time


def handle_notify(world: World, event: Event, queue: PriorityQueue) -> int:
    """The gatekeeper admits waiting heroes while the base has room."""
    base_id = event.target
    base = world.bases[base_id]
    _emit(
        world,
        f"{world.clock:6d}: AVISA PORTEIRO BASE {base_id} "
        f"{_occupancy(base)} LISTA {base.waiting}\n",
    )
    while len(base.heroes) < base.capacity and len(base.waiting) > 0:
        hero_id = base.waiting.remove(0)
        base.heroes.add(hero_id)
        _schedule(queue, EventType.ENTER, world.clock, hero_id, base_id)
        _emit(
            world,
            f"{world.clock:6d}: AVISA PORTEIRO BASE {base_id} "
            f"ADMITE {hero_id:2d}\n",
        )
    return event.time


def handle_enter(world: World, event: Event, queue: PriorityQueue) -> int:
    """A hero enters a base and schedules the moment of leaving."""
    hero_id, base_id = event.actor, event.target
    base = world.bases[base_id]
    line = (
        f"{world.clock:6d}: ENTRA HEROI {hero_id:2d} BASE {base_id} "
        f"{_occupancy(base)} "
    )
    stay = 15 + world.heroes[hero_id].patience * random_between(world.rng, 1, 20)
    leave_at = world.clock + stay
    _schedule(queue, EventType.LEAVE, leave_at, hero_id, base_id)
    _emit(world, line + f"SAI {leave_at}\n")
    return event.time


def handle_leave(world: World, event: Event, queue: PriorityQueue) -> int:
    """A hero leaves a base, travels elsewhere and the gatekeeper is told."""
    destination = random_between(world.rng, 0, N_BASES - 1)
    hero_id, base_id = event.actor, event.target
    base = world.bases[base_id]
    _emit(
        world,
        f"{world.clock:6d}: SAI HEROI {hero_id:2d} BASE {base_id} "
        f"{_occupancy(base)}\n",
    )
    base.heroes.discard(hero_id)
    travel = _schedule(queue, EventType.TRAVEL, world.clock, hero_id, destination)
    _schedule(queue, EventType.NOTIFY, world.clock, hero_id, base_id)
    return travel.time


def handle_travel(world: World, event: Event, queue: PriorityQueue) -> int:
    """A hero travels from its recorded base towards a destination base."""
    hero_id, destination = event.actor, event.target
    hero = world.heroes[hero_id]
    base = world.bases[hero.base]
    line = (
        f"{world.clock:6d}: VIAJA HEROI {hero_id:2d} BASE {base.ident} "
        f"BASE {destination} "
    )
    dist = int(distance(base.location, destination, base.location, destination))
    arrive_at = world.clock + dist // hero.speed
    _schedule(queue, EventType.ARRIVE, arrive_at, hero_id, destination)
    _emit(
        world,
        line + f"DIST {dist} VEL {hero.speed} CHEGA {arrive_at}\n{base.waiting}",
    )
    return event.time


def handle_die(world: World, event: Event, queue: PriorityQueue) -> int:
    """A hero dies on a mission."""
    hero_id, mission_id = event.actor, event.target
    hero = world.heroes[hero_id]
    base_id = hero.base
    _emit(
        world,
        f"{world.clock:6d}: MORRE HEROI {hero_id:2d} MISSAO {mission_id}\n",
    )
    world.bases[base_id].heroes.discard(hero_id)
    hero.alive = False
    _schedule(queue, EventType.NOTIFY, world.clock, hero_id, base_id)
    return event.time


def handle_mission(world: World, event: Event, queue: PriorityQueue) -> int:
    """Try to accomplish a mission with the nearest capable base."""
    mission_id = event.actor
    mission = world.missions[mission_id]
    mission.attempts += 1
    _emit(
        world,
        f"{world.clock:6d}: MISSAO {mission_id} TENT {mission.attempts} "
        f"HAB REQ: {mission.skills}\n",
    )

    if mission.attempts == 1:
        mission.distances = sort_distances(
            [
                Distance(
                    int(
                        distance(
                            mission.location,
                            world.bases[index].location,
                            mission.location,
                            world.bases[index].location,
                        )
                    ),
                    index,
                )
                for index in range(world.n_bases)
            ]
        )

    for entry in mission.distances[: world.n_bases]:
        base_id = entry.base_id
        base = world.bases[base_id]
        present = [h for h in base.heroes if h < world.n_heroes]
        skills = BoundedSet(N_HABILIDADES)
        for hero_id in present:
            skills = skills.union(world.heroes[hero_id].skills)

        if skills.issuperset(mission.skills) or skills == mission.skills:
            _emit(
                world,
                f"{world.clock:6d}: MISSAO {mission_id} CUMPRIDA BASE {base_id} "
                f"HABs: {mission.skills}\n",
            )
            for hero_id in present:
                hero = world.heroes[hero_id]
                risk = int(mission.danger / (hero.patience + hero.experience + 1.0))
                if risk > random_between(world.rng, 0, 30):
                    _schedule(
                        queue, EventType.DIE, world.clock, hero_id, mission_id
                    )
                else:
                    hero.experience += 1
            mission.accomplished = True
            world.missions_accomplished += 1
            break

    if not mission.accomplished:
        _emit(world, f"{event.time:6d}: MISSAO {mission_id} IMPOSSIVEL\n")
        _schedule(
            queue, EventType.MISSION, world.clock + RETRY_DELAY, mission_id, -1
        )
    return event.time


def handle_end(world: World, event: Event, queue: PriorityQueue) -> int:
    """Finish the simulation and write the final report."""
    lines = [f"{world.clock}: FIM\n"]
    _schedule(queue, EventType.END, world.clock, -1, -1)

    for hero in world.heroes[: world.n_heroes]:
        state = "VIVO" if hero.alive else "MORT"
        lines.append(
            f"\nHEROI {hero.ident:2d} {state} PAC {hero.patience:3d} "
            f"VEL {hero.speed:4d} EXP {hero.experience:4d} HABS {hero.skills}"
        )
    lines.append("\n")

    for base in world.bases[: world.n_bases]:
        lines.append(
            f"BASE {base.ident:2d} LOT {base.capacity:2d} "
            f"FILA MAX {base.max_queue:2d} MISSOES {base.missions}\n"
        )

    done_rate = _f32(_f32(world.missions_accomplished / world.n_missions) * 100)
    lines.append(f"EVENTOS TRATADOS: {world.events_handled}\n")
    lines.append(
        f"MISSOES CUMPRIDAS: {world.missions_accomplished}/{world.n_missions} "
        f"({done_rate:.1f}%)\n"
    )

    attempts = [m.attempts for m in world.missions[: world.n_missions]]
    most = least = total = attempts[0]
    for tries in attempts[1:]:
        # the minimum follows every value that is not a new maximum
        if tries > most:
            most = tries
        else:
            least = tries
        total += tries
    mean = _f32(total / world.n_missions)
    lines.append(f"TENTATIVAS/MISSAO: MIN {least}, MAX {most}, MEDIA {mean:.1f}\n")

    deaths = sum(1 for hero in world.heroes[: world.n_heroes] if not hero.alive)
    death_rate = _f32(_f32(deaths / world.n_heroes) * 100)
    lines.append(f"Mortes: {deaths} total: {world.n_heroes} ")
    lines.append(f"TAXA MORTALIDADE: {death_rate:.1f}%\n")

    _emit(world, "".join(lines))
    return event.time


_HANDLERS: dict[EventType, Callable[[World, Event, PriorityQueue], int]] = {
    EventType.ARRIVE: handle_arrive,
    EventType.WAIT: handle_wait,
    EventType.GIVE_UP: handle_give_up,
    EventType.NOTIFY: handle_notify,
    EventType.ENTER: handle_enter,
    EventType.LEAVE: handle_leave,
    EventType.TRAVEL: handle_travel,
    EventType.DIE: handle_die,
    EventType.MISSION: handle_mission,
    EventType.END: handle_end,
}


def dispatch(world: World, event: Event, queue: PriorityQueue) -> int:
    """Run the handler that matches the event's kind."""
    try:
        handler = _HANDLERS[EventType(event.kind)]
    except ValueError:
        raise ValueError(f"unknown event kind: {event.kind}") from None
    return handler(world, event, queue)