"""World state: heroes, bases and missions."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .conjunto import BoundedSet
from .lista import IntList

T_INICIO = 0
T_FIM_DO_MUNDO = 525600
N_TAMANHO_MUNDO = 20000
N_HABILIDADES = 10
N_HEROIS = N_HABILIDADES * 5
N_BASES = N_HEROIS // 5
N_MISSOES = T_FIM_DO_MUNDO // 100


def random_between(rng: random.Random, low: int, high: int) -> int:
    """Random integer between ``low`` and ``high`` inclusive."""
    return rng.randint(low, high)


@dataclass
class Hero:
    ident: int
    skills: BoundedSet
    patience: int
    speed: int
    experience: int = 0
    base: int = 0
    alive: bool = True

    @classmethod
    def create(cls, ident: int, rng: random.Random) -> "Hero":
        skills = BoundedSet.random(
            random_between(rng, 1, 3), N_HABILIDADES, rng
        )
        patience = random_between(rng, 0, 100)
        speed = random_between(rng, 50, 5000)
        return cls(ident, skills, patience, speed)


@dataclass
class Base:
    ident: int
    capacity: int
    location: int
    heroes: BoundedSet = field(default_factory=lambda: BoundedSet(N_HEROIS))
    waiting: IntList = field(default_factory=IntList)
    missions: int = 0
    max_queue: int = 0

    @classmethod
    def create(cls, ident: int, rng: random.Random) -> "Base":
        capacity = random_between(rng, 3, 10)
        location = random_between(rng, 0, N_TAMANHO_MUNDO - 1)
        return cls(ident, capacity, location)


@dataclass
class Distance:
    distance: int
    base_id: int


@dataclass
class Mission:
    ident: int
    skills: BoundedSet
    danger: int
    location: int
    accomplished: bool = False
    attempts: int = 0
    distances: list[Distance] = field(default_factory=list)

    @classmethod
    def create(cls, ident: int, rng: random.Random) -> "Mission":
        skills = BoundedSet.random(
            random_between(rng, 6, 10), N_HABILIDADES, rng
        )
        danger = random_between(rng, 0, 100)
        location = random_between(rng, 0, N_TAMANHO_MUNDO - 1)
        return cls(ident, skills, danger, location)


def _place(slots: list, ident: int, value, what: str) -> int:
    if not 0 <= ident < len(slots):
        raise IndexError(f"{what} id out of range: {ident}")
    slots[ident] = value
    return ident


def _take(slots: list, index: int, what: str):
    if not slots:
        raise LookupError(f"no {what}s in the world")
    if not 0 <= index < len(slots) or slots[index] is None:
        raise IndexError(f"no {what} at index {index}")
    value = slots.pop(index)
    slots.append(None)
    return value


class World:
    """Global state of the simulation."""

    def __init__(
        self, rng: Optional[random.Random] = None, out: Optional[TextIO] = None
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.out = out if out is not None else sys.stdout
        self.n_skills = N_HABILIDADES
        self.size = N_TAMANHO_MUNDO
        self.clock = T_INICIO
        self.end_time = T_FIM_DO_MUNDO
        self.n_heroes = N_HEROIS
        self.n_bases = N_BASES
        self.n_missions = N_MISSOES
        self.missions_accomplished = 0
        self.events_handled = 0
        self.heroes: list[Optional[Hero]] = [None] * self.n_heroes
        self.bases: list[Optional[Base]] = [None] * self.n_bases
        self.missions: list[Optional[Mission]] = [None] * self.n_missions

    def add_hero(self, hero: Hero) -> int:
        """Store ``hero`` in the slot given by its id; return the id."""
        return _place(self.heroes, hero.ident, hero, "hero")

    def remove_hero(self, index: int) -> Hero:
        """Remove the hero at ``index``, shifting later heroes down."""
        return _take(self.heroes, index, "hero")

    def add_base(self, base: Base) -> int:
        return _place(self.bases, base.ident, base, "base")

    def remove_base(self, index: int) -> Base:
        return _take(self.bases, index, "base")

    def add_mission(self, mission: Mission) -> int:
        return _place(self.missions, mission.ident, mission, "mission")

    def remove_mission(self, index: int) -> Mission:
        return _take(self.missions, index, "mission")