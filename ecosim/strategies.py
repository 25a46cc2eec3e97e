"""Behaviours attached to creatures: moving, eating and starving."""

from __future__ import annotations

import math
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

from .resource_container import ResourceContainer
from .resources import Meat, Resource

if TYPE_CHECKING:
    from .creature_container import CreatureContainer

Clock = Callable[[], float]

SCREEN_WIDTH = 1064
SCREEN_HEIGHT = 808
CREATURE_SIZE = 100
FIELD_TOP = 100.0

RIVAL_DISTANCE = 50.0
"""Creatures of different species closer than this push each other away."""
PUSH_DISTANCE = 60.0
"""How far from a rival a pushed creature is placed."""

EATING_DISTANCE = 30.0
"""A creature closer than this to a resource may eat it."""

STARVATION_TIME = 17.0
"""Seconds without food after which a creature dies (15 plus a 2 s margin)."""
REMAINS_SPRITE = "restos.png"


def _distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)


class Strategy(ABC):
    """A behaviour run for a creature on every simulation step."""

    @abstractmethod
    def move(self, creature: Any) -> None:
        """Apply the behaviour to ``creature`` for one step."""

    @abstractmethod
    def feed(self, creature: Any, resource: Resource | None) -> bool:
        """Offer ``resource`` to ``creature``; return whether it was eaten."""


class MovementStrategy(Strategy):
    """Straight-line movement bouncing off the edges and away from rival species."""

    def __init__(self, creatures: CreatureContainer | None = None) -> None:
        self.creatures = creatures
        self.velocity_x = 0.0
        self.velocity_y = 0.0

    def move(self, creature: Any) -> None:
        if self.velocity_x == 0 and self.velocity_y == 0:
            self.velocity_x = creature.speed
            self.velocity_y = creature.speed

        x = creature.x + self.velocity_x
        y = creature.y + self.velocity_y

        if x <= 0:
            x = 0.0
            self.velocity_x = -self.velocity_x
        elif x + CREATURE_SIZE >= SCREEN_WIDTH:
            x = float(SCREEN_WIDTH - CREATURE_SIZE)
            self.velocity_x = -self.velocity_x

        if y <= FIELD_TOP:
            y = FIELD_TOP
            self.velocity_y = -self.velocity_y
        elif y + CREATURE_SIZE >= SCREEN_HEIGHT:
            y = float(SCREEN_HEIGHT - CREATURE_SIZE)
            self.velocity_y = -self.velocity_y

        if self.creatures is not None:
            for other in self.creatures:
                if other is creature:
                    continue
                length = _distance(x, y, other.x, other.y)
                if length >= RIVAL_DISTANCE or not creature.species.is_rival(other.species):
                    continue
                if length > 0:
                    dx = (x - other.x) / length
                    dy = (y - other.y) / length
                    self.velocity_x = dx * creature.speed
                    self.velocity_y = dy * creature.speed
                    creature.set_position(other.x + dx * PUSH_DISTANCE, other.y + dy * PUSH_DISTANCE)
                    return

        creature.set_position(x, y)

    def feed(self, creature: Any, resource: Resource | None) -> bool:
        return False


class FeedingStrategy(Strategy):
    """Eats every suitable resource the creature touches."""

    def __init__(
        self,
        resources: ResourceContainer | None,
        creatures: CreatureContainer | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.resources = resources
        self.creatures = creatures
        self._clock = clock if clock is not None else time.monotonic

    def move(self, creature: Any) -> None:
        if creature is None or self.resources is None:
            return
        index = 0
        while index < len(self.resources):
            resource = self.resources[index]
            close = _distance(creature.x, creature.y, resource.x, resource.y) < EATING_DISTANCE
            if close and self.feed(creature, resource):
                # The last resource moves into this slot, so look at it next.
                self.resources.remove(index)
                continue
            index += 1

    def feed(self, creature: Any, resource: Resource | None) -> bool:
        if creature is None or resource is None:
            return False
        if not creature.species.can_eat(resource):
            return False
        creature.last_meal = self._clock()
        return True


class DeathStrategy(Strategy):
    """Kills a creature that has gone too long without eating, leaving remains."""

    _simulation_active: ClassVar[bool] = False

    def __init__(
        self,
        resources: ResourceContainer | None,
        creatures: CreatureContainer | None,
        clock: Clock | None = None,
    ) -> None:
        self.resources = resources
        self.creatures = creatures
        self._clock = clock if clock is not None else time.monotonic

    @classmethod
    def set_simulation_active(cls, active: bool) -> None:
        """Turn starvation on or off for every creature."""
        cls._simulation_active = bool(active)

    @classmethod
    def simulation_active(cls) -> bool:
        return cls._simulation_active

    def move(self, creature: Any) -> None:
        if creature is None or not DeathStrategy._simulation_active:
            return
        if self._clock() - creature.last_meal >= STARVATION_TIME:
            self._leave_remains(creature)
            self._remove(creature)

    def feed(self, creature: Any, resource: Resource | None) -> bool:
        if creature is not None and resource is not None and DeathStrategy._simulation_active:
            creature.last_meal = self._clock()
        return False

    def _leave_remains(self, creature: Any) -> None:
        if self.resources is not None:
            self.resources.add(Meat(REMAINS_SPRITE, creature.x, creature.y))

    def _remove(self, creature: Any) -> None:
        if self.creatures is None:
            return
        for index, current in enumerate(self.creatures):
            if current is creature:
                self.creatures.remove(index)
                return