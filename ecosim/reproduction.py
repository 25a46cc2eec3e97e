"""Breeding: two creatures of the same species meeting produce a third."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Callable
from typing import Any

from .creature_container import CreatureContainer
from .creatures import Creature, CreatureFactory
from .resource_container import ResourceContainer
from .resources import Resource
from .species import Species
from .strategies import DeathStrategy, FeedingStrategy, MovementStrategy, Strategy

Clock = Callable[[], float]

REPRODUCTION_COOLDOWN = 5.0
"""Seconds a strategy waits between two births."""
MATING_DISTANCE = 50.0

CARNIVORE_SPEED = 2.5
HERBIVORE_SPEED = 2.0
OMNIVORE_SPEED = 2.0

HERBIVORE_SPRITE = "Herbivoro.png"
CARNIVORE_SPRITE = "Carnivoro.png"
OMNIVORE_SPRITE = "omnivoro.png"

CREATURE_SIZE = 100

SPAWN_X_RANGE = (0, 899)
SPAWN_Y_RANGE = (200, 800)


class ReproductionStrategy(Strategy):
    """Spawns a new creature when two of the same species touch, with a cooldown."""

    def __init__(
        self,
        resources: ResourceContainer | None,
        creatures: CreatureContainer | None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.resources = resources
        self.creatures = creatures
        self._clock = clock if clock is not None else time.monotonic
        self._rng = rng if rng is not None else random.Random()
        self.last_reproduction = 0.0

    def move(self, creature: Any) -> None:
        if creature is None or self.creatures is None:
            return
        now = self._clock()
        if now - self.last_reproduction < REPRODUCTION_COOLDOWN:
            return
        for other in self.creatures:
            if other is creature:
                continue
            if self.collides(creature, other) and self.same_species(creature, other):
                self.spawn(creature)
                self.last_reproduction = now
                return

    def feed(self, creature: Any, resource: Resource | None) -> bool:
        return False

    def reset(self) -> None:
        """Clear the cooldown so the next meeting may breed at once."""
        self.last_reproduction = 0.0

    def same_species(self, a: Creature, b: Creature) -> bool:
        return a.species is b.species

    def collides(self, a: Creature, b: Creature) -> bool:
        return math.hypot(a.x - b.x, a.y - b.y) < MATING_DISTANCE

    def spawn(self, creature: Creature) -> Creature | None:
        """Add an offspring of ``creature``'s species at a random spot; return it."""
        if self.creatures is None or len(self.creatures) >= CreatureContainer.MAX_CREATURES:
            return None
        factory = CreatureFactory(self._clock)
        x = float(self._rng.randint(*SPAWN_X_RANGE))
        y = float(self._rng.randint(*SPAWN_Y_RANGE))
        makers = {
            Species.HERBIVORE: (factory.create_herbivore, HERBIVORE_SPRITE, HERBIVORE_SPEED),
            Species.CARNIVORE: (factory.create_carnivore, CARNIVORE_SPRITE, CARNIVORE_SPEED),
            Species.OMNIVORE: (factory.create_omnivore, OMNIVORE_SPRITE, OMNIVORE_SPEED),
        }
        make, sprite, speed = makers[creature.species]
        child = make(sprite, x, y, CREATURE_SIZE, CREATURE_SIZE, speed)
        child.movement = MovementStrategy(self.creatures)
        child.feeding = FeedingStrategy(self.resources, self.creatures, self._clock)
        child.reproduction = ReproductionStrategy(self.resources, self.creatures, self._clock, self._rng)
        child.death = DeathStrategy(self.resources, self.creatures, self._clock)
        self.creatures.add(child)
        return child