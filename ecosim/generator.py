"""Periodic spawning of new resources weighted by the current climate."""

from __future__ import annotations

import random

from .environment import RAIN, SNOW, SUNNY, Environment
from .resource_container import ResourceContainer
from .resources import Observer, Resource, ResourceFactory

MEAT_SPRITE = "carne.png"
PLANT_SPRITE = "planta.png"
WATER_SPRITE = "agua.png"

GENERATION_INTERVAL = 0.7
"""Seconds between two generated resources."""

# Weights for (meat, plant, water).
WEIGHTS = {
    SUNNY: (30, 40, 30),
    RAIN: (10, 40, 50),
    SNOW: (50, 20, 30),
}

FIELD_WIDTH = 900
FIELD_TOP = 130.0
FIELD_HEIGHT = 600


class ResourceGenerator(Observer):
    """Adds a new random resource to a container at a fixed interval."""

    def __init__(
        self,
        factory: ResourceFactory,
        container: ResourceContainer,
        environment: Environment | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._factory = factory
        self._container = container
        self._environment = environment if environment is not None else Environment.get_instance()
        self._rng = rng if rng is not None else random.Random()
        self._last = 0.0

    def climate_changed(self, climate: str) -> None:
        """Nothing to do: the climate is read afresh on every tick."""

    def random_position(self) -> tuple[float, float]:
        x = float(self._rng.randrange(FIELD_WIDTH))
        y = FIELD_TOP + self._rng.randrange(FIELD_HEIGHT)
        return x, y

    def generate(self, climate: str) -> Resource:
        """Create one resource at a random spot, its kind drawn by climate weights."""
        x, y = self.random_position()
        try:
            meat, plant, water = WEIGHTS[climate]
        except KeyError:
            raise ValueError(f"unknown climate: {climate!r}") from None
        roll = self._rng.randrange(meat + plant + water)
        if roll < meat:
            return self._factory.create_meat(MEAT_SPRITE, x, y)
        if roll < meat + plant:
            return self._factory.create_plant(PLANT_SPRITE, x, y)
        return self._factory.create_water(WATER_SPRITE, x, y)

    def tick(self, now: float) -> Resource | None:
        """Generate a resource if the interval has elapsed; return it, else None."""
        if now - self._last < GENERATION_INTERVAL:
            return None
        resource = self.generate(self._environment.climate)
        self._container.add(resource)
        self._last = now
        return resource