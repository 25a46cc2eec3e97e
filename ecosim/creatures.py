"""Creatures of the three species and the factory that makes them."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import ClassVar

from .species import Species
from .strategies import MovementStrategy, Strategy

Clock = Callable[[], float]

WHITE = (255, 255, 255)
RED = (230, 41, 55)
GREEN = (0, 228, 48)


class Creature:
    """A living thing at a position, driven by pluggable strategies.

    Concrete kinds set the ``species`` class attribute.
    """

    species: ClassVar[Species]
    tint: ClassVar[tuple[int, int, int]] = WHITE

    def __init__(
        self,
        sprite: str,
        x: float,
        y: float,
        width: int,
        height: int,
        speed: float,
        clock: Clock | None = None,
    ) -> None:
        if not hasattr(type(self), "species"):
            raise TypeError(f"{type(self).__name__} has no species and cannot be created")
        self.sprite = sprite
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.speed = float(speed)
        self._clock = clock if clock is not None else time.monotonic
        self.movement: Strategy | None = None
        self.feeding: Strategy | None = None
        self.death: Strategy | None = None
        self.reproduction: Strategy | None = None
        self.last_meal = self._clock()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def _strategies(self) -> tuple[Strategy | None, ...]:
        return (self.movement, self.feeding, self.death, self.reproduction)

    def update(self) -> None:
        """Run each assigned strategy once."""
        for strategy in self._strategies():
            if strategy is not None:
                strategy.move(self)

    def set_position(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y}, speed={self.speed})"


class _Animal(Creature):
    """A species creature: starts moving on its own and updates by moving and eating."""

    def __init__(
        self,
        sprite: str,
        x: float,
        y: float,
        width: int,
        height: int,
        speed: float,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(sprite, x, y, width, height, speed, clock)
        self.movement = MovementStrategy()

    def _strategies(self) -> tuple[Strategy | None, ...]:
        return (self.movement, self.feeding)


class Herbivore(_Animal):
    species = Species.HERBIVORE
    tint = WHITE


class Carnivore(_Animal):
    species = Species.CARNIVORE
    tint = RED


class Omnivore(_Animal):
    species = Species.OMNIVORE
    tint = GREEN


class CreatureFactory:
    """Creates creatures of each species sharing one clock."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock

    def create_herbivore(self, sprite, x, y, width, height, speed) -> Herbivore:
        return Herbivore(sprite, x, y, width, height, speed, self._clock)

    def create_carnivore(self, sprite, x, y, width, height, speed) -> Carnivore:
        return Carnivore(sprite, x, y, width, height, speed, self._clock)

    def create_omnivore(self, sprite, x, y, width, height, speed) -> Omnivore:
        return Omnivore(sprite, x, y, width, height, speed, self._clock)