"""The three diets a creature can have and what they imply."""

from __future__ import annotations

from enum import Enum

from .resources import Meat, Plant, Resource, Water


class Species(Enum):
    HERBIVORE = "herbivore"
    CARNIVORE = "carnivore"
    OMNIVORE = "omnivore"

    def can_eat(self, resource: Resource) -> bool:
        """Whether a creature of this species may consume ``resource``."""
        if self is Species.OMNIVORE:
            return True
        if self is Species.HERBIVORE:
            return isinstance(resource, (Plant, Water))
        return isinstance(resource, (Meat, Water))

    def is_rival(self, other: Species) -> bool:
        """Whether creatures of the two species push each other away."""
        return self is not other