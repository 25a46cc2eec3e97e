"""Food and water resources placed in the world, and the climate observer interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

logger = logging.getLogger(__name__)


class Observer(ABC):
    """Anything that wants to be told when the climate changes."""

    @abstractmethod
    def climate_changed(self, climate: str) -> None:
        """React to the climate having become ``climate``."""


class Resource(Observer):
    """A consumable item lying at a position in the world."""

    kind: ClassVar[str] = "Unknown resource"

    def __init__(self, sprite: str, x: float, y: float) -> None:
        self.sprite = sprite
        self.x = float(x)
        self.y = float(y)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def climate_changed(self, climate: str) -> None:
        logger.info("%s: climate updated to %s", self.kind, climate)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sprite={self.sprite!r}, x={self.x}, y={self.y})"


class _NotedResource(Resource):
    """A resource that logs a specific note for each known climate."""

    _climate_notes: ClassVar[dict[str, str]] = {}

    def climate_changed(self, climate: str) -> None:
        note = self._climate_notes.get(climate)
        if note is not None:
            logger.info("%s: %s", self.kind, note)


class Water(_NotedResource):
    kind = "Water"
    _climate_notes = {
        "lluvia": "rainy weather favours the generation of water",
        "soleado": "sunny weather may evaporate the water",
        "nieve": "snowy weather may freeze the water",
    }


class Meat(_NotedResource):
    kind = "Meat"
    _climate_notes = {
        "lluvia": "rainy weather may speed up decomposition",
        "soleado": "sunny weather may dry the meat",
        "nieve": "snowy weather may preserve the meat",
    }


class Plant(_NotedResource):
    kind = "Plant"
    _climate_notes = {
        "lluvia": "rainy weather favours plant growth",
        "soleado": "sunny weather is ideal for photosynthesis",
        "nieve": "snowy weather may hinder plant growth",
    }


class ResourceFactory:
    """Creates the three kinds of resource."""

    def create_water(self, sprite: str, x: float, y: float) -> Water:
        return Water(sprite, x, y)

    def create_plant(self, sprite: str, x: float, y: float) -> Plant:
        return Plant(sprite, x, y)

    def create_meat(self, sprite: str, x: float, y: float) -> Meat:
        return Meat(sprite, x, y)