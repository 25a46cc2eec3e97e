"""An ordered, capped collection of the creatures alive in the world."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .resource_container import ResourceContainer
    from .strategies import Strategy


class CreatureContainer:
    """Holds up to ``MAX_CREATURES`` creatures in insertion order."""

    MAX_CREATURES = 30
    """Cap that keeps overpopulation from bringing the simulation down."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self.resources: ResourceContainer | None = None

    def add(self, creature: Any) -> bool:
        """Add ``creature``; return False if it was None or the container is full."""
        if creature is None or len(self._items) >= self.MAX_CREATURES:
            return False
        self._items.append(creature)
        return True

    def remove(self, index: int) -> Any:
        """Remove and return the creature at ``index``, keeping the others in order."""
        self._check(index)
        return self._items.pop(index)

    def apply_movement_strategy(self, strategy: Strategy | None) -> None:
        """Give every creature the same movement strategy."""
        if strategy is None:
            return
        for creature in self._items:
            creature.movement = strategy

    def update_all(self) -> None:
        """Run one update on each creature still present."""
        for creature in list(self._items):
            if any(current is creature for current in self._items):
                creature.update()

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"creature index {index} out of range")

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        self._check(index)
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))