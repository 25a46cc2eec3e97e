"""An ordered collection of the resources present in the world."""

from __future__ import annotations

from collections.abc import Iterator

from .environment import Environment
from .resources import Resource


class ResourceContainer:
    """Holds resources and keeps them registered as climate observers."""

    def __init__(self, environment: Environment | None = None) -> None:
        self._environment = environment if environment is not None else Environment.get_instance()
        self._items: list[Resource] = []

    @property
    def environment(self) -> Environment:
        return self._environment

    def add(self, resource: Resource) -> None:
        self._items.append(resource)
        self._environment.add_observer(resource)

    def remove(self, index: int) -> Resource:
        """Remove the resource at ``index``; the last resource takes its place."""
        self._check(index)
        removed = self._items[index]
        self._environment.remove_observer(removed)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
        return removed

    def update_all(self, climate: str) -> None:
        for resource in list(self._items):
            resource.climate_changed(climate)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"resource index {index} out of range")

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Resource:
        self._check(index)
        return self._items[index]

    def __iter__(self) -> Iterator[Resource]:
        return iter(list(self._items))