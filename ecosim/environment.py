"""The shared world climate and the observers that follow it."""

from __future__ import annotations

from typing import ClassVar

from .resources import Observer

SUNNY = "soleado"
RAIN = "lluvia"
SNOW = "nieve"
CLIMATES = (RAIN, SNOW, SUNNY)

MUSIC = {RAIN: "lluvia.mp3", SNOW: "nieve.mp3", SUNNY: "soleado.mp3"}
BACKGROUNDS = {SUNNY: "Desertico.png", RAIN: "lluvia.png", SNOW: "Nevado.png"}


class Environment:
    """Current climate, its music and background, and climate observers."""

    _instance: ClassVar[Environment | None] = None

    def __init__(self) -> None:
        self._climate = SUNNY
        self._observers: list[Observer] = []

    @classmethod
    def get_instance(cls) -> Environment:
        """Return the shared environment, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared environment so the next lookup starts fresh."""
        cls._instance = None

    @property
    def climate(self) -> str:
        return self._climate

    @property
    def music(self) -> str:
        return MUSIC[self._climate]

    @property
    def background(self) -> str:
        return BACKGROUNDS[self._climate]

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def change_climate(self, climate: str) -> bool:
        """Switch to ``climate`` and notify observers; unknown names are ignored."""
        if climate not in CLIMATES:
            return False
        self._climate = climate
        self.notify_observers()
        return True

    def add_observer(self, observer: Observer | None) -> None:
        if observer is not None:
            self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove ``observer``; the last observer takes its place."""
        for index, current in enumerate(self._observers):
            if current is observer:
                last = self._observers.pop()
                if index < len(self._observers):
                    self._observers[index] = last
                return

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.climate_changed(self._climate)