"""The ecosystem application: world setup, simulation stepping and the window."""

from __future__ import annotations

import argparse
import random
from enum import Enum
from typing import Any

from .creature_container import CreatureContainer
from .creatures import Creature, CreatureFactory
from .environment import CLIMATES, Environment
from .generator import ResourceGenerator
from .reproduction import ReproductionStrategy
from .resource_container import ResourceContainer
from .resources import ResourceFactory
from .strategies import DeathStrategy, FeedingStrategy, MovementStrategy

WINDOW_TITLE = "Simulacion Entorno"
WIDTH = 1024
HEIGHT = 768
TARGET_FPS = 60

CARNIVORE_SPEED = 2.5
HERBIVORE_SPEED = 2.0
OMNIVORE_SPEED = 2.0
CREATURE_SIZE = 100

MENU_BACKGROUND = "InitStartup.jpeg"
LOGO = "Logo.png"
MENU_MUSIC = "Background.mp3"
HERBIVORE_SPRITE = "Herbivoro.png"
CARNIVORE_SPRITE = "Carnivoro.png"
OMNIVORE_SPRITE = "omnivoro.png"
PLANT_SPRITE = "Planta.png"
MEAT_SPRITE = "Carne.png"
WATER_SPRITE = "agua.png"

COMMAND_LIMIT = 63
"""Longest command the text field accepts."""

# Starting resources, in the order they are placed.
_INITIAL_RESOURCES = (
    ("water", 600, 300),
    ("plant", 300, 500),
    ("meat", 300, 200),
    ("water", 800, 500),
    ("plant", 700, 600),
    ("meat", 500, 400),
    ("water", 200, 600),
    ("plant", 230, 140),
    ("meat", 150, 500),
)

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_GRAY = (130, 130, 130)
_DARKGRAY = (80, 80, 80)
_GREEN = (0, 228, 48)
_BLUE = (0, 121, 241)
_ORANGE = (255, 161, 0)
_SKYBLUE = (102, 191, 255)


class Screen(Enum):
    MENU = 0
    SIMULATION = 1
    COMMANDS = 2
    EXIT = 3


class Ecosystem:
    """A populated world plus the state of the menus around it."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.rng = random.Random()
        self._frames = 0
        self.screen = Screen.MENU
        self.simulation_active = False
        self.command_result = ""
        self._command_buffer = ""
        self._field_active = False

        self.environment = Environment()
        self.resources = ResourceContainer(self.environment)
        self.creatures = CreatureContainer()
        self.creatures.resources = self.resources

        clock = self._clock
        factory = CreatureFactory(clock)
        spawn = (
            (factory.create_herbivore, HERBIVORE_SPRITE, HERBIVORE_SPEED),
            (factory.create_herbivore, HERBIVORE_SPRITE, HERBIVORE_SPEED),
            (factory.create_carnivore, CARNIVORE_SPRITE, CARNIVORE_SPEED),
            (factory.create_carnivore, CARNIVORE_SPRITE, CARNIVORE_SPEED),
            (factory.create_omnivore, OMNIVORE_SPRITE, OMNIVORE_SPEED),
            (factory.create_omnivore, OMNIVORE_SPRITE, OMNIVORE_SPEED),
        )
        feeding = FeedingStrategy(self.resources, self.creatures, clock)
        reproduction = ReproductionStrategy(self.resources, self.creatures, clock, self.rng)
        for make, sprite, speed in spawn:
            x = self.rng.randint(0, 1000)
            y = self.rng.randint(100, 768)
            creature = make(sprite, x, y, CREATURE_SIZE, CREATURE_SIZE, speed)
            self.creatures.add(creature)
            creature.movement = MovementStrategy(self.creatures)
            creature.feeding = feeding
            creature.reproduction = reproduction
            creature.death = DeathStrategy(self.resources, self.creatures, clock)

        resource_factory = ResourceFactory()
        makers = {
            "water": (resource_factory.create_water, WATER_SPRITE),
            "plant": (resource_factory.create_plant, PLANT_SPRITE),
            "meat": (resource_factory.create_meat, MEAT_SPRITE),
        }
        for kind, x, y in _INITIAL_RESOURCES:
            make, sprite = makers[kind]
            self.resources.add(make(sprite, x, y))

        self.generator = ResourceGenerator(
            resource_factory, self.resources, self.environment, self.rng
        )
        self.environment.add_observer(self.generator)

    @property
    def now(self) -> float:
        """Seconds of simulated time, advancing one frame per step."""
        return self._frames / TARGET_FPS

    def _clock(self) -> float:
        return self.now

    def handle_command(self, command: str) -> bool:
        """Apply a climate command; return whether it was recognised."""
        if command not in CLIMATES:
            return False
        self.environment.change_climate(command)
        self.command_result = f"Clima cambiado a: {command}"
        return True

    def start_simulation(self) -> None:
        """Enter the simulation and restart every creature's hunger clock."""
        self.screen = Screen.SIMULATION
        self.simulation_active = True
        DeathStrategy.set_simulation_active(True)
        now = self.now
        for creature in self.creatures:
            creature.last_meal = now

    def stop_simulation(self) -> None:
        """Leave the simulation and close the application."""
        self.screen = Screen.EXIT
        self.simulation_active = False
        DeathStrategy.set_simulation_active(False)

    def _alive(self, creature: Creature) -> bool:
        return any(current is creature for current in self.creatures)

    def step(self) -> None:
        """Advance one frame; the world only changes on the simulation screen."""
        if self.screen is Screen.SIMULATION:
            self.generator.tick(self.now)
            for creature in self.creatures:
                if not self._alive(creature):
                    continue
                for strategy in (
                    creature.movement,
                    creature.feeding,
                    creature.death,
                    creature.reproduction,
                ):
                    if strategy is not None and self._alive(creature):
                        strategy.move(creature)
        self._frames += 1

    def run(self) -> None:
        """Open the window and run menus and simulation until exit."""
        import pygame

        pygame.init()
        try:
            _Window(pygame, self).loop()
        finally:
            pygame.quit()


class _Window:
    """Draws an ecosystem with pygame and feeds it user input."""

    def __init__(self, pygame: Any, eco: Ecosystem) -> None:
        self.pg = pygame
        self.eco = eco
        self.surface = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.font = pygame.font.Font(None, 24)
        self.title_font = pygame.font.Font(None, 34)
        self.images: dict[tuple[str, tuple[int, int, int]], Any] = {}
        icon = self.image(LOGO)
        if icon is not None:
            pygame.display.set_icon(icon)
        try:
            pygame.mixer.init()
            self.audio = True
        except pygame.error:
            self.audio = False
        self.track: str | None = None
        self.mouse = (0, 0)
        self.clicked = False

    def image(self, path: str, tint: tuple[int, int, int] = _WHITE) -> Any:
        key = (path, tint)
        if key not in self.images:
            try:
                surface = self.pg.image.load(path).convert_alpha()
            except (self.pg.error, FileNotFoundError):
                surface = None
            if surface is not None and tint != _WHITE:
                surface = surface.copy()
                surface.fill(tint, special_flags=self.pg.BLEND_RGB_MULT)
            self.images[key] = surface
        return self.images[key]

    def blit(self, path: str, x: float, y: float, tint: tuple[int, int, int] = _WHITE) -> None:
        surface = self.image(path, tint)
        if surface is not None:
            self.surface.blit(surface, (int(x), int(y)))

    def play(self, track: str | None) -> None:
        if not self.audio or track == self.track:
            return
        self.track = track
        music = self.pg.mixer.music
        if track is None:
            music.stop()
            return
        try:
            music.load(track)
            music.set_volume(0.5)
            music.play(-1)
        except self.pg.error:
            pass

    def text(self, message: str, x: float, y: float, color, font=None) -> None:
        rendered = (font or self.font).render(message, True, color)
        self.surface.blit(rendered, (int(x), int(y)))

    def fill(self, rect, color, alpha: float = 1.0) -> None:
        overlay = self.pg.Surface(rect.size, self.pg.SRCALPHA)
        overlay.fill((*color, int(255 * alpha)))
        self.surface.blit(overlay, rect.topleft)

    def button(self, rect, label: str) -> bool:
        hover = rect.collidepoint(self.mouse)
        self.fill(rect, _GREEN if hover else _GRAY, 0.7 if hover else 0.5)
        self.pg.draw.rect(self.surface, _DARKGRAY, rect, 2)
        rendered = self.font.render(label, True, _WHITE)
        self.surface.blit(rendered, rendered.get_rect(center=rect.center))
        return hover and self.clicked

    def text_field(self, field, run_button) -> bool:
        eco = self.eco
        on_field = field.collidepoint(self.mouse)
        on_button = run_button.collidepoint(self.mouse) and self.clicked
        if on_field and self.clicked:
            eco._field_active = True
        elif self.clicked and not on_field and not on_button:
            eco._field_active = False

        active = eco._field_active
        self.fill(field, _BLUE if active else _GRAY, 0.3 if active else 0.5)
        self.pg.draw.rect(self.surface, _BLUE if active else _DARKGRAY, field, 2)
        if not eco._command_buffer and not active:
            self.text("Escribir comando...", field.x + 5, field.y + 10, (160, 160, 160))
        else:
            self.text(eco._command_buffer, field.x + 5, field.y + 10, _BLACK)

        self.fill(run_button, _GRAY)
        self.pg.draw.rect(self.surface, _DARKGRAY, run_button, 2)
        rendered = self.font.render("Ejecutar", True, _WHITE)
        self.surface.blit(rendered, rendered.get_rect(center=run_button.center))
        return on_button

    def handle_events(self) -> None:
        pg = self.pg
        eco = self.eco
        self.clicked = False
        for event in pg.event.get():
            if event.type == pg.QUIT:
                eco.stop_simulation()
            elif event.type == pg.MOUSEBUTTONDOWN and event.button == 1:
                self.clicked = True
            elif event.type == pg.KEYDOWN:
                if event.key == pg.K_ESCAPE and eco.screen is Screen.SIMULATION:
                    eco.stop_simulation()
                elif eco._field_active and eco.screen is Screen.SIMULATION:
                    if event.key == pg.K_BACKSPACE:
                        eco._command_buffer = eco._command_buffer[:-1]
                    elif (
                        event.unicode
                        and 32 <= ord(event.unicode) <= 125
                        and len(eco._command_buffer) < COMMAND_LIMIT
                    ):
                        eco._command_buffer += event.unicode
        self.mouse = pg.mouse.get_pos()

    def draw_menu(self) -> None:
        Rect = self.pg.Rect
        self.surface.fill(_WHITE)
        self.blit(MENU_BACKGROUND, 0, 0)
        offset = HEIGHT * 0.05
        left = WIDTH // 2 - 100
        if self.button(Rect(left, int(300 - offset), 200, 50), "Iniciar Simulacion"):
            self.eco.start_simulation()
        if self.button(Rect(left, int(370 - offset), 200, 50), "Comandos"):
            self.eco.screen = Screen.COMMANDS
        if self.button(Rect(left, int(440 - offset), 200, 50), "Salir"):
            self.eco.screen = Screen.EXIT

    def draw_commands(self) -> None:
        self.surface.fill(_WHITE)
        self.blit(MENU_BACKGROUND, 0, 0)
        self.text("Comandos para el cambio de clima", WIDTH / 2 - 250, 50, _BLACK, self.title_font)
        self.text("(Probabilidad de generacion de recursos)", WIDTH / 2 - 200, 90, _BLACK)
        sections = (
            ('"lluvia"', _BLUE, _BLACK, ("Agua: 40%", "Plantas: 40%", "Alimento: 20%"), 150),
            ('"soleado"', _ORANGE, _BLACK, ("Agua: 20%", "Plantas: 40%", "Alimento: 40%"), 320),
            ('"nieve"', _SKYBLUE, _WHITE, ("Agua: 20%", "Plantas: 20%", "Alimento: 60%"), 490),
        )
        for title, title_color, color, lines, top in sections:
            self.text(title, 450, top, title_color, self.title_font)
            for offset, line in enumerate(lines):
                self.text(line, 440, top + 40 + 30 * offset, color)
        if self.button(self.pg.Rect(WIDTH // 2 - 100, HEIGHT - 100, 200, 50), "Volver al Menu"):
            self.eco.screen = Screen.MENU

    def draw_simulation(self) -> None:
        pg = self.pg
        eco = self.eco
        self.surface.fill(_WHITE)
        self.blit(eco.environment.background, 0, 0)
        pg.draw.line(self.surface, _DARKGRAY, (0, 100), (WIDTH, 100), 3)
        for creature in eco.creatures:
            self.blit(creature.sprite, creature.x, creature.y, creature.tint)
        for resource in eco.resources:
            self.blit(resource.sprite, resource.x, resource.y)
        self.text(f"Clima actual: {eco.environment.climate}", 420, 63, _BLACK)
        if self.button(pg.Rect(10, 25, 200, 50), "Terminar"):
            eco.stop_simulation()
        field = pg.Rect((WIDTH - 300) // 2, 20, 300, 40)
        run_button = pg.Rect(field.right + 10, 20, 120, 40)
        if self.text_field(field, run_button):
            eco.handle_command(eco._command_buffer)
            eco._command_buffer = ""

    def loop(self) -> None:
        eco = self.eco
        ticker = self.pg.time.Clock()
        while eco.screen is not Screen.EXIT:
            self.handle_events()
            if eco.screen is Screen.EXIT:
                break
            if eco.screen is Screen.MENU:
                self.play(MENU_MUSIC)
                self.draw_menu()
            elif eco.screen is Screen.COMMANDS:
                self.play(None)
                self.draw_commands()
            else:
                self.play(eco.environment.music)
                self.draw_simulation()
            eco.step()
            self.pg.display.flip()
            ticker.tick(TARGET_FPS)
        self.play(None)


def main(argv: list[str] | None = None) -> int:
    """Start the ecosystem window."""
    parser = argparse.ArgumentParser(prog="ecosim", description="Run the ecosystem simulation.")
    parser.add_argument("--name", default="Ecosistema", help="name of the ecosystem")
    args = parser.parse_args(argv)
    Ecosystem(args.name).run()
    return 0