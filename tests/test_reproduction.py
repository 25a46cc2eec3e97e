import random

from ecosim.creature_container import CreatureContainer
from ecosim.creatures import Carnivore, Herbivore, Omnivore
from ecosim.environment import Environment
from ecosim.reproduction import (
    CARNIVORE_SPEED,
    HERBIVORE_SPEED,
    ReproductionStrategy,
)
from ecosim.resource_container import ResourceContainer
from ecosim.strategies import DeathStrategy, FeedingStrategy, MovementStrategy


class Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


def make_world(now=10.0):
    clock = Clock(now)
    creatures = CreatureContainer()
    resources = ResourceContainer(Environment())
    strategy = ReproductionStrategy(resources, creatures, clock, random.Random(0))
    return clock, creatures, resources, strategy


def test_same_species_meeting_spawns_offspring():
    clock, creatures, _, strategy = make_world()
    a = Herbivore("Herbivoro.png", 300, 300, 100, 100, 2.0, clock)
    b = Herbivore("Herbivoro.png", 310, 300, 100, 100, 2.0, clock)
    creatures.add(a)
    creatures.add(b)
    strategy.move(a)
    assert len(creatures) == 3
    child = creatures[2]
    assert isinstance(child, Herbivore)
    assert child.speed == HERBIVORE_SPEED
    assert 0 <= child.x <= 899
    assert 200 <= child.y <= 800
    assert strategy.last_reproduction == 10.0


def test_offspring_gets_full_set_of_strategies():
    clock, creatures, resources, strategy = make_world()
    a = Carnivore("Carnivoro.png", 300, 300, 100, 100, 2.5, clock)
    creatures.add(a)
    child = strategy.spawn(a)
    assert isinstance(child, Carnivore)
    assert child.speed == CARNIVORE_SPEED
    assert isinstance(child.movement, MovementStrategy)
    assert child.movement.creatures is creatures
    assert isinstance(child.feeding, FeedingStrategy)
    assert isinstance(child.death, DeathStrategy)
    assert isinstance(child.reproduction, ReproductionStrategy)
    assert child.reproduction is not strategy
    assert child.feeding.resources is resources
    assert creatures[1] is child


def test_cooldown_prevents_second_birth():
    clock, creatures, _, strategy = make_world()
    a = Omnivore("omnivoro.png", 300, 300, 100, 100, 2.0, clock)
    b = Omnivore("omnivoro.png", 300, 310, 100, 100, 2.0, clock)
    creatures.add(a)
    creatures.add(b)
    strategy.move(a)
    clock.now = 14.0
    strategy.move(a)
    assert len(creatures) == 3
    clock.now = 15.0
    strategy.move(a)
    assert len(creatures) == 4


def test_no_birth_before_first_cooldown_elapses():
    clock, creatures, _, strategy = make_world(now=4.0)
    a = Herbivore("Herbivoro.png", 300, 300, 100, 100, 2.0, clock)
    b = Herbivore("Herbivoro.png", 300, 300, 100, 100, 2.0, clock)
    creatures.add(a)
    creatures.add(b)
    strategy.move(a)
    assert len(creatures) == 2


def test_reset_clears_cooldown():
    clock, creatures, _, strategy = make_world()
    a = Herbivore("Herbivoro.png", 300, 300, 100, 100, 2.0, clock)
    b = Herbivore("Herbivoro.png", 300, 300, 100, 100, 2.0, clock)
    creatures.add(a)
    creatures.add(b)
    strategy.move(a)
    strategy.reset()
    assert strategy.last_reproduction == 0.0
    strategy.move(a)
    assert len(creatures) == 4


def test_different_species_do_not_breed():
    clock, creatures, _, strategy = make_world()
    a = Herbivore("Herbivoro.png", 300, 300, 100, 100, 2.0, clock)
    b = Carnivore("Carnivoro.png", 300, 300, 100, 100, 2.5, clock)
    creatures.add(a)
    creatures.add(b)
    strategy.move(a)
    assert len(creatures) == 2
    assert strategy.same_species(a, b) is False


def test_distant_creatures_do_not_breed():
    clock, creatures, _, strategy = make_world()
    a = Herbivore("Herbivoro.png", 100, 300, 100, 100, 2.0, clock)
    b = Herbivore("Herbivoro.png", 600, 300, 100, 100, 2.0, clock)
    creatures.add(a)
    creatures.add(b)
    strategy.move(a)
    assert len(creatures) == 2


def test_collision_threshold_is_exclusive():
    clock, _, _, strategy = make_world()
    a = Herbivore("Herbivoro.png", 0, 0, 100, 100, 2.0, clock)
    at_limit = Herbivore("Herbivoro.png", 50, 0, 100, 100, 2.0, clock)
    inside = Herbivore("Herbivoro.png", 49, 0, 100, 100, 2.0, clock)
    assert strategy.collides(a, at_limit) is False
    assert strategy.collides(a, inside) is True


def test_spawn_refused_when_full():
    clock, creatures, _, strategy = make_world()
    for _ in range(CreatureContainer.MAX_CREATURES):
        creatures.add(Herbivore("Herbivoro.png", 300, 300, 100, 100, 2.0, clock))
    assert strategy.spawn(creatures[0]) is None
    assert len(creatures) == CreatureContainer.MAX_CREATURES


def test_without_container_nothing_happens():
    clock = Clock(10.0)
    strategy = ReproductionStrategy(None, None, clock, random.Random(0))
    a = Herbivore("Herbivoro.png", 0, 0, 100, 100, 2.0, clock)
    strategy.move(a)
    assert strategy.last_reproduction == 0.0
    assert strategy.spawn(a) is None


def test_feed_never_eats():
    clock, _, _, strategy = make_world()
    a = Herbivore("Herbivoro.png", 0, 0, 100, 100, 2.0, clock)
    assert strategy.feed(a, None) is False