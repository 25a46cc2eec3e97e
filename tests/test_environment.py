import pytest

from ecosim.environment import Environment
from ecosim.resources import Observer


class Recorder(Observer):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def climate_changed(self, climate):
        self.log.append((self.name, climate))


@pytest.fixture
def env():
    return Environment()


@pytest.fixture(autouse=True)
def _fresh_singleton():
    Environment.reset_instance()
    yield
    Environment.reset_instance()


def test_default_climate_is_sunny(env):
    assert env.climate == "soleado"
    assert env.music == "soleado.mp3"
    assert env.background == "Desertico.png"


@pytest.mark.parametrize(
    "climate, music, background",
    [
        ("lluvia", "lluvia.mp3", "lluvia.png"),
        ("nieve", "nieve.mp3", "Nevado.png"),
        ("soleado", "soleado.mp3", "Desertico.png"),
    ],
)
def test_change_climate_switches_media(env, climate, music, background):
    assert env.change_climate(climate) is True
    assert env.climate == climate
    assert env.music == music
    assert env.background == background


def test_change_climate_notifies(env):
    log = []
    env.add_observer(Recorder("a", log))
    env.add_observer(Recorder("b", log))
    env.change_climate("nieve")
    assert log == [("a", "nieve"), ("b", "nieve")]


def test_unknown_climate_ignored(env):
    log = []
    env.add_observer(Recorder("a", log))
    assert env.change_climate("tornado") is False
    assert env.climate == "soleado"
    assert log == []


def test_add_none_is_ignored(env):
    env.add_observer(None)
    assert env.observers == ()


def test_remove_moves_last_into_gap(env):
    log = []
    a, b, c = Recorder("a", log), Recorder("b", log), Recorder("c", log)
    for obs in (a, b, c):
        env.add_observer(obs)
    env.remove_observer(a)
    assert env.observers == (c, b)
    env.notify_observers()
    assert [name for name, _ in log] == ["c", "b"]


def test_remove_last_and_unknown(env):
    log = []
    a, b = Recorder("a", log), Recorder("b", log)
    env.add_observer(a)
    env.add_observer(b)
    env.remove_observer(b)
    env.remove_observer(Recorder("z", log))
    assert env.observers == (a,)


def test_singleton_and_reset():
    first = Environment.get_instance()
    assert Environment.get_instance() is first
    first.change_climate("lluvia")
    Environment.reset_instance()
    second = Environment.get_instance()
    assert second is not first
    assert second.climate == "soleado"