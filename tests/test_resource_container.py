import pytest

from ecosim.environment import Environment
from ecosim.resource_container import ResourceContainer
from ecosim.resources import Meat, Plant, Resource, Water


class RecordingResource(Resource):
    def __init__(self, name):
        super().__init__("r.png", 0, 0)
        self.name = name
        self.seen = []

    def climate_changed(self, climate):
        self.seen.append(climate)


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def container(env):
    return ResourceContainer(env)


def test_add_registers_observer(env, container):
    res = RecordingResource("a")
    container.add(res)
    assert len(container) == 1
    assert container[0] is res
    assert env.observers == (res,)
    env.change_climate("nieve")
    assert res.seen == ["nieve"]


def test_remove_swaps_last_in(container):
    items = [Water("w", 0, 0), Plant("p", 0, 0), Meat("m", 0, 0)]
    for item in items:
        container.add(item)
    removed = container.remove(0)
    assert removed is items[0]
    assert list(container) == [items[2], items[1]]


def test_remove_unregisters(env, container):
    res = RecordingResource("a")
    other = RecordingResource("b")
    container.add(res)
    container.add(other)
    container.remove(0)
    env.change_climate("lluvia")
    assert res.seen == []
    assert other.seen == ["lluvia"]


def test_remove_last_element(container):
    a, b = Water("w", 0, 0), Meat("m", 0, 0)
    container.add(a)
    container.add(b)
    container.remove(1)
    assert list(container) == [a]


@pytest.mark.parametrize("index", [-1, 0, 5])
def test_bad_index_raises(container, index):
    with pytest.raises(IndexError):
        container[index]
    with pytest.raises(IndexError):
        container.remove(index)


def test_update_all_forwards_climate(container):
    items = [RecordingResource("a"), RecordingResource("b")]
    for item in items:
        container.add(item)
    container.update_all("soleado")
    assert [item.seen for item in items] == [["soleado"], ["soleado"]]


def test_iteration_is_snapshot(container):
    a, b = Water("w", 0, 0), Plant("p", 0, 0)
    container.add(a)
    container.add(b)
    seen = []
    for item in container:
        seen.append(item)
        if item is a:
            container.remove(0)
    assert seen == [a, b]
    assert list(container) == [b]


def test_default_uses_shared_environment():
    Environment.reset_instance()
    try:
        container = ResourceContainer()
        assert container.environment is Environment.get_instance()
    finally:
        Environment.reset_instance()