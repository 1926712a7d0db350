import pytest

from lowengine.component import Component
from lowengine.pool import ComponentExistsError, ComponentPool
from lowengine.sprite import Sprite


class _Counter(Component):
    def __init__(self, memory, start=0):
        super().__init__(memory)
        self.value = start
        self.sprite = Sprite(layer=start)

    def initialize(self):
        self.value = self.value

    def update(self, delta_time):
        self.value += delta_time

    def draw(self):
        return self.sprite


class _Silent(Component):
    def initialize(self):
        self.active = self.active


def _pool_with(*entity_ids):
    pool = ComponentPool(_Counter)
    for entity_id in entity_ids:
        pool.create_component(None, entity_id, start=entity_id)
    return pool


def test_create_and_get():
    memory = object()
    pool = ComponentPool(_Counter)
    component = pool.create_component(memory, 5, start=2)
    assert pool.get_component(5) is component
    assert component.value == 2
    assert component._memory is memory
    assert len(pool) == 1


def test_get_missing_returns_none():
    assert _pool_with(1).get_component(2) is None


def test_duplicate_raises():
    pool = _pool_with(1)
    with pytest.raises(ComponentExistsError):
        pool.create_component(None, 1)
    assert len(pool) == 1


def test_destroy_moves_last_into_gap():
    pool = _pool_with(1, 2, 3)
    third = pool.get_component(3)
    pool.destroy_component(1)
    assert pool.get_component(1) is None
    assert pool.get_component(3) is third
    assert list(pool) == [third, pool.get_component(2)]


def test_destroy_last_and_missing():
    pool = _pool_with(1, 2)
    pool.destroy_component(2)
    pool.destroy_component(42)
    assert len(pool) == 1
    assert pool.get_component(1).value == 1


def test_iteration_follows_creation_order():
    pool = _pool_with(7, 3, 9)
    assert [c.value for c in pool] == [7, 3, 9]


def test_update_skips_inactive():
    pool = _pool_with(1, 2)
    pool.get_component(1).active = True
    pool.update(0.5)
    assert pool.get_component(1).value == 1.5
    assert pool.get_component(2).value == 2


def test_for_each_component_visits_all():
    pool = _pool_with(1, 2, 3)
    seen = []
    pool.for_each_component(lambda c: seen.append(c.value))
    assert sorted(seen) == [1, 2, 3]


def test_collect_sprites_active_only_and_copied():
    pool = _pool_with(1, 2)
    pool.get_component(2).active = True
    sprites = pool.collect_sprites()
    assert [s.layer for s in sprites] == [2]
    sprites[0].layer = 100
    assert pool.get_component(2).sprite.layer == 2


def test_collect_sprites_ignores_none():
    pool = ComponentPool(_Silent)
    pool.create_component(None, 0).active = True
    assert pool.collect_sprites() == []


def test_clone_copies_components_into_new_memory():
    pool = _pool_with(4, 8)
    new_memory = object()
    clone = pool.clone(new_memory)
    assert len(clone) == len(pool)
    for entity_id in (4, 8):
        original = pool.get_component(entity_id)
        copied = clone.get_component(entity_id)
        assert copied is not original
        assert copied.value == original.value
        assert copied._memory is new_memory
    clone.destroy_component(4)
    assert pool.get_component(4) is not None