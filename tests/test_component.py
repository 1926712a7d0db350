import pytest

from lowengine.component import Component


class _Health(Component):
    def __init__(self, memory, amount=10):
        super().__init__(memory)
        self.amount = amount
        self.initialized = False

    def initialize(self):
        self.initialized = True


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Component(object())


def test_new_component_is_inactive_with_zero_entity():
    clone = Component.clone(_Health(object()), object())
    assert clone.active is False
    assert clone.entity_id == 0


def test_default_dependencies_are_empty():
    assert Component.dependencies() == ()


def test_default_draw_returns_none():
    assert Component.draw(_Health(object())) is None


def test_default_update_keeps_state():
    component = _Health(object(), amount=5)
    Component.update(component, 0.5)
    assert component.amount == 5


def test_clone_rebinds_memory_and_keeps_state():
    old_memory, new_memory = object(), object()
    component = _Health(old_memory, amount=42)
    component.entity_id = 3
    component.active = True
    clone = Component.clone(component, new_memory)
    assert clone is not component
    assert clone._memory is new_memory
    assert component._memory is old_memory
    assert (clone.entity_id, clone.active, clone.amount) == (3, True, 42)


def test_clone_is_independent():
    component = _Health(object(), amount=1)
    clone = Component.clone(component, object())
    clone.amount = 99
    assert component.amount == 1