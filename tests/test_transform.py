from lowengine.entity import Entity
from lowengine.memory import Memory
from lowengine.transform import TransformComponent


def test_defaults():
    transform = TransformComponent(Memory())
    assert transform.position == (0.0, 0.0)
    assert transform.rotation == 0.0
    assert transform.scale == (1.0, 1.0)
    assert transform.active is False


def test_has_no_dependencies():
    assert TransformComponent.dependencies() == ()


def test_clone_copies_state_and_rebinds_memory():
    memory = Memory()
    transform = TransformComponent(memory)
    transform.entity_id = 4
    transform.active = True
    transform.position = (10.0, -2.5)
    transform.rotation = 45.0
    transform.scale = (2.0, 2.0)
    other = Memory()
    clone = transform.clone(other)
    assert clone is not transform
    assert clone._memory is other
    assert (clone.entity_id, clone.active) == (4, True)
    assert clone.position == (10.0, -2.5)
    assert clone.rotation == 45.0
    assert clone.scale == (2.0, 2.0)


def test_clone_is_independent():
    transform = TransformComponent(Memory())
    clone = transform.clone(Memory())
    clone.position = (1.0, 1.0)
    assert transform.position == (0.0, 0.0)


def test_update_leaves_state_unchanged():
    transform = TransformComponent(Memory())
    transform.position = (5.0, 6.0)
    transform.update(1.0)
    assert transform.position == (5.0, 6.0)
    assert transform.rotation == 0.0


def test_created_through_memory_is_active_and_owned():
    memory = Memory()
    entity = memory.create_entity(Entity, "thing")
    transform = memory.create_component(entity.id, TransformComponent)
    assert transform.active is True
    assert transform.entity_id == entity.id
    assert memory.get_component(entity.id, TransformComponent) is transform


def test_draw_returns_nothing():
    assert TransformComponent(Memory()).draw() is None