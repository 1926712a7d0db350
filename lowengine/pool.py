"""Dense storage for components of a single type."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Type, TypeVar

from lowengine.component import Component
from lowengine.config import Config
from lowengine.sprite import Sprite

C = TypeVar("C", bound=Component)

_log = logging.getLogger(Config.LOGGER_NAME)


class ComponentExistsError(ValueError):
    """Raised when an entity already owns a component of the pool's type."""


class ComponentPool(Generic[C]):
    """Keeps components of one type contiguous, indexed by entity id.

    Removing a component moves the last one into the freed slot.
    """

    def __init__(self, component_type: Type[C]) -> None:
        self.component_type = component_type
        self._components: List[C] = []
        self._entity_ids: List[int] = []
        self._index: Dict[int, int] = {}

    def _append(self, entity_id: int, component: C) -> None:
        self._index[entity_id] = len(self._components)
        self._components.append(component)
        self._entity_ids.append(entity_id)

    def clone(self, new_memory: Any) -> "ComponentPool[C]":
        """Deep-copy the pool, binding every component to ``new_memory``."""
        pool: ComponentPool[C] = ComponentPool(self.component_type)
        for entity_id, component in zip(self._entity_ids, self._components):
            pool._append(entity_id, component.clone(new_memory))
        return pool

    def create_component(self, memory: Any, entity_id: int, *args: Any, **kwargs: Any) -> C:
        """Construct a component for ``entity_id`` and store it."""
        if entity_id in self._index:
            raise ComponentExistsError(
                f"component {self.component_type.__name__} already exists "
                f"for entity id {entity_id}"
            )
        component = self.component_type(memory, *args, **kwargs)
        self._append(entity_id, component)
        return component

    def destroy_component(self, entity_id: int) -> None:
        """Remove the component owned by ``entity_id``, if any."""
        removed = self._index.pop(entity_id, None)
        if removed is None:
            return
        last = len(self._components) - 1
        if removed != last:
            moved_entity = self._entity_ids[last]
            self._components[removed] = self._components[last]
            self._entity_ids[removed] = moved_entity
            self._index[moved_entity] = removed
        self._components.pop()
        self._entity_ids.pop()

    def get_component(self, entity_id: int) -> Optional[C]:
        """Return the component owned by ``entity_id``, or None."""
        index = self._index.get(entity_id)
        return None if index is None else self._components[index]

    def for_each_component(self, callback: Callable[[C], Any]) -> None:
        """Call ``callback`` with every stored component."""
        for component in list(self._components):
            callback(component)

    def update(self, delta_time: float) -> None:
        """Update every active component."""
        for component in self._components:
            if component.active:
                component.update(delta_time)

    def collect_sprites(self) -> List[Sprite]:
        """Return copies of the sprites active components want drawn."""
        sprites = []
        for component in self._components:
            if component.active:
                sprite = component.draw()
                if sprite is not None:
                    sprites.append(sprite.copy())
        return sprites

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[C]:
        return iter(self._components)