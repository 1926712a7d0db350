"""Storage for the entities and components of one scene."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar

from lowengine.component import Component
from lowengine.config import Config
from lowengine.pool import ComponentPool
from lowengine.sprite import Sprite

C = TypeVar("C", bound=Component)
E = TypeVar("E")

_log = logging.getLogger(Config.LOGGER_NAME)


class EntityNotFoundError(LookupError):
    """Raised when an entity id does not refer to an existing entity."""


class MissingDependencyError(LookupError):
    """Raised when a component's required components are absent."""


@dataclass(frozen=True)
class TypeInfo:
    """Metadata recorded for each component type seen."""

    name: str
    id: int
    component_type: type


class Memory:
    """Owns entities and the component pools attached to them."""

    _type_ids = itertools.count()

    def __init__(self) -> None:
        self._entities: List[Any] = []
        self._pools: Dict[type, ComponentPool] = {}
        self._type_infos: Dict[type, TypeInfo] = {}

    def create_entity(self, entity_type: Callable[["Memory"], E], name: str) -> E:
        """Create, activate and store a new entity; its id is its position."""
        entity = entity_type(self)
        entity.activate(name)
        entity.id = len(self._entities)
        self._entities.append(entity)
        return entity

    def get_entity(self, entity_id: int) -> Optional[Any]:
        """Return the entity with ``entity_id``, or None."""
        if 0 <= entity_id < len(self._entities):
            return self._entities[entity_id]
        return None

    def find_entity(self, name: str) -> Optional[Any]:
        """Return the first entity called ``name``, or None."""
        return next((entity for entity in self._entities if entity.name == name), None)

    @property
    def entities(self) -> Tuple[Any, ...]:
        """All entities, ordered by id."""
        return tuple(self._entities)

    @property
    def type_infos(self) -> Dict[type, TypeInfo]:
        """Registered component types and their metadata."""
        return dict(self._type_infos)

    def _pool(self, component_type: Type[C]) -> ComponentPool[C]:
        pool = self._pools.get(component_type)
        if pool is None:
            pool = self._pools[component_type] = ComponentPool(component_type)
        return pool

    def _check_entity(self, entity_id: int) -> None:
        if not 0 <= entity_id < len(self._entities):
            _log.error("Entity id %s is out of range", entity_id)
            raise EntityNotFoundError(f"entity id {entity_id} is out of range")

    def create_component(
        self, entity_id: int, component_type: Type[C], *args: Any, **kwargs: Any
    ) -> C:
        """Create a component of ``component_type`` for ``entity_id``.

        Raises EntityNotFoundError, MissingDependencyError or
        ComponentExistsError.
        """
        if component_type not in self._type_infos:
            self._type_infos[component_type] = TypeInfo(
                name=component_type.__name__,
                id=next(Memory._type_ids),
                component_type=component_type,
            )

        self._check_entity(entity_id)

        entity = self._entities[entity_id]
        for dependency in component_type.dependencies():
            if not entity.has_component(dependency):
                raise MissingDependencyError(
                    f"component {dependency.__name__} is required by "
                    f"{component_type.__name__} but not found"
                )

        component = self._pool(component_type).create_component(
            self, entity_id, *args, **kwargs
        )
        component.entity_id = entity_id
        component.active = True
        component.initialize()
        return component

    def get_component(self, entity_id: int, component_type: Type[C]) -> Optional[C]:
        """Return the entity's component of ``component_type``, or None.

        Raises EntityNotFoundError for an unknown entity id.
        """
        self._check_entity(entity_id)
        pool = self._pools.get(component_type)
        return None if pool is None else pool.get_component(entity_id)

    def for_each_component(self, component_type: Type[C], callback: Callable[[C], Any]) -> None:
        """Call ``callback`` with every component of ``component_type``."""
        self._pool(component_type).for_each_component(callback)

    def update_all_components(self, delta_time: float) -> None:
        """Update every active component of every type."""
        for pool in self._pools.values():
            pool.update(delta_time)

    def collect_sprites(self) -> List[Sprite]:
        """Return the sprites all active components want drawn."""
        return [sprite for pool in self._pools.values() for sprite in pool.collect_sprites()]

    def destroy(self) -> None:
        """Remove all entities and components."""
        self._entities.clear()
        self._pools.clear()

    def copy(self) -> "Memory":
        """Return a deep copy whose entities and components refer to it."""
        duplicate = Memory()
        duplicate._type_infos = dict(self._type_infos)
        for entity in self._entities:
            clone = entity.clone(duplicate)
            clone.id = len(duplicate._entities)
            duplicate._entities.append(clone)
        duplicate._pools = {
            component_type: pool.clone(duplicate)
            for component_type, pool in self._pools.items()
        }
        return duplicate