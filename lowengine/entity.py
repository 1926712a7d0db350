"""Entities: named, identified owners of components."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Type, TypeVar

from lowengine.component import Component
from lowengine.config import Config
from lowengine.memory import EntityNotFoundError

if TYPE_CHECKING:
    from lowengine.memory import Memory

C = TypeVar("C", bound=Component)

_log = logging.getLogger(Config.LOGGER_NAME)


class Entity:
    """An object in a scene; its behaviour comes from attached components.

    Inactive entities are skipped during update and draw.
    """

    def __init__(self, memory: "Memory") -> None:
        self.active = False
        self.id = 0
        self.name = ""
        self._memory = memory

    def activate(self, name: str) -> None:
        """Mark the entity active and give it ``name``."""
        self.name = name
        self.active = True

    def add_component(self, component_type: Type[C], *args: Any, **kwargs: Any) -> C:
        """Create a component of ``component_type`` attached to this entity.

        Errors from the memory manager (missing dependency, duplicate
        component, unknown entity) propagate unchanged.
        """
        try:
            component = self._memory.create_component(
                self.id, component_type, *args, **kwargs
            )
        except Exception:
            _log.error(
                "Failed to create component of type %s for entity with id %s",
                component_type.__name__,
                self.id,
            )
            raise
        _log.debug(
            "Component of type %s created for entity with id %s",
            component_type.__name__,
            self.id,
        )
        return component

    def has_component(self, component_type: type) -> bool:
        """Return True if this entity owns a component of ``component_type``."""
        try:
            return self._memory.get_component(self.id, component_type) is not None
        except EntityNotFoundError:
            return False

    def get_component(self, component_type: Type[C]) -> Optional[C]:
        """Return this entity's component of ``component_type``, or None."""
        return self._memory.get_component(self.id, component_type)

    def clone(self, new_memory: "Memory") -> "Entity":
        """Return a copy of this entity bound to ``new_memory``.

        The id is assigned by the memory manager that stores the clone.
        """
        duplicate = type(self)(new_memory)
        duplicate.name = self.name
        duplicate.active = self.active
        return duplicate

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r}, active={self.active!r})"