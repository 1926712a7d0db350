"""Base class for components attached to entities."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Type

from lowengine.sprite import Sprite


class Component(ABC):
    """A piece of data and behaviour owned by an entity.

    Inactive components are skipped during update and draw.
    """

    _drawable: Optional[Sprite] = None

    def __init__(self, memory: Any) -> None:
        self.entity_id = 0
        self.active = False
        self._memory = memory

    @classmethod
    def dependencies(cls) -> Tuple[Type["Component"], ...]:
        """Component types the owning entity must already have."""
        return ()

    def clone(self, new_memory: Any) -> "Component":
        """Return a copy of this component bound to ``new_memory``."""
        duplicate = copy.copy(self)
        duplicate._memory = new_memory
        return duplicate

    @abstractmethod
    def initialize(self) -> None:
        """Set default values; called right after the component is created."""

    def update(self, delta_time: float) -> None:
        """Advance the component's state by ``delta_time`` seconds."""

    def draw(self) -> Optional[Sprite]:
        """Return the sprite to draw this frame, or None if there is nothing to draw."""
        return self._drawable