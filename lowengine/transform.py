"""Position, rotation and scale of an entity."""

from __future__ import annotations

from typing import Any, Tuple, Type

from lowengine.component import Component

Vector = Tuple[float, float]


class TransformComponent(Component):
    """Holds an entity's position in world units, rotation in degrees and scale."""

    def __init__(self, memory: Any) -> None:
        super().__init__(memory)
        self.position: Vector = (0.0, 0.0)
        self.rotation: float = 0.0
        self.scale: Vector = (1.0, 1.0)

    @classmethod
    def dependencies(cls) -> Tuple[Type[Component], ...]:
        """A transform needs no other components."""
        return ()

    def clone(self, new_memory: Any) -> "TransformComponent":
        """Return a copy of this transform bound to ``new_memory``."""
        duplicate = TransformComponent(new_memory)
        duplicate.entity_id = self.entity_id
        duplicate.active = self.active
        duplicate.position = self.position
        duplicate.rotation = self.rotation
        duplicate.scale = self.scale
        return duplicate

    def initialize(self) -> None:
        """Store position, rotation and scale as floats."""
        self.position = (float(self.position[0]), float(self.position[1]))
        self.rotation = float(self.rotation)
        self.scale = (float(self.scale[0]), float(self.scale[1]))

    def update(self, delta_time: float) -> None:
        """A transform does not change on its own."""