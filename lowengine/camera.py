"""Camera component that drives the window's view."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Tuple, Type

from lowengine.component import Component
from lowengine.transform import TransformComponent

Vector = Tuple[float, float]


@dataclass
class View:
    """A 2D camera: the centre and size of the visible area and its rotation in degrees."""

    center: Vector = (500.0, 500.0)
    size: Vector = (1000.0, 1000.0)
    rotation: float = 0.0


class CameraComponent(Component):
    """Follows the entity's transform and applies its view to a window.

    ``zoom_factor`` scales the visible area: below 1.0 zooms in, above 1.0
    zooms out, negative values mirror the view.
    """

    def __init__(self, memory: Any) -> None:
        super().__init__(memory)
        self.zoom_factor = 1.0
        self._view = View()

    @property
    def view(self) -> View:
        """The camera's current view."""
        return self._view

    @classmethod
    def dependencies(cls) -> Tuple[Type[Component], ...]:
        """A camera needs a transform on the same entity."""
        return (TransformComponent,)

    def clone(self, new_memory: Any) -> "CameraComponent":
        """Return a copy of this camera, with its own view, bound to ``new_memory``."""
        duplicate = CameraComponent(new_memory)
        duplicate.entity_id = self.entity_id
        duplicate.active = self.active
        duplicate.zoom_factor = self.zoom_factor
        duplicate._view = replace(self._view)
        return duplicate

    def initialize(self) -> None:
        """Store the zoom factor as a float."""
        self.zoom_factor = float(self.zoom_factor)

    def update(self, delta_time: float) -> None:
        """Centre and rotate the view to match the entity's transform."""
        transform = self._memory.get_component(self.entity_id, TransformComponent)
        if transform is not None:
            self._view.center = transform.position
            self._view.rotation = transform.rotation

    def set_window_size(self, window_size: Vector) -> None:
        """Set the size of the visible area, in world units."""
        self._view.size = (float(window_size[0]), float(window_size[1]))

    def set_view(self, window: Any) -> None:
        """Apply this camera's view to ``window``.

        The window must expose a ``size`` pair and a ``set_view(view)``
        method; it receives a copy of the view sized to the window scaled
        by ``zoom_factor``.
        """
        width, height = window.size
        self._view.size = (width * self.zoom_factor, height * self.zoom_factor)
        window.set_view(replace(self._view))