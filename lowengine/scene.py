"""Scenes: containers of entities that are updated and drawn together."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Optional, Tuple, Type, TypeVar

from lowengine.camera import CameraComponent
from lowengine.component import Component
from lowengine.config import Config
from lowengine.entity import Entity
from lowengine.memory import EntityNotFoundError, Memory
from lowengine.sprite import Sprite

C = TypeVar("C", bound=Component)
Vector = Tuple[float, float]

_log = logging.getLogger(Config.LOGGER_NAME)


class SpriteSortingMethod(Enum):
    """How a scene orders its sprites before drawing them."""

    NONE = 0
    LAYERS = 1
    Y_AXIS_INCREMENTAL = 2


class Scene:
    """A set of entities and components that are updated and drawn together.

    ``initialized`` scenes may be made current; ``is_temporary`` marks copies
    that should be dropped before switching scenes; ``is_paused`` marks
    scenes whose game logic should not advance.
    """

    def __init__(self, name: str = "") -> None:
        self.initialized = False
        self.is_temporary = False
        self.is_paused = False
        self.name = name
        self._camera_entity_id = Config.MAX_SIZE
        self._sprite_sorting_method = SpriteSortingMethod.NONE
        self._memory = Memory()

    @property
    def camera_entity_id(self) -> int:
        """Id of the entity whose camera drives the view, or ``Config.MAX_SIZE``."""
        return self._camera_entity_id

    @property
    def sprite_sorting_method(self) -> SpriteSortingMethod:
        """The current sprite ordering."""
        return self._sprite_sorting_method

    def init_as_default(self) -> None:
        """Turn this scene into the engine's initial default scene."""
        self.initialized = True
        self.name = "Default scene"

    def update(self, delta_time: float) -> None:
        """Update all active components by ``delta_time`` seconds."""
        self._memory.update_all_components(delta_time)

    def _current_camera(self) -> Optional[CameraComponent]:
        if self._camera_entity_id >= Config.MAX_SIZE:
            return None
        try:
            return self._memory.get_component(self._camera_entity_id, CameraComponent)
        except EntityNotFoundError:
            return None

    def draw(self, window: Any) -> List[Sprite]:
        """Draw all sprites onto ``window`` and return them in drawing order.

        The window must provide ``draw(sprite)``; when a camera is set it
        must also provide what ``CameraComponent.set_view`` needs.
        """
        camera = self._current_camera()
        if camera is not None:
            camera.set_view(window)

        sprites = self._memory.collect_sprites()
        if self._sprite_sorting_method is SpriteSortingMethod.Y_AXIS_INCREMENTAL:
            sprites.sort(key=lambda sprite: sprite.position[1])
        elif self._sprite_sorting_method is SpriteSortingMethod.LAYERS:
            sprites.sort(key=lambda sprite: sprite.layer)

        for sprite in sprites:
            window.draw(sprite)
        return sprites

    def add_entity(self, name: str = "Entity") -> Entity:
        """Create a new entity called ``name`` in this scene."""
        entity = self._memory.create_entity(Entity, name)
        _log.debug("Entity '%s' created with id %s", name, entity.id)
        return entity

    def get_entity(self, entity_id: int) -> Optional[Entity]:
        """Return the entity with ``entity_id``, or None."""
        return self._memory.get_entity(entity_id)

    def find_entity(self, name: str) -> Optional[Entity]:
        """Return the first entity called ``name``, or None."""
        return self._memory.find_entity(name)

    @property
    def entities(self) -> Tuple[Entity, ...]:
        """All entities of this scene, ordered by id."""
        return self._memory.entities

    def add_component(
        self, entity_id: int, component_type: Type[C], *args: Any, **kwargs: Any
    ) -> C:
        """Attach a new component of ``component_type`` to the entity."""
        return self._memory.create_component(entity_id, component_type, *args, **kwargs)

    def get_component(self, entity_id: int, component_type: Type[C]) -> Optional[C]:
        """Return the entity's component of ``component_type``, or None.

        Raises EntityNotFoundError for an unknown entity id.
        """
        return self._memory.get_component(entity_id, component_type)

    def set_current_camera(self, entity_id: int) -> bool:
        """Make the entity's camera drive the view; False if it has no camera."""
        try:
            camera = self._memory.get_component(entity_id, CameraComponent)
        except EntityNotFoundError:
            camera = None
        if camera is None:
            _log.warning("Entity %s does not have a camera component", entity_id)
            return False
        self._camera_entity_id = entity_id
        _log.debug("Camera entity set to %s for scene '%s'", entity_id, self.name)
        return True

    def set_window_size(self, window_size: Vector) -> None:
        """Tell the current camera that the window size changed."""
        if self._camera_entity_id >= Config.MAX_SIZE:
            _log.warning("No camera entity set")
            return
        camera = self._current_camera()
        if camera is None:
            _log.warning(
                "Current camera entity %s does not have a camera component",
                self._camera_entity_id,
            )
            return
        camera.set_window_size(window_size)

    def set_sprite_sorting(self, method: SpriteSortingMethod) -> None:
        """Choose how sprites are ordered when drawn."""
        self._sprite_sorting_method = method
        _log.debug("Sprite sorting method for scene '%s' set to %s", self.name, method.name)

    def destroy(self) -> None:
        """Remove every entity and component of this scene."""
        self._memory.destroy()

    def copy(self) -> "Scene":
        """Return a deep copy that starts uninitialized and paused."""
        duplicate = Scene(f"{self.name} (TEMPORARY)")
        duplicate.initialized = False
        duplicate.is_paused = True
        duplicate._camera_entity_id = self._camera_entity_id
        duplicate._sprite_sorting_method = self._sprite_sorting_method
        duplicate._memory = self._memory.copy()
        return duplicate

    def __repr__(self) -> str:
        return f"Scene(name={self.name!r}, initialized={self.initialized!r})"