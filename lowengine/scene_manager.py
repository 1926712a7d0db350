"""Keeps the list of scenes and which one is current."""

from __future__ import annotations

import logging
from typing import List, Tuple, Union

from lowengine.config import Config
from lowengine.scene import Scene

_log = logging.getLogger(Config.LOGGER_NAME)


class SceneManager:
    """Creates scenes, switches between them and destroys them.

    A fresh manager holds one initialized default scene, which is current.
    """

    def __init__(self) -> None:
        default = Scene()
        default.init_as_default()
        self._scenes: List[Scene] = [default]
        self._current_index = 0

    def create_scene(self, name: str) -> Scene:
        """Create an initialized scene; it does not become current."""
        scene = Scene(name)
        scene.initialized = True
        self._scenes.append(scene)
        _log.info("New scene created: '%s'", name)
        return scene

    def create_copy_scene_from_current(self, name_suffix: str = "") -> int:
        """Deep-copy the current scene as a temporary scene and return its index.

        The copy is named after the current scene with " (TEMPORARY)"
        appended; ``name_suffix`` does not change the name. Raises
        LookupError when there is no scene to copy.
        """
        if not self._scenes:
            _log.info("No scene to copy")
            raise LookupError("no scene to copy")
        clone = self._scenes[self._current_index].copy()
        clone.initialized = True
        clone.is_temporary = True
        self._scenes.append(clone)
        return len(self._scenes) - 1

    def select_scene(self, target: Union[int, str, Scene]) -> bool:
        """Make a scene current, chosen by index, name or the scene itself.

        Only initialized scenes can be selected. Returns True if the
        current scene changed to the target.
        """
        if isinstance(target, Scene):
            for index, scene in enumerate(self._scenes):
                if scene is target and scene.initialized:
                    self._current_index = index
                    _log.info("Scene selected: '%s'", target.name)
                    return True
            return False
        if isinstance(target, str):
            for index, scene in enumerate(self._scenes):
                if scene.name == target and scene.initialized:
                    self._current_index = index
                    return True
            return False
        if isinstance(target, int):
            if 0 <= target < len(self._scenes) and self._scenes[target].initialized:
                self._current_index = target
                return True
            return False
        raise TypeError(f"cannot select a scene by {type(target).__name__}")

    @property
    def current_scene(self) -> Scene:
        """The current scene; raises LookupError when there are no scenes."""
        if not self._scenes:
            raise LookupError("there is no current scene")
        return self._scenes[self._current_index]

    @property
    def scenes(self) -> Tuple[Scene, ...]:
        """All scenes, in creation order."""
        return tuple(self._scenes)

    def destroy_current_scene(self) -> None:
        """Destroy and remove the current scene; the next lower one becomes current."""
        if not self._scenes:
            _log.warning("No current scene to destroy")
            return
        self._scenes.pop(self._current_index).destroy()
        if not self._scenes:
            self._current_index = 0
            _log.debug("All scenes destroyed")
        else:
            self._current_index = min(self._current_index, len(self._scenes) - 1)
            _log.debug(
                "Current scene destroyed; switching to scene index %s", self._current_index
            )

    def destroy_all(self) -> None:
        """Destroy and remove every scene."""
        for scene in self._scenes:
            scene.destroy()
        self._scenes.clear()
        self._current_index = 0
        _log.info("All scenes destroyed")