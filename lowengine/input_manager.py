"""Tracks raw input events and keeps named actions up to date."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from lowengine.actions import (
    MODIFIER_FIELDS,
    Action,
    ActionType,
    Key,
    ModifierKeys,
    MouseButton,
)


@dataclass(frozen=True)
class MouseMoved:
    """The pointer moved to ``position``, relative to the window's top-left corner."""

    position: Tuple[int, int]


@dataclass(frozen=True)
class MouseButtonPressed:
    """A mouse button went down."""

    button: MouseButton


@dataclass(frozen=True)
class MouseButtonReleased:
    """A mouse button went up."""

    button: MouseButton


@dataclass(frozen=True)
class KeyPressed:
    """A key went down."""

    code: Key


@dataclass(frozen=True)
class KeyReleased:
    """A key went up."""

    code: Key


Event = Union[MouseMoved, MouseButtonPressed, MouseButtonReleased, KeyPressed, KeyReleased]


def _remove_first(items: list, value: object) -> None:
    try:
        items.remove(value)
    except ValueError:
        pass


class InputManager:
    """Reads input events and maintains the state of defined actions."""

    def __init__(self) -> None:
        self._input_changed = False
        self._actions: Dict[str, Action] = {}
        self._current_keys: List[Key] = []
        self._current_mouse_buttons: List[MouseButton] = []
        self._mouse_position: Tuple[int, int] = (0, 0)
        self._current_modifiers = ModifierKeys()

    @staticmethod
    def _apply_modifiers(action: Action, modifiers: Tuple[Key, ...]) -> None:
        for modifier in modifiers:
            if not isinstance(modifier, Key):
                raise TypeError(f"modifier {modifier!r} is not a Key")
            field = MODIFIER_FIELDS.get(modifier)
            if field is not None:
                setattr(action, field, True)

    def add_key_action(self, action_name: str, key: Key, *args: Key) -> None:
        """Define (or replace) an action triggered by ``key`` with the given modifier keys."""
        action = Action(action_name, ActionType.KEYBOARD, key=key)
        self._apply_modifiers(action, args)
        self._actions[action_name] = action

    def add_mouse_action(self, action_name: str, mouse_button: MouseButton, *args: Key) -> None:
        """Define (or replace) an action triggered by ``mouse_button`` with the given modifier keys."""
        action = Action(action_name, ActionType.MOUSE, mouse_button=mouse_button)
        self._apply_modifiers(action, args)
        self._actions[action_name] = action

    @property
    def mouse_position(self) -> Tuple[int, int]:
        """Pointer position relative to the window's top-left corner."""
        return self._mouse_position

    def get_action(self, action_name: str) -> Optional[Action]:
        """Return the action called ``action_name``, or None."""
        return self._actions.get(action_name)

    def clear_action_state(self) -> None:
        """Reset the per-update ``started`` and ``ended`` flags of all actions."""
        self._input_changed = False
        for action in self._actions.values():
            action.started = False
            action.ended = False

    def read(self, event: Optional[Event]) -> None:
        """Record the effect of one input event."""
        if isinstance(event, MouseMoved):
            self._mouse_position = event.position
        elif isinstance(event, MouseButtonPressed):
            self._current_mouse_buttons.append(event.button)
            self._input_changed = True
        elif isinstance(event, MouseButtonReleased):
            _remove_first(self._current_mouse_buttons, event.button)
            self._input_changed = True
        elif isinstance(event, KeyPressed):
            field = MODIFIER_FIELDS.get(event.code)
            if field is not None:
                setattr(self._current_modifiers, field, True)
            else:
                self._current_keys.append(event.code)
            self._input_changed = True
        elif isinstance(event, KeyReleased):
            field = MODIFIER_FIELDS.get(event.code)
            if field is not None:
                setattr(self._current_modifiers, field, False)
            else:
                _remove_first(self._current_keys, event.code)
            self._input_changed = True

    def _is_triggered(self, action: Action) -> bool:
        if action.type is ActionType.KEYBOARD:
            pressed = action.is_key_pressed(self._current_keys)
        else:
            pressed = action.is_mouse_button_pressed(self._current_mouse_buttons)
        return pressed and action.matches_modifiers(self._current_modifiers)

    def update(self) -> None:
        """Start or end actions according to the input read since the last clear."""
        if not self._input_changed:
            return
        for action in self._actions.values():
            triggered = self._is_triggered(action)
            if action.active and not triggered:
                action.active = False
                action.ended = True
            elif not action.active and triggered:
                action.active = True
                action.started = True