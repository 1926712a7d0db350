"""Named input actions and the keys, buttons and modifiers they bind to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Iterable, Mapping

#: Names of the modifier flags shared by actions, action keys and modifier states.
MODIFIER_NAMES = ("lshift", "lctrl", "lalt", "rshift", "rctrl", "ralt")


class ActionType(Enum):
    """The kind of input an action listens to."""

    KEYBOARD = "keyboard"
    MOUSE = "mouse"


class Key(IntEnum):
    """Keyboard keys."""

    UNKNOWN = -1
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7
    I = 8  # noqa: E741
    J = 9
    K = 10
    L = 11
    M = 12
    N = 13
    O = 14  # noqa: E741
    P = 15
    Q = 16
    R = 17
    S = 18
    T = 19
    U = 20
    V = 21
    W = 22
    X = 23
    Y = 24
    Z = 25
    NUM0 = 26
    NUM1 = 27
    NUM2 = 28
    NUM3 = 29
    NUM4 = 30
    NUM5 = 31
    NUM6 = 32
    NUM7 = 33
    NUM8 = 34
    NUM9 = 35
    ESCAPE = 36
    LCONTROL = 37
    LSHIFT = 38
    LALT = 39
    LSYSTEM = 40
    RCONTROL = 41
    RSHIFT = 42
    RALT = 43
    RSYSTEM = 44
    MENU = 45
    LBRACKET = 46
    RBRACKET = 47
    SEMICOLON = 48
    COMMA = 49
    PERIOD = 50
    APOSTROPHE = 51
    SLASH = 52
    BACKSLASH = 53
    GRAVE = 54
    EQUAL = 55
    HYPHEN = 56
    SPACE = 57
    ENTER = 58
    BACKSPACE = 59
    TAB = 60
    PAGE_UP = 61
    PAGE_DOWN = 62
    END = 63
    HOME = 64
    INSERT = 65
    DELETE = 66
    ADD = 67
    SUBTRACT = 68
    MULTIPLY = 69
    DIVIDE = 70
    LEFT = 71
    RIGHT = 72
    UP = 73
    DOWN = 74
    NUMPAD0 = 75
    NUMPAD1 = 76
    NUMPAD2 = 77
    NUMPAD3 = 78
    NUMPAD4 = 79
    NUMPAD5 = 80
    NUMPAD6 = 81
    NUMPAD7 = 82
    NUMPAD8 = 83
    NUMPAD9 = 84
    F1 = 85
    F2 = 86
    F3 = 87
    F4 = 88
    F5 = 89
    F6 = 90
    F7 = 91
    F8 = 92
    F9 = 93
    F10 = 94
    F11 = 95
    F12 = 96
    F13 = 97
    F14 = 98
    F15 = 99
    PAUSE = 100


class MouseButton(IntEnum):
    """Mouse buttons."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    EXTRA1 = 3
    EXTRA2 = 4


#: Modifier keys and the flag each one sets.
MODIFIER_FIELDS: Mapping[Key, str] = {
    Key.LSHIFT: "lshift",
    Key.LCONTROL: "lctrl",
    Key.LALT: "lalt",
    Key.RSHIFT: "rshift",
    Key.RCONTROL: "rctrl",
    Key.RALT: "ralt",
}


def _same_modifiers(first: Any, second: Any) -> bool:
    return all(getattr(first, name) == getattr(second, name) for name in MODIFIER_NAMES)


@dataclass
class ModifierKeys:
    """Which left and right Shift, Control and Alt keys are held."""

    lshift: bool = False
    lctrl: bool = False
    lalt: bool = False
    rshift: bool = False
    rctrl: bool = False
    ralt: bool = False


@dataclass(frozen=True)
class ActionKey:
    """A key together with the exact modifier state that must accompany it."""

    key: Key = Key.UNKNOWN
    lshift: bool = False
    lctrl: bool = False
    lalt: bool = False
    rshift: bool = False
    rctrl: bool = False
    ralt: bool = False

    @classmethod
    def from_modifiers(cls, key: Key, modifiers: ModifierKeys) -> "ActionKey":
        """Build an action key from ``key`` and a modifier state."""
        return cls(key, **{name: getattr(modifiers, name) for name in MODIFIER_NAMES})

    def matches_modifiers(self, modifiers: Any) -> bool:
        """Return True if every modifier flag equals the one in ``modifiers``."""
        return _same_modifiers(self, modifiers)


@dataclass
class Action:
    """A named action bound to a key or mouse button plus modifiers.

    ``active`` stays true while the input is held; ``started`` and ``ended``
    are true only for the update in which the input was pressed or released.
    """

    name: str
    type: ActionType
    key: Key = Key.UNKNOWN
    mouse_button: MouseButton = MouseButton.LEFT
    lshift: bool = False
    lctrl: bool = False
    lalt: bool = False
    rshift: bool = False
    rctrl: bool = False
    ralt: bool = False
    active: bool = False
    started: bool = False
    ended: bool = False

    def is_key_pressed(self, keys: Iterable[Key]) -> bool:
        """Return True if this action's key is among ``keys``."""
        return self.key in keys

    def is_mouse_button_pressed(self, mouse_buttons: Iterable[MouseButton]) -> bool:
        """Return True if this action's mouse button is among ``mouse_buttons``."""
        return self.mouse_button in mouse_buttons

    def matches_modifiers(self, modifiers: Any) -> bool:
        """Return True if every modifier flag equals the one in ``modifiers``."""
        return _same_modifiers(self, modifiers)