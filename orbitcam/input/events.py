# orbitcam/input/events.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class MouseButton(Enum):
    """Mouse buttons, valued by their Panda3D event names."""
    LEFT = "mouse1"
    MIDDLE = "mouse2"
    RIGHT = "mouse3"
    X1 = "mouse4"
    X2 = "mouse5"


class Key(Enum):
    """Keys usable as camera modifiers, valued by their Panda3D event names."""
    SHIFT = "shift"
    CONTROL = "control"
    ALT = "alt"
    LSHIFT = "lshift"
    RSHIFT = "rshift"
    LCONTROL = "lcontrol"
    RCONTROL = "rcontrol"
    LALT = "lalt"
    RALT = "ralt"
    SPACE = "space"


Button = Union[MouseButton, Key]


def button_from_name(name: str) -> Optional[Button]:
    """Resolve an event name ("mouse1", "lshift") to a button, or None."""
    for enum_type in (MouseButton, Key):
        try:
            return enum_type(name)
        except ValueError:
            continue
    return None


@dataclass(frozen=True)
class PressEvent:
    button: Button


@dataclass(frozen=True)
class ReleaseEvent:
    button: Button


@dataclass(frozen=True)
class MouseRelativeEvent:
    """Relative pointer motion since the previous event."""
    dx: float
    dy: float


@dataclass(frozen=True)
class MouseScrollEvent:
    dx: float
    dy: float
