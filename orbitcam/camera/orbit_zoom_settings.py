# orbitcam/camera/orbit_zoom_settings.py

import dataclasses
from dataclasses import dataclass
from enum import IntFlag
from typing import Optional

from orbitcam.core.config import Config, ConfigError
from orbitcam.input.events import Key, MouseButton


class Mode(IntFlag):
    """Held buttons and modifiers, one button/modifier pair per action."""
    ORBIT_BUTTON = 0b00000001
    ZOOM_BUTTON = 0b00000010
    PAN_BUTTON = 0b00000100
    ORBIT_MOD = 0b00001000
    ZOOM_MOD = 0b00010000
    PAN_MOD = 0b00100000


@dataclass(frozen=True)
class OrbitZoomCameraSettings:
    """
    Key bindings and speed modifiers for OrbitZoomCamera.

    Clicking and dragging orbits, right-dragging or scrolling zooms,
    and LShift + drag pans. Every `with_*` method returns a copy with
    that one field replaced.
    """

    # Mouse button to press to orbit / zoom / pan
    orbit_button: MouseButton = MouseButton.LEFT
    zoom_button: MouseButton = MouseButton.RIGHT
    pan_button: MouseButton = MouseButton.LEFT

    # Key to hold to orbit / zoom / pan (None: button alone is enough)
    orbit_mod: Optional[Key] = None
    zoom_mod: Optional[Key] = None
    pan_mod: Optional[Key] = Key.LSHIFT

    # Bits set automatically while scrolling
    scroll_mode: Mode = Mode.ZOOM_BUTTON

    # Speed modifiers (arbitrary units); pitch is relative to orbit,
    # set it to -1 to reverse pitch direction
    orbit_speed: float = 0.05
    pitch_speed: float = 0.1
    pan_speed: float = 0.1
    zoom_speed: float = 0.1

    @classmethod
    def default(cls) -> 'OrbitZoomCameraSettings':
        return cls()

    def with_orbit_button(self, button: MouseButton) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, orbit_button=button)

    def with_zoom_button(self, button: MouseButton) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, zoom_button=button)

    def with_pan_button(self, button: MouseButton) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, pan_button=button)

    def with_orbit_mod(self, key: Optional[Key]) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, orbit_mod=key)

    def with_zoom_mod(self, key: Optional[Key]) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, zoom_mod=key)

    def with_pan_mod(self, key: Optional[Key]) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, pan_mod=key)

    def with_scroll_mode(self, mode: Mode) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, scroll_mode=mode)

    def with_orbit_speed(self, s: float) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, orbit_speed=s)

    def with_pitch_speed(self, s: float) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, pitch_speed=s)

    def with_pan_speed(self, s: float) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, pan_speed=s)

    def with_zoom_speed(self, s: float) -> 'OrbitZoomCameraSettings':
        return dataclasses.replace(self, zoom_speed=s)

    @classmethod
    def from_config(cls, config: Config) -> 'OrbitZoomCameraSettings':
        """
        Build settings from the 'camera' section of a Config.
        Buttons and keys are given by name ("left", "lshift") or by
        event name ("mouse1"). Raises ConfigError on unknown values.
        """
        return cls(
            orbit_button=_parse_enum(MouseButton, config.get('camera.orbit_button'), 'orbit_button'),
            zoom_button=_parse_enum(MouseButton, config.get('camera.zoom_button'), 'zoom_button'),
            pan_button=_parse_enum(MouseButton, config.get('camera.pan_button'), 'pan_button'),
            orbit_mod=_parse_mod(config.get('camera.orbit_mod'), 'orbit_mod'),
            zoom_mod=_parse_mod(config.get('camera.zoom_mod'), 'zoom_mod'),
            pan_mod=_parse_mod(config.get('camera.pan_mod'), 'pan_mod'),
            scroll_mode=_parse_mode(config.get('camera.scroll_mode', [])),
            orbit_speed=parse_float(config.get('camera.orbit_speed'), 'orbit_speed'),
            pitch_speed=parse_float(config.get('camera.pitch_speed'), 'pitch_speed'),
            pan_speed=parse_float(config.get('camera.pan_speed'), 'pan_speed'),
            zoom_speed=parse_float(config.get('camera.zoom_speed'), 'zoom_speed'),
        )


def _parse_enum(enum_type, value, field: str):
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        member = enum_type.__members__.get(value.upper())
        if member is not None:
            return member
        try:
            return enum_type(value)
        except ValueError:
            pass
    raise ConfigError(f"Invalid {enum_type.__name__} for camera.{field}: {value!r}")


def _parse_mod(value, field: str) -> Optional[Key]:
    if value is None:
        return None
    return _parse_enum(Key, value, field)


def _parse_mode(value) -> Mode:
    if isinstance(value, str):
        names = [value]
    elif isinstance(value, (list, tuple)):
        names = value
    else:
        raise ConfigError(f"Invalid camera.scroll_mode: {value!r}")

    mode = Mode(0)
    for name in names:
        member = Mode.__members__.get(str(name).upper())
        if member is None:
            raise ConfigError(f"Invalid mode for camera.scroll_mode: {name!r}")
        mode |= member
    return mode


def parse_float(value, field: str) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"Invalid number for camera.{field}: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid number for camera.{field}: {value!r}") from None
