from __future__ import annotations

import dataclasses

import pytest

from orbitcam.camera.orbit_zoom_settings import Mode, OrbitZoomCameraSettings
from orbitcam.core.config import Config, ConfigError
from orbitcam.input.events import Key, MouseButton


def test_default_bindings_and_speeds() -> None:
    s = OrbitZoomCameraSettings.default()
    assert s.orbit_button == MouseButton.LEFT
    assert s.zoom_button == MouseButton.RIGHT
    assert s.pan_button == MouseButton.LEFT
    assert s.orbit_mod is None
    assert s.zoom_mod is None
    assert s.pan_mod == Key.LSHIFT
    assert s.scroll_mode == Mode.ZOOM_BUTTON
    assert (s.orbit_speed, s.pitch_speed, s.pan_speed, s.zoom_speed) == (0.05, 0.1, 0.1, 0.1)


def test_setters_replace_one_field_and_keep_the_rest() -> None:
    base = OrbitZoomCameraSettings()
    changed = (
        base.with_orbit_button(MouseButton.MIDDLE)
        .with_zoom_speed(-0.3)
        .with_scroll_mode(Mode.ORBIT_BUTTON | Mode.ORBIT_MOD)
    )

    assert changed.orbit_button == MouseButton.MIDDLE
    assert changed.zoom_speed == -0.3
    assert changed.scroll_mode == Mode.ORBIT_BUTTON | Mode.ORBIT_MOD
    assert changed.zoom_button == base.zoom_button
    assert changed.pan_mod == base.pan_mod
    assert changed.orbit_speed == base.orbit_speed
    # The original is untouched
    assert base == OrbitZoomCameraSettings.default()


@pytest.mark.parametrize(
    "setter, field, value",
    [
        ("with_orbit_button", "orbit_button", MouseButton.X1),
        ("with_zoom_button", "zoom_button", MouseButton.MIDDLE),
        ("with_pan_button", "pan_button", MouseButton.RIGHT),
        ("with_orbit_mod", "orbit_mod", Key.LALT),
        ("with_zoom_mod", "zoom_mod", Key.LCONTROL),
        ("with_pan_mod", "pan_mod", None),
        ("with_scroll_mode", "scroll_mode", Mode.PAN_BUTTON),
        ("with_orbit_speed", "orbit_speed", 1.5),
        ("with_pitch_speed", "pitch_speed", -1.0),
        ("with_pan_speed", "pan_speed", 0.0),
        ("with_zoom_speed", "zoom_speed", 2.0),
    ],
)
def test_each_setter_targets_its_field(setter: str, field: str, value) -> None:
    base = OrbitZoomCameraSettings()
    changed = getattr(base, setter)(value)

    assert getattr(changed, field) == value
    others = [f.name for f in dataclasses.fields(base) if f.name != field]
    assert all(getattr(changed, name) == getattr(base, name) for name in others)


def test_settings_are_immutable() -> None:
    s = OrbitZoomCameraSettings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.orbit_speed = 1.0  # type: ignore[misc]


def test_from_default_config_matches_default_settings() -> None:
    assert OrbitZoomCameraSettings.from_config(Config()) == OrbitZoomCameraSettings.default()


def test_from_config_accepts_names_and_event_names() -> None:
    config = Config()
    config.set('camera.orbit_button', 'mouse2')
    config.set('camera.pan_button', 'Middle')
    config.set('camera.zoom_mod', 'lcontrol')
    config.set('camera.pan_mod', None)
    config.set('camera.scroll_mode', ['orbit_button', 'ORBIT_MOD'])
    config.set('camera.pitch_speed', '-1')

    s = OrbitZoomCameraSettings.from_config(config)

    assert s.orbit_button == MouseButton.MIDDLE
    assert s.pan_button == MouseButton.MIDDLE
    assert s.zoom_mod == Key.LCONTROL
    assert s.pan_mod is None
    assert s.scroll_mode == Mode.ORBIT_BUTTON | Mode.ORBIT_MOD
    assert s.pitch_speed == -1.0


def test_from_config_single_scroll_mode_name() -> None:
    config = Config()
    config.set('camera.scroll_mode', 'pan_button')
    assert OrbitZoomCameraSettings.from_config(config).scroll_mode == Mode.PAN_BUTTON


@pytest.mark.parametrize(
    "path, value",
    [
        ('camera.orbit_button', 'thumb'),
        ('camera.zoom_button', 'lshift'),
        ('camera.pan_mod', 'hyper'),
        ('camera.scroll_mode', ['zoom']),
        ('camera.scroll_mode', 3),
        ('camera.zoom_speed', 'fast'),
        ('camera.pan_speed', None),
        ('camera.orbit_speed', True),
    ],
)
def test_from_config_rejects_invalid_values(path: str, value) -> None:
    config = Config()
    config.set(path, value)
    with pytest.raises(ConfigError):
        OrbitZoomCameraSettings.from_config(config)
