# orbitcam/camera/orbit_zoom.py

import numpy as np
from typing import Optional

from orbitcam.camera.camera import Camera
from orbitcam.camera.camera_controller import CameraController
from orbitcam.camera.orbit_zoom_settings import Mode, OrbitZoomCameraSettings, parse_float
from orbitcam.core.config import Config
from orbitcam.core.logging import get_logger
from orbitcam.input.events import (
    MouseRelativeEvent,
    MouseScrollEvent,
    PressEvent,
    ReleaseEvent,
)
from orbitcam.utils.math import (
    quaternion_from_axis_angle,
    quaternion_identity,
    quaternion_multiply,
    quaternion_rotate_vector,
)

logger = get_logger()


class OrbitZoomCamera(CameraController):
    """
    A 3dsMax / Blender-style camera that orbits around a target point.

    Dragging with the orbit button rotates around `target`, the zoom button
    moves towards / away from it and the pan button slides the target in
    the view plane. When several actions are active at once, pan wins over
    zoom and zoom wins over orbit.

    `rotation` is derived from `yaw` and `pitch`; call `init()` after setting
    either of them directly so the next `camera()` call sees the change.
    """

    def __init__(self, target, settings: Optional[OrbitZoomCameraSettings] = None,
                 dtype=np.float64):
        self.settings = settings if settings is not None else OrbitZoomCameraSettings.default()
        self.dtype = dtype

        # Origin of camera rotation
        self.target = np.array(target, dtype=dtype)
        self.rotation = quaternion_identity(dtype)

        self.pitch = 0.0
        self.yaw = 0.0

        # Camera distance from target, kept within the near / far limits
        self.distance = 10.0
        self.distance_near_limit = 0.1
        self.distance_far_limit = 1000.0

        # No modifier configured means the modifier counts as always held
        self._mode = Mode(0)
        if self.settings.orbit_mod is None:
            self._mode |= Mode.ORBIT_MOD
        if self.settings.zoom_mod is None:
            self._mode |= Mode.ZOOM_MOD
        if self.settings.pan_mod is None:
            self._mode |= Mode.PAN_MOD

        logger.info(f"OrbitZoomCamera created at target {self.target.tolist()}")

    @classmethod
    def from_config(cls, target, config: Config, dtype=np.float64) -> 'OrbitZoomCamera':
        """
        Create a camera with settings, distance and initial angles from config.
        A configured 'logging.log_dir' also sends the camera log to a file.
        """
        log_dir = config.get('logging.log_dir')
        if log_dir:
            logger.add_file_handler(log_dir)

        controller = cls(target, OrbitZoomCameraSettings.from_config(config), dtype=dtype)
        for field in ('distance', 'distance_near_limit', 'distance_far_limit', 'yaw', 'pitch'):
            value = config.get(f'camera.{field}', getattr(controller, field))
            setattr(controller, field, parse_float(value, field))
        controller.init()
        return controller

    @property
    def mode(self) -> Mode:
        """Currently held buttons / modifiers."""
        return self._mode

    def camera(self, dt: float) -> Camera:
        """Return a Camera for the current configuration. `dt` is unused."""
        target_to_camera = quaternion_rotate_vector(
            self.rotation, [0.0, 0.0, self.distance]
        )
        camera = Camera(self.target + target_to_camera, dtype=self.dtype)
        camera.set_rotation(self.rotation)
        return camera

    def _rotation_from_yaw_and_pitch(self, yaw: float, pitch: float) -> np.ndarray:
        return quaternion_multiply(
            quaternion_from_axis_angle([0.0, 1.0, 0.0], yaw, self.dtype),
            quaternion_from_axis_angle([1.0, 0.0, 0.0], pitch, self.dtype),
        )

    def init(self):
        """Sync `rotation` with `yaw` and `pitch`."""
        self.rotation = self._rotation_from_yaw_and_pitch(self.yaw, self.pitch)

    def is_orbit(self) -> bool:
        return (Mode.ORBIT_BUTTON | Mode.ORBIT_MOD) in self._mode

    def is_zoom(self) -> bool:
        return (Mode.ZOOM_BUTTON | Mode.ZOOM_MOD) in self._mode

    def is_pan(self) -> bool:
        return (Mode.PAN_BUTTON | Mode.PAN_MOD) in self._mode

    def control_camera(self, dx: float, dy: float):
        """
        Orbit the camera using the given horizontal and vertical deltas,
        or zoom or pan if the matching buttons / modifiers are held.
        """
        if self.is_pan():
            # Pan target along the plane normal to the camera direction,
            # scaled by distance so on-screen speed is zoom independent
            dx = dx * self.settings.pan_speed * self.distance
            dy = dy * self.settings.pan_speed * self.distance

            right = quaternion_rotate_vector(self.rotation, [1.0, 0.0, 0.0])
            up = quaternion_rotate_vector(self.rotation, [0.0, 1.0, 0.0])
            self.target = self.target + up * dy + right * dx

        elif self.is_zoom():
            new_distance = self.distance + dy * self.settings.zoom_speed * self.distance
            if new_distance > self.distance_far_limit:
                self.distance = self.distance_far_limit
                logger.debug(f"Zoom distance {new_distance} clamped to far limit")
            elif new_distance < self.distance_near_limit:
                self.distance = self.distance_near_limit
                logger.debug(f"Zoom distance {new_distance} clamped to near limit")
            else:
                self.distance = new_distance

        elif self.is_orbit():
            dx = dx * self.settings.orbit_speed
            dy = dy * self.settings.orbit_speed

            self.yaw = self.yaw + dx
            self.pitch = self.pitch + dy * self.settings.pitch_speed
            self.rotation = self._rotation_from_yaw_and_pitch(self.yaw, self.pitch)

    def _mod_key_pressed(self) -> bool:
        # Only the first action with a configured modifier is consulted
        if self.settings.orbit_mod is not None:
            return Mode.ORBIT_MOD in self._mode
        elif self.settings.zoom_mod is not None:
            return Mode.ZOOM_MOD in self._mode
        elif self.settings.pan_mod is not None:
            return Mode.PAN_MOD in self._mode
        return False

    def _bits_for(self, button) -> Mode:
        bits = Mode(0)
        if button == self.settings.orbit_button:
            bits |= Mode.ORBIT_BUTTON
        if button == self.settings.pan_button:
            bits |= Mode.PAN_BUTTON
        if button == self.settings.zoom_button:
            bits |= Mode.ZOOM_BUTTON
        if self.settings.orbit_mod is not None and button == self.settings.orbit_mod:
            bits |= Mode.ORBIT_MOD
        if self.settings.pan_mod is not None and button == self.settings.pan_mod:
            bits |= Mode.PAN_MOD
        if self.settings.zoom_mod is not None and button == self.settings.zoom_mod:
            bits |= Mode.ZOOM_MOD
        return bits

    def event(self, e):
        """Respond to scroll, relative mouse motion and press/release events."""
        if isinstance(e, MouseScrollEvent):
            # Without a modifier held, scrolling performs the default scroll action
            added = Mode(0)
            if not self._mod_key_pressed():
                added = self.settings.scroll_mode & ~self._mode
                self._mode |= self.settings.scroll_mode

            self.control_camera(float(e.dx), float(e.dy))
            if added:
                self._mode &= ~added

        elif isinstance(e, MouseRelativeEvent):
            self.control_camera(-float(e.dx), float(e.dy))

        elif isinstance(e, PressEvent):
            bits = self._bits_for(e.button)
            if bits:
                self._mode |= bits
                logger.debug(f"Pressed {e.button}: mode {self._mode!r}")

        elif isinstance(e, ReleaseEvent):
            bits = self._bits_for(e.button)
            if bits:
                self._mode &= ~bits
                logger.debug(f"Released {e.button}: mode {self._mode!r}")
