# orbitcam/camera/camera_controller.py

from abc import ABC, abstractmethod
from orbitcam.camera.camera import Camera


class CameraController(ABC):
    """
    Base class for camera control strategies.
    Controllers consume input events and produce a Camera on demand.
    """

    @abstractmethod
    def event(self, e):
        """Respond to an input event."""
        pass

    @abstractmethod
    def camera(self, dt: float) -> Camera:
        """Return a Camera for the current controller state."""
        pass
