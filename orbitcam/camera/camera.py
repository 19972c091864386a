# orbitcam/camera/camera.py

import numpy as np
from orbitcam.utils.math import quaternion_identity, quaternion_rotate_vector


class Camera:
    """
    Camera produced by a controller.
    Position plus an orthonormal basis derived from a rotation quaternion.
    """

    def __init__(self, position, dtype=np.float64):
        self.position = np.array(position, dtype=dtype)
        self.rotation = quaternion_identity(dtype)

        self.right = np.array([1.0, 0.0, 0.0], dtype=dtype)
        self.up = np.array([0.0, 1.0, 0.0], dtype=dtype)
        self.forward = np.array([0.0, 0.0, 1.0], dtype=dtype)

    def set_rotation(self, rotation: np.ndarray):
        """Set orientation (quaternion [x, y, z, w]) and update the basis vectors."""
        self.rotation = np.array(rotation, dtype=self.position.dtype)
        self.right = quaternion_rotate_vector(self.rotation, [1.0, 0.0, 0.0])
        self.up = quaternion_rotate_vector(self.rotation, [0.0, 1.0, 0.0])
        self.forward = quaternion_rotate_vector(self.rotation, [0.0, 0.0, 1.0])

    def get_view_matrix(self) -> np.ndarray:
        """Get view matrix (world to camera space)."""
        view = np.eye(4, dtype=self.position.dtype)
        view[0, :3] = self.right
        view[1, :3] = self.up
        view[2, :3] = self.forward
        view[:3, 3] = -np.array([
            np.dot(self.right, self.position),
            np.dot(self.up, self.position),
            np.dot(self.forward, self.position),
        ])
        return view
