# orbitcam/utils/math.py

import numpy as np


def quaternion_identity(dtype=np.float64) -> np.ndarray:
    """Identity rotation as [x, y, z, w]."""
    return np.array([0.0, 0.0, 0.0, 1.0], dtype=dtype)


def quaternion_from_axis_angle(axis, angle: float, dtype=np.float64) -> np.ndarray:
    """
    Rotation of `angle` radians about a unit `axis`.
    Returns [x, y, z, w]
    """
    half = angle * 0.5
    s = np.sin(half)
    x, y, z = axis[0] * s, axis[1] * s, axis[2] * s
    return np.array([x, y, z, np.cos(half)], dtype=dtype)


def quaternion_multiply(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """Multiply two quaternions (q1 applied after q2)."""
    x1, y1, z1, w1 = q1[0], q1[1], q1[2], q1[3]
    x2, y2, z2, w2 = q2[0], q2[1], q2[2], q2[3]

    w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
    x = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
    y = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
    z = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2

    return np.array([x, y, z, w], dtype=np.result_type(q1, q2))


def quaternion_rotate_vector(quat: np.ndarray, vec) -> np.ndarray:
    """Rotate a 3-vector by a unit quaternion."""
    u = quat[:3]
    w = quat[3]
    v = np.asarray(vec, dtype=quat.dtype)

    # v' = v + w*t + u x t, with t = 2 (u x v)
    t = 2.0 * np.cross(u, v)
    return (v + w * t + np.cross(u, t)).astype(quat.dtype)
