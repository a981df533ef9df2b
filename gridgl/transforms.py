"""4x4 transformation matrices for 3D graphics.

Matrices are numpy arrays in mathematical layout: they act on column
vectors as ``matrix @ (x, y, z, w)`` and a translation lives in the last
column. Projections use a right-handed eye space and clip depth in [-1, 1].
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

Vector3 = Union[Sequence[float], np.ndarray]


def _vec3(value: Vector3) -> np.ndarray:
    vector = np.asarray(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


def _normalize(vector: np.ndarray) -> np.ndarray:
    # A zero vector yields NaNs, as a degenerate transform would.
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


def identity() -> np.ndarray:
    """The 4x4 identity matrix."""
    return np.eye(4)


def translate(matrix: np.ndarray, offset: Vector3) -> np.ndarray:
    """``matrix`` followed by a translation by ``offset`` (applied first)."""
    translation = np.eye(4)
    translation[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=float) @ translation


def rotate(matrix: np.ndarray, angle: float, axis: Vector3) -> np.ndarray:
    """``matrix`` times a rotation of ``angle`` radians around ``axis``."""
    a = _normalize(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    cross = np.array(
        [
            [0.0, -a[2], a[1]],
            [a[2], 0.0, -a[0]],
            [-a[1], a[0], 0.0],
        ]
    )
    rotation = np.eye(4)
    rotation[:3, :3] = c * np.eye(3) + s * cross + (1.0 - c) * np.outer(a, a)
    return np.asarray(matrix, dtype=float) @ rotation


def scale(matrix: np.ndarray, factors: Union[float, Vector3]) -> np.ndarray:
    """``matrix`` times a scale; ``factors`` is a scalar or one per axis."""
    if np.isscalar(factors):
        diagonal = np.full(3, float(factors))
    else:
        diagonal = _vec3(factors)
    scaling = np.diag([*diagonal, 1.0])
    return np.asarray(matrix, dtype=float) @ scaling


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Orthographic projection of the given box onto clip space."""
    if right == left or top == bottom or far == near:
        raise ValueError("orthographic box must have non-zero extent on every axis")
    result = np.eye(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection; ``fovy`` is the vertical field of view in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result


def look_at(eye: Vector3, center: Vector3, up: Vector3) -> np.ndarray:
    """View matrix for a camera at ``eye`` looking towards ``center``."""
    eye_v = _vec3(eye)
    forward = _normalize(_vec3(center) - eye_v)
    side = _normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)

    result = np.eye(4)
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -np.dot(side, eye_v)
    result[1, 3] = -np.dot(upward, eye_v)
    result[2, 3] = np.dot(forward, eye_v)
    return result