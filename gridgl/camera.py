"""Cameras that keep projection, view and view-projection matrices in step."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .transforms import Vector3, identity, look_at, ortho, perspective, rotate, translate


def _vec3(value: Vector3) -> np.ndarray:
    vector = np.array(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


class Camera(ABC):
    """Base camera; any change to its parameters recomputes its matrices."""

    def __init__(self, position: Vector3 = (0.0, 0.0, 0.0)) -> None:
        self._position = _vec3(position)
        self._projection = identity()
        self._view = identity()
        self._view_projection = identity()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection.copy()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Vector3) -> None:
        self._position = _vec3(value)
        self.recalculate()

    @abstractmethod
    def recalculate(self) -> None:
        """Recompute the matrices from the camera's parameters."""


@dataclass(frozen=True)
class OrthographicFrustum:
    left: float = -1.0
    right: float = 1.0
    bottom: float = -1.0
    top: float = 1.0
    near: float = 1.0
    far: float = -1.0


class OrthographicCamera(Camera):
    """Camera with an orthographic projection and a rotation about z in degrees."""

    def __init__(
        self,
        frustum: OrthographicFrustum | None = None,
        position: Vector3 = (0.0, 0.0, 0.0),
        rotation: float = 0.0,
    ) -> None:
        super().__init__(position)
        self._frustum = frustum if frustum is not None else OrthographicFrustum()
        self._rotation = float(rotation)
        self.recalculate()

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self.recalculate()

    @property
    def frustum(self) -> OrthographicFrustum:
        return self._frustum

    @frustum.setter
    def frustum(self, value: OrthographicFrustum) -> None:
        self._frustum = value
        self.recalculate()

    def recalculate(self) -> None:
        f = self._frustum
        self._projection = ortho(f.left, f.right, f.bottom, f.top, f.near, f.far)
        self._view = translate(identity(), self._position) @ rotate(
            identity(), math.radians(self._rotation), (0.0, 0.0, 1.0)
        )
        self._view_projection = self._projection @ self._view


@dataclass(frozen=True)
class PerspectiveFrustum:
    """Field of view ``angle`` in radians; width/height give the aspect ratio."""

    angle: float = 45.0
    width: float = -1.0
    height: float = 1.0
    near: float = 1.0
    far: float = -1.0


class PerspectiveCamera(Camera):
    """Camera with a perspective projection looking at a fixed point."""

    def __init__(
        self,
        frustum: PerspectiveFrustum | None = None,
        position: Vector3 = (0.0, 0.0, 0.0),
        look_at: Vector3 = (-1.0, -1.0, -1.0),
        up_vector: Vector3 = (0.0, 1.0, 0.0),
    ) -> None:
        super().__init__(position)
        self._frustum = frustum if frustum is not None else PerspectiveFrustum()
        self._look_at = _vec3(look_at)
        self._up_vector = _vec3(up_vector)
        self.recalculate()

    @property
    def frustum(self) -> PerspectiveFrustum:
        return self._frustum

    @frustum.setter
    def frustum(self, value: PerspectiveFrustum) -> None:
        self._frustum = value
        self.recalculate()

    @property
    def look_at(self) -> np.ndarray:
        return self._look_at.copy()

    @look_at.setter
    def look_at(self, value: Vector3) -> None:
        self._look_at = _vec3(value)
        self.recalculate()

    @property
    def up_vector(self) -> np.ndarray:
        return self._up_vector.copy()

    @up_vector.setter
    def up_vector(self, value: Vector3) -> None:
        self._up_vector = _vec3(value)
        self.recalculate()

    def recalculate(self) -> None:
        f = self._frustum
        if f.height == 0:
            raise ValueError("frustum height must be non-zero")
        self._projection = perspective(f.angle, f.width / f.height, f.near, f.far)
        self._view = look_at(self._position, self._look_at, self._up_vector)
        self._view_projection = self._projection @ self._view