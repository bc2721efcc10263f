# beltframe/core/geometry/transforms.py
"""Homogeneous rigid transforms: translation, axis rotation, composition."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from beltframe.config import ROTATION_SNAP_EPS, Axis
from beltframe.core.geometry.linalg import Matrix4, as_matrix, as_vector3
from beltframe.errors import MalformedInputError
from beltframe.utils.logger import get_logger

LOGGER = get_logger(__name__)

# (cos, cos) and (-sin, +sin) index pairs per axis, right-handed.
_AXIS_SLOTS: dict[Axis, tuple[tuple[int, int], tuple[int, int], tuple[int, int], tuple[int, int]]] = {
    Axis.X: ((1, 1), (2, 2), (1, 2), (2, 1)),
    Axis.Y: ((0, 0), (2, 2), (2, 0), (0, 2)),
    Axis.Z: ((0, 0), (1, 1), (0, 1), (1, 0)),
}


def _as_axis(axis: str | Axis) -> Axis:
    try:
        return Axis(str(getattr(axis, "value", axis)).lower())
    except ValueError:
        raise MalformedInputError(f"Unknown rotation axis: {axis!r}, expected 'x', 'y' or 'z'") from None


def translation(delta: npt.ArrayLike) -> Matrix4:
    """Identity pose with its translation column set to ``delta``."""
    T = np.eye(4, dtype=np.float64)
    T[:3, 3] = as_vector3(delta, "delta")
    return T


def rotation(angle_deg: float, axis: str | Axis, *, snap_eps: float = ROTATION_SNAP_EPS) -> Matrix4:
    """Right-handed rotation about a principal axis as a 4x4 pose.

    Entries with ``|v| <= snap_eps`` are set to exactly zero, so
    axis-aligned angles such as 90 deg produce exact 0/1 patterns.
    """
    ax = _as_axis(axis)
    ang = np.deg2rad(float(angle_deg))
    c, s = np.cos(ang), np.sin(ang)
    cos_a, cos_b, neg_sin, pos_sin = _AXIS_SLOTS[ax]
    R = np.eye(4, dtype=np.float64)
    R[cos_a] = c
    R[cos_b] = c
    R[neg_sin] = -s
    R[pos_sin] = s
    R[np.abs(R) <= snap_eps] = 0.0
    return R


def compose(*matrices: npt.ArrayLike) -> Matrix4:
    """Left-to-right product of 4x4 poses; ``compose(T, R) == T @ R``."""
    result = np.eye(4, dtype=np.float64)
    for matrix in matrices:
        result = result @ as_matrix(matrix, 4, "transform")
    return result


@dataclass(slots=True)
class Transformation:
    matrix: Matrix4  # 4x4 homogeneous matrix

    def __post_init__(self) -> None:
        self.matrix = as_matrix(self.matrix, 4, "matrix")

    @property
    def rotation(self) -> npt.NDArray[np.float64]:
        return self.matrix[:3, :3]

    @property
    def translation(self) -> npt.NDArray[np.float64]:
        return self.matrix[:3, 3]

    def inverse(self) -> Transformation:
        """Closed-form rigid inverse ``[R^T, -R^T t]``."""
        inv = np.eye(4, dtype=np.float64)
        inv[:3, :3] = self.rotation.T
        inv[:3, 3] = -self.rotation.T @ self.translation
        LOGGER.debug("Computed inverse transformation")
        return Transformation(matrix=inv)

    def apply(self, points: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Map (3,) or (N,3) points through the transform."""
        pts = np.asarray(points, dtype=np.float64)
        return pts @ self.rotation.T + self.translation


def compose_transformations(*transforms: Transformation) -> Transformation:
    result = compose(*(t.matrix for t in transforms))
    LOGGER.debug("Composed {} transformations", len(transforms))
    return Transformation(matrix=result)


__all__ = [
    "Transformation",
    "compose",
    "compose_transformations",
    "rotation",
    "translation",
]
