# beltframe/core/belt.py
"""Belt frame: plane fit through measured surface points anchored at a measured origin."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from beltframe.config import HELPER_AXIS_THRESHOLD
from beltframe.core.fitting import Plane, fit_plane
from beltframe.core.geometry.linalg import (
    Matrix3,
    Matrix4,
    Vector3,
    as_matrix,
    as_vector3,
    homogeneous,
    normalize,
    orthonormality_error,
)
from beltframe.utils.format import format_frame
from beltframe.utils.logger import get_logger

LOGGER = get_logger(__name__)

_UNIT_X = np.array([1.0, 0.0, 0.0])
_UNIT_Y = np.array([0.0, 1.0, 0.0])


def frame_vector(transform: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """[X, Y, Z, A, B, C] in degrees from a 4x4 pose.

    ``A = atan2(R10, R00)``, ``B = asin(-R20)``, ``C = atan2(R21, R22)``.
    """
    T = as_matrix(transform, 4, "transform")
    A = np.arctan2(T[1, 0], T[0, 0])
    B = np.arcsin(np.clip(-T[2, 0], -1.0, 1.0))
    C = np.arctan2(T[2, 1], T[2, 2])
    return np.concatenate([T[:3, 3], np.rad2deg([A, B, C])])


def orthonormal_triad(
    normal: npt.ArrayLike, *, helper_threshold: float = HELPER_AXIS_THRESHOLD
) -> tuple[Vector3, Vector3, Vector3]:
    """(tangent, binormal, normal) around a given normal direction.

    The helper axis is world X unless ``|n.x| >= helper_threshold``, then
    world Y. The tangent is the negated projection of the helper onto the
    plane, and is re-derived as ``b x n`` after the binormal is built.
    """
    n = normalize(normal, "plane normal")
    helper = _UNIT_X if abs(n[0]) < helper_threshold else _UNIT_Y
    t = -normalize(helper - (helper @ n) * n, "projected helper")
    b = normalize(np.cross(n, t), "binormal")
    t = np.cross(b, n)
    return t, b, n


@dataclass(frozen=True)
class BeltFrame:
    """Pose of a fitted surface: full 4x4 transform plus its derived 6-vector."""

    transform: Matrix4
    plane: Plane | None = None

    @property
    def frame(self) -> npt.NDArray[np.float64]:
        """[X, Y, Z, A, B, C], angles in degrees."""
        return frame_vector(self.transform)

    @property
    def rotation(self) -> Matrix3:
        return self.transform[:3, :3]

    @property
    def origin(self) -> Vector3:
        return self.transform[:3, 3]

    @property
    def normal(self) -> Vector3:
        return self.transform[:3, 2]


def build_belt_frame(
    origin: npt.ArrayLike, x: npt.ArrayLike, y: npt.ArrayLike, z: npt.ArrayLike
) -> BeltFrame:
    """Fit a plane through (x, y, z) and build an orthonormal frame at ``origin``.

    Raises:
        MalformedInputError: bad origin or coordinate sequences
        SingularSystemError: points do not determine a plane
    """
    o = as_vector3(origin, "origin")
    plane = fit_plane(x, y, z)
    t, b, n = orthonormal_triad(plane.normal)
    T = homogeneous((t, b, n), o)

    result = BeltFrame(transform=T, plane=plane)
    LOGGER.info("Belt frame: {}", format_frame(result.frame))
    LOGGER.debug("Belt frame orthogonality deviation: {:.3e}", orthonormality_error(T[:3, :3]))
    return result


__all__ = ["BeltFrame", "build_belt_frame", "frame_vector", "orthonormal_triad"]
