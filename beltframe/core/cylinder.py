# beltframe/core/cylinder.py
"""Cylinder pose from two points on its axis and a radius."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from beltframe.core.belt import frame_vector, orthonormal_triad
from beltframe.core.geometry.linalg import Matrix4, Vector3, as_vector3, homogeneous
from beltframe.errors import MalformedInputError
from beltframe.utils.format import format_frame
from beltframe.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class Cylinder:
    """Radius plus a pose whose normal (z column) runs along the axis from c1 to c2."""

    radius: float
    transform: Matrix4

    @property
    def frame(self) -> npt.NDArray[np.float64]:
        return frame_vector(self.transform)

    @property
    def axis(self) -> Vector3:
        return self.transform[:3, 2]

    @property
    def origin(self) -> Vector3:
        return self.transform[:3, 3]

    def radial_distance(self, points: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Distance of (3,) or (N,3) points from the axis line."""
        d = np.asarray(points, dtype=np.float64) - self.origin
        along = d @ self.axis
        return np.linalg.norm(d - np.multiply.outer(along, self.axis), axis=-1)

    @classmethod
    def from_axis(cls, c1: npt.ArrayLike, c2: npt.ArrayLike, radius: float) -> Cylinder:
        """Cylinder anchored at ``c1`` with its axis toward ``c2``.

        Raises:
            MalformedInputError: radius is not a positive finite number
            DegenerateGeometryError: c1 == c2
        """
        c1 = as_vector3(c1, "c1")
        c2 = as_vector3(c2, "c2")
        radius = float(radius)
        if not np.isfinite(radius) or radius <= 0.0:
            raise MalformedInputError(f"cylinder radius must be positive, got {radius}")
        t, b, n = orthonormal_triad(c2 - c1)
        cyl = cls(radius=radius, transform=homogeneous((t, b, n), c1))
        LOGGER.debug("Cylinder R={:.6f}: {}", radius, format_frame(cyl.frame))
        return cyl

    @classmethod
    def from_radii(cls, c1: npt.ArrayLike, c2: npt.ArrayLike, radii: Sequence[float]) -> Cylinder:
        """Cylinder using the mean of repeated radius measurements."""
        values = np.asarray(radii, dtype=np.float64)
        if values.ndim != 1 or values.size == 0:
            raise MalformedInputError("radii must be a non-empty sequence")
        LOGGER.debug("Mean of {} radii, spread={:.6f}", values.size, float(np.ptp(values)))
        return cls.from_axis(c1, c2, float(values.mean()))


__all__ = ["Cylinder"]
