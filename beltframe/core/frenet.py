# beltframe/core/frenet.py
"""Frenet-style frames from local curve data."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from beltframe.core.fitting import fit_quadratic
from beltframe.core.geometry.linalg import Matrix3, Matrix4, Vector3, as_vector3, homogeneous, normalize
from beltframe.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _flip_to_positive_x(vec: Vector3) -> Vector3:
    """Primary tangent direction always has a non-negative x component."""
    return -vec if vec[0] < 0.0 else vec


@dataclass(frozen=True)
class FrenetFrame:
    """Orthonormal (tangent, binormal, normal) triad anchored at ``p``."""

    t: Vector3
    b: Vector3
    n: Vector3
    p: Vector3

    @property
    def rotation(self) -> Matrix3:
        return np.column_stack([self.t, self.b, self.n])

    @property
    def transform(self) -> Matrix4:
        """4x4 pose with columns [t, b, n, p]."""
        return homogeneous((self.t, self.b, self.n), self.p)


def frame_from_polynomial(
    p0: npt.ArrayLike, u1: npt.ArrayLike, u2: npt.ArrayLike, v1: npt.ArrayLike
) -> FrenetFrame:
    """Frame at ``p0`` from a quadratic through (u1, p0, u2) and a second direction toward ``v1``.

    The in-plane tangent is the analytic derivative of ``y = a*x^2 + b*x + c``
    at ``p0.x``; the normal is ``tanu x tanv`` so the local surface need not be
    horizontal.

    Raises:
        MalformedInputError: u1, p0, u2 share an x coordinate
        DegenerateGeometryError: v1 == p0, or tanv parallel to tanu
    """
    p0 = as_vector3(p0, "p0")
    u1 = as_vector3(u1, "u1")
    u2 = as_vector3(u2, "u2")
    v1 = as_vector3(v1, "v1")

    # sample order is (u1, p0, u2)
    a, b, _ = fit_quadratic(u1[0], p0[0], u2[0], u1[1], p0[1], u2[1])
    slope = 2.0 * a * p0[0] + b
    tanu = _flip_to_positive_x(normalize(np.array([1.0, slope, 0.0]), "u tangent"))
    tanv = normalize(v1 - p0, "v tangent")

    n = normalize(np.cross(tanu, tanv), "frame normal")
    binormal = normalize(np.cross(n, tanu), "binormal")
    LOGGER.debug("Polynomial frame at {}: slope={:.6g}", p0.tolist(), slope)
    return FrenetFrame(t=tanu, b=binormal, n=n, p=p0)


def frame_from_circular_arc(pt0: npt.ArrayLike, ptc: npt.ArrayLike) -> FrenetFrame:
    """Frame at ``pt0`` on a circle centred at ``ptc``.

    Normal is the radial direction, tangent its XY-perpendicular.

    Raises:
        DegenerateGeometryError: pt0 == ptc, or the radial vector is parallel to Z
    """
    pt0 = as_vector3(pt0, "pt0")
    ptc = as_vector3(ptc, "ptc")

    n = normalize(pt0 - ptc, "radial vector")
    t = _flip_to_positive_x(normalize(np.array([-n[1], n[0], 0.0]), "arc tangent"))
    binormal = np.cross(n, t)
    LOGGER.debug("Circular frame at {} about centre {}", pt0.tolist(), ptc.tolist())
    return FrenetFrame(t=t, b=binormal, n=n, p=pt0)


__all__ = ["FrenetFrame", "frame_from_circular_arc", "frame_from_polynomial"]
