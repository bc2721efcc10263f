# beltframe/core/fitting.py
"""Closed-form least-squares fits: plane through a point cloud, 3-point quadratic."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from beltframe.config import PLANE_MIN_POINTS, QUADRATIC_POINTS
from beltframe.core.geometry.linalg import Vector3, as_series, solve3
from beltframe.errors import MalformedInputError
from beltframe.utils.logger import get_logger

LOGGER = get_logger(__name__)

# Vandermonde rows at large offsets are legitimately ill-scaled; only an
# exactly rank-deficient pivot is rejected after the duplicate-x check.
_QUADRATIC_RCOND = float(np.finfo(np.float64).eps)


@dataclass(frozen=True)
class Plane:
    """Fitted plane in regression and unit-normal implicit form.

    ``z = AA*x + BB*y + DD`` and ``A*x + B*y + C*z + D = 0`` with
    ``A^2 + B^2 + C^2 = 1`` and ``C > 0``.
    """

    A: float
    B: float
    C: float
    D: float
    AA: float
    BB: float
    DD: float

    @classmethod
    def from_regression(cls, AA: float, BB: float, DD: float) -> Plane:
        C = float(np.sqrt(1.0 / (AA * AA + BB * BB + 1.0)))
        return cls(A=-AA * C, B=-BB * C, C=C, D=-DD * C, AA=AA, BB=BB, DD=DD)

    @property
    def normal(self) -> Vector3:
        return np.array([self.A, self.B, self.C], dtype=np.float64)

    def signed_distance(self, points: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Distance of (3,) or (N,3) points along the unit normal."""
        pts = np.asarray(points, dtype=np.float64)
        return pts @ self.normal + self.D

    def z_at(self, x: npt.ArrayLike, y: npt.ArrayLike) -> npt.NDArray[np.float64]:
        return self.AA * np.asarray(x, dtype=np.float64) + self.BB * np.asarray(y, dtype=np.float64) + self.DD


def fit_plane(x: npt.ArrayLike, y: npt.ArrayLike, z: npt.ArrayLike) -> Plane:
    """Ordinary least-squares plane ``z = AA*x + BB*y + DD``.

    Args:
        x, y, z: Equal-length coordinate sequences, at least 3 points

    Returns:
        Plane with both coefficient forms

    Raises:
        MalformedInputError: too few points or mismatched lengths
        SingularSystemError: points do not determine a non-vertical plane
    """
    xs = as_series(x, "x")
    ys = as_series(y, "y")
    zs = as_series(z, "z")
    if not (xs.size == ys.size == zs.size):
        raise MalformedInputError(
            f"x, y, z must have equal lengths, got {xs.size}, {ys.size}, {zs.size}"
        )
    if xs.size < PLANE_MIN_POINTS:
        raise MalformedInputError(
            f"plane fit needs at least {PLANE_MIN_POINTS} points, got {xs.size}"
        )

    # centred coordinates keep U well scaled at machine-frame offsets
    x0, y0 = float(xs.mean()), float(ys.mean())
    xc, yc = xs - x0, ys - y0
    n = float(xs.size)
    U = np.array(
        [
            [xc @ xc, xc @ yc, xc.sum()],
            [xc @ yc, yc @ yc, yc.sum()],
            [xc.sum(), yc.sum(), n],
        ]
    )
    V = np.array([xc @ zs, yc @ zs, zs.sum()])
    AA, BB, DDc = solve3(U, V)
    DD = DDc - AA * x0 - BB * y0

    plane = Plane.from_regression(float(AA), float(BB), float(DD))
    LOGGER.debug(
        "Plane fit over {} points: AA={:.6g} BB={:.6g} DD={:.6g}", int(n), plane.AA, plane.BB, plane.DD
    )
    return plane


def fit_quadratic(
    x0: float, x1: float, x2: float, y0: float, y1: float, y2: float
) -> tuple[float, float, float]:
    """Exact ``y = a*x^2 + b*x + c`` through three samples.

    Raises:
        MalformedInputError: non-finite samples, or two of the x values coincide
    """
    xs = as_series([x0, x1, x2], "x")
    ys = as_series([y0, y1, y2], "y")
    if np.unique(xs).size < QUADRATIC_POINTS:
        raise MalformedInputError(f"quadratic fit needs distinct x values, got {xs.tolist()}")
    A = np.column_stack([xs * xs, xs, np.ones(3)])
    a, b, c = solve3(A, ys, rcond=_QUADRATIC_RCOND)
    return float(a), float(b), float(c)


__all__ = ["Plane", "fit_plane", "fit_quadratic"]
