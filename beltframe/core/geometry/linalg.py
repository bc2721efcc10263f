# beltframe/core/geometry/linalg.py
"""Fixed-size vector/matrix primitives and a rank-revealing 3x3 solve."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
from scipy import linalg as sla

from beltframe.config import DEGENERATE_NORM_EPS, SINGULAR_RCOND
from beltframe.errors import DegenerateGeometryError, MalformedInputError, SingularSystemError

Vector3 = npt.NDArray[np.float64]
Matrix3 = npt.NDArray[np.float64]
Matrix4 = npt.NDArray[np.float64]


def as_vector3(value: npt.ArrayLike, name: str = "vector") -> Vector3:
    """Coerce ``value`` to a float64 array of shape (3,)."""
    arr = np.asarray(value, dtype=np.float64)
    if arr.shape != (3,):
        raise MalformedInputError(f"{name} must have shape (3,), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise MalformedInputError(f"{name} contains non-finite values")
    return arr


def as_matrix(value: npt.ArrayLike, size: int, name: str = "matrix") -> npt.NDArray[np.float64]:
    """Coerce ``value`` to a float64 array of shape (size, size)."""
    arr = np.asarray(value, dtype=np.float64)
    if arr.shape != (size, size):
        raise MalformedInputError(f"{name} must be {size}x{size}, got {arr.shape}")
    return arr


def as_series(value: npt.ArrayLike, name: str) -> npt.NDArray[np.float64]:
    """Coerce a coordinate sequence to a finite 1D float64 array."""
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim != 1:
        raise MalformedInputError(f"{name} must be one-dimensional, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise MalformedInputError(f"{name} contains non-finite values")
    return arr


def normalize(vec: npt.ArrayLike, what: str = "vector") -> Vector3:
    """Return ``vec / |vec|``; zero-length vectors raise DegenerateGeometryError."""
    arr = np.asarray(vec, dtype=np.float64)
    norm = float(np.linalg.norm(arr))
    if not np.isfinite(norm) or norm <= DEGENERATE_NORM_EPS:
        raise DegenerateGeometryError(f"cannot normalize zero-length {what} (|v|={norm:.3e})")
    return arr / norm


def solve3(
    U: npt.ArrayLike, V: npt.ArrayLike, *, rcond: float = SINGULAR_RCOND
) -> Vector3:
    """Solve ``U @ P = V`` for a 3x3 system using column-pivoted QR.

    Rank is read from the pivoted R diagonal: the system is rejected when
    ``|R[2, 2]| <= rcond * |R[0, 0]|``.

    Raises:
        SingularSystemError: if U is rank deficient to working precision.
    """
    U = as_matrix(U, 3, "U")
    V = as_vector3(V, "V")
    Q, R, piv = sla.qr(U, pivoting=True)
    diag = np.abs(np.diag(R))
    if diag[0] == 0.0 or diag[-1] <= rcond * diag[0]:
        raise SingularSystemError(
            f"3x3 system is singular to working precision (|R| diagonal={diag.tolist()})"
        )
    y = sla.solve_triangular(R, Q.T @ V)
    P = np.empty(3, dtype=np.float64)
    P[piv] = y
    return P


def homogeneous(columns: tuple[npt.ArrayLike, ...], origin: npt.ArrayLike) -> Matrix4:
    """Pack three orientation columns and an origin into a 4x4 pose."""
    T = np.eye(4, dtype=np.float64)
    for idx, col in enumerate(columns):
        T[:3, idx] = col
    T[:3, 3] = origin
    return T


def orthonormality_error(R: npt.ArrayLike) -> float:
    """Frobenius norm of ``R^T R - I``."""
    R = np.asarray(R, dtype=np.float64)
    return float(np.linalg.norm(R.T @ R - np.eye(R.shape[0])))


__all__ = [
    "Matrix3",
    "Matrix4",
    "Vector3",
    "as_matrix",
    "as_series",
    "as_vector3",
    "homogeneous",
    "normalize",
    "orthonormality_error",
    "solve3",
]
