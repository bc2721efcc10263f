# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pytest

if TYPE_CHECKING:
    from beltframe.core.belt import BeltFrame


@pytest.fixture
def belt_origin() -> np.ndarray:
    """Measured belt origin (B -> 0)."""
    return np.array([1009.15, -16.49, 623.81])


@pytest.fixture
def belt_points() -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Nine measured belt surface points as x, y, z sequences."""
    x = np.array([996.14, 1010.89, 1010.89, 1023.99, 1014.15, 1014.15, 1004.89, 1004.89, 1009.15])
    y = np.array([-16.14, -29.24, 0.92, -16.14, -10.54, -22.95, -22.21, -10.51, -16.49])
    z = np.array([625.57, 623.52, 623.48, 622.35, 623.61, 622.86, 624.73, 624.40, 623.81])
    return x, y, z


@pytest.fixture
def belt_frame(belt_origin, belt_points) -> BeltFrame:
    """Belt frame built from the reference data set."""
    from beltframe.core.belt import build_belt_frame

    return build_belt_frame(belt_origin, *belt_points)


@pytest.fixture
def assert_orthonormal():
    """Check that columns are unit length, pairwise orthogonal and right handed."""

    def _check(R: np.ndarray, tol: float = 1e-9) -> None:
        R = np.asarray(R)
        assert np.allclose(R.T @ R, np.eye(3), atol=tol)
        assert abs(np.linalg.det(R) - 1.0) < tol

    return _check
