# tests/test_cylinder.py
"""Tests for the cylinder pose built from axis points."""

from __future__ import annotations

import numpy as np
import pytest

from beltframe.core.cylinder import Cylinder
from beltframe.errors import DegenerateGeometryError, MalformedInputError


def test_vertical_axis_frame(assert_orthonormal) -> None:
    cyl = Cylinder.from_axis([0.0, 0.0, 0.0], [0.0, 0.0, 10.0], 5.0)

    assert cyl.radius == 5.0
    assert np.allclose(cyl.axis, [0.0, 0.0, 1.0])
    assert np.allclose(cyl.transform[:3, 0], [-1.0, 0.0, 0.0])
    assert np.allclose(cyl.transform[:3, 1], [0.0, -1.0, 0.0])
    assert_orthonormal(cyl.transform[:3, :3])


def test_axis_along_x_uses_y_helper() -> None:
    cyl = Cylinder.from_axis([0.0, 0.0, 0.0], [10.0, 0.0, 0.0], 1.0)

    assert np.allclose(cyl.transform[:3, 0], [0.0, -1.0, 0.0])
    assert np.allclose(cyl.transform[:3, 1], [0.0, 0.0, -1.0])


def test_radial_distance() -> None:
    cyl = Cylinder.from_axis([1.0, 1.0, 0.0], [1.0, 1.0, 3.0], 5.0)

    assert cyl.radial_distance([6.0, 1.0, 2.0]) == pytest.approx(5.0)
    assert np.allclose(cyl.radial_distance([[1.0, 4.0, -7.0], [1.0, 1.0, 9.0]]), [3.0, 0.0])


def test_from_radii_uses_mean(assert_orthonormal) -> None:
    radii = [12.991316, 12.990244, 12.998138, 12.999339, 13.008986, 13.009134, 13.019839, 13.019753]
    cyl = Cylinder.from_radii([0.002515, 120.0, 0.151981], [-0.061220, 180.0, 0.422887], radii)

    assert cyl.radius == pytest.approx(float(np.mean(radii)))
    assert np.allclose(cyl.frame[:3], [0.002515, 120.0, 0.151981])
    assert_orthonormal(cyl.transform[:3, :3])


def test_rejects_degenerate_axis() -> None:
    with pytest.raises(DegenerateGeometryError):
        Cylinder.from_axis([1.0, 2.0, 3.0], [1.0, 2.0, 3.0], 2.0)


@pytest.mark.parametrize("radius", [0.0, -1.0, float("nan")])
def test_rejects_bad_radius(radius: float) -> None:
    with pytest.raises(MalformedInputError, match="radius"):
        Cylinder.from_axis([0.0, 0.0, 0.0], [0.0, 0.0, 1.0], radius)


def test_rejects_empty_radii() -> None:
    with pytest.raises(MalformedInputError, match="radii"):
        Cylinder.from_radii([0.0, 0.0, 0.0], [0.0, 0.0, 1.0], [])
