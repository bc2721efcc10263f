# tests/test_angles.py
"""Tests for Z-Y-X Euler decomposition and construction."""

from __future__ import annotations

import numpy as np
import pytest

from beltframe.core.geometry.angles import (
    EulerCase,
    axis_angle_from_matrix,
    euler_from_matrix,
    log_rotation_analysis,
    matrix_from_euler,
)
from beltframe.core.geometry.transforms import compose, rotation
from beltframe.errors import MalformedInputError

REGULAR_ANGLES = [
    (30.0, 20.0, 10.0),
    (-120.0, 45.0, 170.0),
    (179.0, -80.0, -5.0),
    (0.0, 0.0, 0.0),
    (-49.0, 0.5, 90.0),
]


def test_matrix_from_euler_matches_axis_rotations() -> None:
    expected = compose(rotation(30.0, "z"), rotation(20.0, "y"), rotation(10.0, "x"))[:3, :3]

    assert np.allclose(matrix_from_euler(30.0, 20.0, 10.0, degrees=True), expected)


def test_radians_are_default() -> None:
    R = matrix_from_euler(0.3, -0.2, 0.1)
    solution = euler_from_matrix(R)

    assert solution.degrees is False
    assert np.allclose(solution.first, (0.3, -0.2, 0.1))


@pytest.mark.parametrize("angles", REGULAR_ANGLES)
def test_two_solutions_round_trip(angles: tuple[float, float, float]) -> None:
    R = matrix_from_euler(*angles, degrees=True)
    solution = euler_from_matrix(R, degrees=True)

    assert solution.case is EulerCase.TWO_SOLUTIONS
    assert len(solution.solutions) == 2
    for triple in solution.solutions:
        assert np.allclose(matrix_from_euler(*triple, degrees=True), R, atol=1e-12)


@pytest.mark.parametrize("angles", REGULAR_ANGLES)
def test_first_solution_recovers_principal_angles(angles: tuple[float, float, float]) -> None:
    R = matrix_from_euler(*angles, degrees=True)
    first = euler_from_matrix(R, degrees=True).first

    assert np.allclose(first, angles, atol=1e-9)


def test_second_solution_mirrors_pitch() -> None:
    R = matrix_from_euler(30.0, 20.0, 10.0, degrees=True)
    solution = euler_from_matrix(R, degrees=True)

    assert solution.second is not None
    assert solution.second[1] == pytest.approx(160.0)
    assert solution.second[0] == pytest.approx(-150.0)
    assert solution.second[2] == pytest.approx(-170.0)


@pytest.mark.parametrize("pitch, coupled", [(90.0, -30.0), (-90.0, 50.0)])
def test_gimbal_lock_reports_family(pitch: float, coupled: float) -> None:
    R = matrix_from_euler(40.0, pitch, 10.0, degrees=True)
    solution = euler_from_matrix(R, degrees=True)

    assert solution.case is EulerCase.GIMBAL_LOCKED
    assert solution.is_gimbal_locked
    assert solution.second is None
    assert solution.first[1] == pytest.approx(pitch)
    assert solution.coupled == pytest.approx(coupled)
    assert np.allclose(solution.family(40.0), (40.0, pitch, 10.0))
    for yaw in (-170.0, 0.0, 40.0, 125.0):
        member = solution.family(yaw)
        assert np.allclose(matrix_from_euler(*member, degrees=True), R, atol=1e-9)


def test_family_requires_gimbal_lock() -> None:
    solution = euler_from_matrix(np.eye(3))

    with pytest.raises(ValueError, match="gimbal"):
        solution.family(0.0)


def test_euler_rejects_bad_shape() -> None:
    with pytest.raises(MalformedInputError):
        euler_from_matrix(np.eye(4))


def test_axis_angle_readout() -> None:
    angle, axis = axis_angle_from_matrix(rotation(-49.0, "z")[:3, :3])

    assert angle == pytest.approx(49.0)
    assert np.allclose(axis, [0.0, 0.0, -1.0])

    angle, axis = axis_angle_from_matrix(np.eye(3))
    assert angle == 0.0
    assert np.array_equal(axis, [0.0, 0.0, 1.0])


def test_log_rotation_analysis_runs() -> None:
    log_rotation_analysis(matrix_from_euler(10.0, 20.0, 30.0, degrees=True))
