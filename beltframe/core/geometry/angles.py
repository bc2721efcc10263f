# beltframe/core/geometry/angles.py
"""Rotation matrix conversions: Z-Y-X Euler angles, axis-angle, degrees/radians.

Convention: ``R = Rz(A) @ Ry(B) @ Rx(C)`` with yaw ``A`` about Z, pitch ``B``
about Y and roll ``C`` about X. Extraction away from gimbal lock yields two
valid triples; at pitch = +-90 deg only the coupled angle is observable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt
from scipy.spatial.transform import Rotation as SciRot

from beltframe.config import GIMBAL_LOCK_TOL
from beltframe.core.geometry.linalg import Matrix3, as_matrix
from beltframe.utils.format import numpy_print_options
from beltframe.utils.logger import get_logger

LOGGER = get_logger(__name__)

EULER_SEQ = "ZYX"  # intrinsic: Rz @ Ry @ Rx

Angles = Tuple[float, float, float]


class EulerCase(str, Enum):
    """Shape of the rotation-to-Euler answer."""

    TWO_SOLUTIONS = "two_solutions"
    GIMBAL_LOCKED = "gimbal_locked"


def _wrap(angle: float, degrees: bool) -> float:
    rad = np.deg2rad(angle) if degrees else angle
    wrapped = float(np.arctan2(np.sin(rad), np.cos(rad)))
    return float(np.rad2deg(wrapped)) if degrees else wrapped


@dataclass(frozen=True)
class EulerSolution:
    """Result of decomposing a rotation matrix into (A, B, C).

    Attributes:
        case: TWO_SOLUTIONS or GIMBAL_LOCKED
        first: Principal triple, pitch in [-90, 90] deg
        second: Alternative triple (pitch mirrored about 90 deg), None at gimbal lock
        degrees: Whether angles are in degrees
        coupled: At gimbal lock, ``C - A`` for pitch +90 deg or ``A + C`` for pitch -90 deg
    """

    case: EulerCase
    first: Angles
    second: Optional[Angles]
    degrees: bool = False
    coupled: Optional[float] = None

    @property
    def is_gimbal_locked(self) -> bool:
        return self.case is EulerCase.GIMBAL_LOCKED

    @property
    def solutions(self) -> tuple[Angles, ...]:
        if self.second is None:
            return (self.first,)
        return (self.first, self.second)

    def family(self, yaw: float) -> Angles:
        """Member of the gimbal-lock family with the given yaw."""
        if not self.is_gimbal_locked or self.coupled is None:
            raise ValueError("family() is only defined for gimbal-locked solutions")
        pitch = self.first[1]
        roll = self.coupled + yaw if pitch > 0 else self.coupled - yaw
        return (_wrap(yaw, self.degrees), pitch, _wrap(roll, self.degrees))


def euler_from_matrix(R: npt.ArrayLike, degrees: bool = False) -> EulerSolution:
    """Decompose a rotation matrix into Z-Y-X Euler angles.

    Args:
        R: 3x3 rotation matrix
        degrees: Return angles in degrees if True, radians if False

    Returns:
        EulerSolution with both valid triples, or the gimbal-lock family
    """
    R = as_matrix(R, 3, "R")
    r20 = float(np.clip(R[2, 0], -1.0, 1.0))
    conv = np.rad2deg if degrees else (lambda v: v)

    if 1.0 - abs(r20) < GIMBAL_LOCK_TOL:
        if r20 < 0.0:
            pitch = np.pi / 2.0
            coupled = float(np.arctan2(R[0, 1], R[1, 1]))  # C - A
        else:
            pitch = -np.pi / 2.0
            coupled = float(np.arctan2(-R[0, 1], R[1, 1]))  # A + C
        LOGGER.debug("Gimbal lock: R20={:.12f}", r20)
        return EulerSolution(
            case=EulerCase.GIMBAL_LOCKED,
            first=(0.0, float(conv(pitch)), float(conv(coupled))),
            second=None,
            degrees=degrees,
            coupled=float(conv(coupled)),
        )

    b1 = float(np.arcsin(-r20))
    a1 = float(np.arctan2(R[1, 0], R[0, 0]))
    c1 = float(np.arctan2(R[2, 1], R[2, 2]))

    b2 = _wrap(np.pi - b1, degrees=False)
    cb2 = np.cos(b2)
    a2 = float(np.arctan2(R[1, 0] / cb2, R[0, 0] / cb2))
    c2 = float(np.arctan2(R[2, 1] / cb2, R[2, 2] / cb2))

    return EulerSolution(
        case=EulerCase.TWO_SOLUTIONS,
        first=(float(conv(a1)), float(conv(b1)), float(conv(c1))),
        second=(float(conv(a2)), float(conv(b2)), float(conv(c2))),
        degrees=degrees,
    )


def matrix_from_euler(A: float, B: float, C: float, degrees: bool = False) -> Matrix3:
    """Build ``Rz(A) @ Ry(B) @ Rx(C)``.

    Args:
        A: Yaw about Z
        B: Pitch about Y
        C: Roll about X
        degrees: Input angles in degrees if True, radians if False

    Returns:
        3x3 rotation matrix
    """
    rot = SciRot.from_euler(EULER_SEQ, [A, B, C], degrees=degrees)
    return rot.as_matrix()


def axis_angle_from_matrix(R: npt.ArrayLike) -> tuple[float, npt.NDArray[np.float64]]:
    """Convert rotation matrix to axis-angle representation.

    Returns:
        Tuple of (angle_degrees, axis_unit_vector)
    """
    rotvec = SciRot.from_matrix(as_matrix(R, 3, "R")).as_rotvec()

    angle_rad = float(np.linalg.norm(rotvec))
    angle_deg = float(np.rad2deg(angle_rad))

    if angle_rad > 1e-12:
        axis = rotvec / angle_rad
    else:
        axis = np.array([0.0, 0.0, 1.0])  # any axis for zero rotation

    return angle_deg, axis


def log_rotation_analysis(R: npt.ArrayLike) -> None:
    """Log a rotation matrix in axis-angle and Euler form at DEBUG level."""
    angle_deg, axis = axis_angle_from_matrix(R)
    euler = euler_from_matrix(R, degrees=True)
    with numpy_print_options(precision=6):
        LOGGER.debug("Axis-angle: {:.6f} deg about {}", angle_deg, axis)
    for idx, triple in enumerate(euler.solutions, start=1):
        LOGGER.debug("Euler ZYX #{} (deg): {}", idx, [round(v, 6) for v in triple])


__all__ = [
    "EULER_SEQ",
    "EulerCase",
    "EulerSolution",
    "axis_angle_from_matrix",
    "euler_from_matrix",
    "log_rotation_analysis",
    "matrix_from_euler",
]
