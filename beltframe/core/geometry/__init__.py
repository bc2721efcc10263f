# beltframe/core/geometry/__init__.py
"""Geometric primitives, rigid transforms and rotation conversions."""

from __future__ import annotations

from beltframe.core.geometry.angles import (
    EulerCase,
    EulerSolution,
    axis_angle_from_matrix,
    euler_from_matrix,
    matrix_from_euler,
)
from beltframe.core.geometry.linalg import homogeneous, normalize, solve3
from beltframe.core.geometry.transforms import (
    Transformation,
    compose,
    compose_transformations,
    rotation,
    translation,
)

__all__ = [
    "EulerCase",
    "EulerSolution",
    "Transformation",
    "axis_angle_from_matrix",
    "compose",
    "compose_transformations",
    "euler_from_matrix",
    "homogeneous",
    "matrix_from_euler",
    "normalize",
    "rotation",
    "solve3",
    "translation",
]
