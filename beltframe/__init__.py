# beltframe/__init__.py
"""Reference frames from measured 3D points: plane fits, Frenet frames, Euler angles."""

from __future__ import annotations

from beltframe.blade import Airfoil, Profile, load_blade_json, profile_frames
from beltframe.config import Settings, get_settings
from beltframe.core import (
    BeltFrame,
    Cylinder,
    FrenetFrame,
    Plane,
    build_belt_frame,
    fit_plane,
    fit_quadratic,
    frame_from_circular_arc,
    frame_from_polynomial,
    frame_vector,
)
from beltframe.core.geometry import (
    EulerCase,
    EulerSolution,
    Transformation,
    compose,
    euler_from_matrix,
    matrix_from_euler,
    rotation,
    translation,
)
from beltframe.errors import (
    DegenerateGeometryError,
    FrameFitError,
    MalformedInputError,
    SingularSystemError,
)

__all__ = [
    "Airfoil",
    "BeltFrame",
    "Cylinder",
    "DegenerateGeometryError",
    "EulerCase",
    "EulerSolution",
    "FrameFitError",
    "FrenetFrame",
    "MalformedInputError",
    "Plane",
    "Profile",
    "Settings",
    "SingularSystemError",
    "Transformation",
    "build_belt_frame",
    "compose",
    "euler_from_matrix",
    "fit_plane",
    "fit_quadratic",
    "frame_from_circular_arc",
    "frame_from_polynomial",
    "frame_vector",
    "get_settings",
    "load_blade_json",
    "matrix_from_euler",
    "profile_frames",
    "rotation",
    "translation",
]
