# beltframe/core/__init__.py
"""Frame-computation core: fits, Frenet frames, belt and cylinder poses."""

from __future__ import annotations

from beltframe.core.belt import BeltFrame, build_belt_frame, frame_vector
from beltframe.core.cylinder import Cylinder
from beltframe.core.fitting import Plane, fit_plane, fit_quadratic
from beltframe.core.frenet import FrenetFrame, frame_from_circular_arc, frame_from_polynomial

__all__ = [
    "BeltFrame",
    "Cylinder",
    "FrenetFrame",
    "Plane",
    "build_belt_frame",
    "fit_plane",
    "fit_quadratic",
    "frame_from_circular_arc",
    "frame_from_polynomial",
    "frame_vector",
]
