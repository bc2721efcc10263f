# beltframe/blade.py
"""Blade cross-section profiles and per-profile frames."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

import numpy as np
import numpy.typing as npt

from beltframe.config import PROFILE_TABLES
from beltframe.core.belt import BeltFrame, build_belt_frame
from beltframe.errors import FrameFitError, MalformedInputError
from beltframe.utils.error_tracker import ErrorTracker
from beltframe.utils.io import load_json
from beltframe.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _as_table(value: Any, name: str) -> npt.NDArray[np.float64]:
    try:
        arr = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise MalformedInputError(f"{name}: expected [x, y, z] triples ({exc})") from exc
    if arr.size == 0:
        return np.empty((0, 3), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise MalformedInputError(f"{name}: expected shape (N, 3), got {arr.shape}")
    return arr


@dataclass(frozen=True)
class Profile:
    """One blade cross-section: convex, concave, leading and trailing edge tables."""

    cx: npt.NDArray[np.float64]
    cv: npt.NDArray[np.float64]
    le: npt.NDArray[np.float64]
    re: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        for name in PROFILE_TABLES:
            object.__setattr__(self, name, _as_table(getattr(self, name), name))

    def table(self, name: str) -> npt.NDArray[np.float64]:
        if name not in PROFILE_TABLES:
            raise MalformedInputError(f"Unknown profile table {name!r}, expected one of {PROFILE_TABLES}")
        return getattr(self, name)

    def all_points(self) -> npt.NDArray[np.float64]:
        return np.vstack([self.table(name) for name in PROFILE_TABLES])


Airfoil = List[Profile]


def parse_blade(data: Any) -> Airfoil:
    """Build profiles from decoded JSON: a list of {cx, cv, le, re} objects."""
    if not isinstance(data, list):
        raise MalformedInputError("Top-level JSON must be an array")
    airfoil: Airfoil = []
    for idx, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise MalformedInputError(f"profile {idx}: expected an object")
        tables = {name: _as_table(entry.get(name, []), f"profile {idx}.{name}") for name in PROFILE_TABLES}
        airfoil.append(Profile(**tables))
    return airfoil


def load_blade_json(path: Path | str) -> Airfoil:
    """Read an airfoil from a JSON file.

    Raises:
        FileNotFoundError: path does not exist
        MalformedInputError: invalid JSON or unexpected layout
    """
    path = Path(path)
    try:
        data = load_json(path)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"JSON parse error in {path}: {exc}") from exc
    airfoil = parse_blade(data)
    LOGGER.info("Loaded profiles: {} from {}", len(airfoil), path.name)
    return airfoil


def profile_frames(
    airfoil: Airfoil,
    table: str = "cx",
    origin: Optional[npt.ArrayLike] = None,
    *,
    tracker: Optional[ErrorTracker] = None,
) -> list[Optional[BeltFrame]]:
    """Fit a plane frame through one table of every profile.

    The frame origin defaults to the table centroid. Profiles whose fit
    fails are recorded in ``tracker`` and left as None.
    """
    tracker = tracker or ErrorTracker(context="beltframe.blade")
    frames: list[Optional[BeltFrame]] = []
    for idx, profile in enumerate(airfoil):
        pts = profile.table(table)
        frame: Optional[BeltFrame] = None
        with tracker.capture(f"profile {idx}.{table}", FrameFitError):
            if pts.shape[0] == 0:
                raise MalformedInputError(f"table {table!r} is empty")
            o = pts.mean(axis=0) if origin is None else origin
            frame = build_belt_frame(o, pts[:, 0], pts[:, 1], pts[:, 2])
        frames.append(frame)
    tracker.summary()
    return frames


__all__ = ["Airfoil", "Profile", "load_blade_json", "parse_blade", "profile_frames"]
