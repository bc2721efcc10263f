# beltframe/utils/format.py
"""Formatting helpers for NumPy outputs."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

import numpy as np
import numpy.typing as npt


@contextmanager
def numpy_print_options(*, precision: int = 4, suppress: bool = True) -> Iterator[None]:
    original = np.get_printoptions()
    np.set_printoptions(precision=precision, suppress=suppress)
    try:
        yield
    finally:
        np.set_printoptions(**original)


def format_matrix(arr: npt.NDArray[np.float64], precision: int = 6) -> str:
    """Format a NumPy array as a clean multi-line string.

    Args:
        arr: NumPy array to format
        precision: Number of decimal places

    Returns:
        Formatted string representation
    """
    with numpy_print_options(precision=precision, suppress=True):
        return str(np.asarray(arr))


def format_frame(frame: Sequence[float], precision: int = 3) -> str:
    """Render an [X,Y,Z,A,B,C] frame as a single line."""
    x, y, z, a, b, c = (round(float(v), precision) for v in frame)
    return f"XYZ=({x}, {y}, {z}) ABC=({a}, {b}, {c})"


__all__ = ["format_frame", "format_matrix", "numpy_print_options"]
