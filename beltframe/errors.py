# beltframe/errors.py
"""Exceptions raised by the frame-computation core."""

from __future__ import annotations


class FrameFitError(ValueError):
    """Base class for recoverable fitting and frame-construction failures."""


class MalformedInputError(FrameFitError):
    """Input has the wrong shape, length or count, or duplicated samples."""


class SingularSystemError(FrameFitError):
    """Linear system is rank deficient to working precision."""


class DegenerateGeometryError(FrameFitError):
    """A zero-length vector had to be normalized."""


__all__ = [
    "DegenerateGeometryError",
    "FrameFitError",
    "MalformedInputError",
    "SingularSystemError",
]
