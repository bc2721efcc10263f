# beltframe/utils/__init__.py
"""Utility package re-exporting shared helpers for beltframe."""

from beltframe.utils.error_tracker import ErrorTracker
from beltframe.utils.format import format_frame, format_matrix, numpy_print_options
from beltframe.utils.io import load_json
from beltframe.utils.logger import configure, get_logger

__all__ = [
    "ErrorTracker",
    "configure",
    "format_frame",
    "format_matrix",
    "get_logger",
    "load_json",
    "numpy_print_options",
]
