# beltframe/utils/io.py
"""File IO helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from beltframe.utils.logger import get_logger

LOGGER = get_logger(__name__)


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    LOGGER.debug("Loaded JSON from {}", path)
    return data


__all__ = ["load_json"]
