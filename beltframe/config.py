# beltframe/config.py
"""Centralized configuration for the beltframe toolkit.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Final, Tuple

# ============================================================================
# PROJECT PATHS
# ============================================================================

BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent


def _env_path(key: str, default: Path) -> Path:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


def _env_str(key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(key)
    return value if value is not None else default


def _env_bool(key: str, default: bool) -> bool:
    """Resolve boolean flag ("1", "true", "yes", "on") from environment."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# ============================================================================
# NUMERICAL POLICY CONSTANTS
# ============================================================================

# Rotation entries with |v| <= eps are snapped to exact zero.
ROTATION_SNAP_EPS: Final[float] = 1e-4

# Belt frame helper axis: world X unless |n.x| reaches this value.
HELPER_AXIS_THRESHOLD: Final[float] = 0.9

# Relative rank threshold on the pivoted QR diagonal.
SINGULAR_RCOND: Final[float] = 1e-12

# Vectors shorter than this cannot be normalized.
DEGENERATE_NORM_EPS: Final[float] = 1e-12

# 1 - |R20| below this is treated as gimbal lock.
GIMBAL_LOCK_TOL: Final[float] = 1e-9

# Minimum point counts per fit.
PLANE_MIN_POINTS: Final[int] = 3
QUADRATIC_POINTS: Final[int] = 3

# ============================================================================
# BLADE DATA CONSTANTS
# ============================================================================

PROFILE_TABLES: Final[Tuple[str, ...]] = ("cx", "cv", "le", "re")
FILENAME_LOG_PREFIX: Final[str] = "beltframe"

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Axis(str, Enum):
    """Principal axes accepted by the rotation builder."""

    X = "x"
    Y = "y"
    Z = "z"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class PathsConfig:
    """File system paths configuration."""

    data_root: Path
    logs_root: Path


@dataclass(frozen=True)
class LoggingConfig:
    """Loguru sink configuration."""

    level: str = LogLevel.INFO.value
    to_file: bool = False
    file_prefix: str = FILENAME_LOG_PREFIX


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main application configuration.

    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    paths: PathsConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings from environment variables with defaults."""
    data_root = _env_path("BELTFRAME_DATA_ROOT", BASE_DIR / "data")
    logs_root = _env_path("BELTFRAME_LOGS_ROOT", data_root / "logs")
    paths = PathsConfig(data_root=data_root, logs_root=logs_root)
    logging = LoggingConfig(
        level=_env_str("BELTFRAME_LOG_LEVEL", LogLevel.INFO.value).upper(),
        to_file=_env_bool("BELTFRAME_LOG_FILE", False),
    )
    return Settings(paths=paths, logging=logging)


__all__ = [
    "Axis",
    "BASE_DIR",
    "DEGENERATE_NORM_EPS",
    "GIMBAL_LOCK_TOL",
    "HELPER_AXIS_THRESHOLD",
    "LogLevel",
    "LoggingConfig",
    "PLANE_MIN_POINTS",
    "PROFILE_TABLES",
    "PathsConfig",
    "QUADRATIC_POINTS",
    "ROTATION_SNAP_EPS",
    "SINGULAR_RCOND",
    "Settings",
    "get_settings",
]
