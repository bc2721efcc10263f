# beltframe/utils/error_tracker.py
"""Centralised error tracking for batch computations."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from beltframe.utils.logger import get_logger


@dataclass(slots=True)
class ErrorTracker:
    """Collect exceptions and contextual information during execution."""

    context: str = "ErrorTracker"
    errors: dict[str, list[str]] = field(default_factory=dict)

    # ────────────── collection API ──────────────
    def record(self, key: str, message: str) -> None:
        logger = get_logger(self.context)
        logger.error("{}: {}", key, message)
        self.errors.setdefault(key, []).append(message)

    def report(self, exc: BaseException, *, key: str = "exception") -> None:
        self.record(key, f"{type(exc).__name__}: {exc}")

    @contextmanager
    def capture(self, key: str, *errors: type[BaseException]) -> Iterator[None]:
        """Record listed exception types under ``key``; anything else propagates."""
        handled = errors or (Exception,)
        try:
            yield
        except handled as exc:
            self.report(exc, key=key)

    @property
    def failed(self) -> bool:
        return bool(self.errors)

    def summary(self) -> dict[str, list[str]]:
        logger = get_logger(self.context)
        if not self.errors:
            logger.info("No errors recorded")
            return {}
        for key, messages in self.errors.items():
            logger.warning("Encountered {} issues for {}", len(messages), key)
        return dict(self.errors)


__all__ = ["ErrorTracker"]
