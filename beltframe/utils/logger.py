# beltframe/utils/logger.py
"""Single-source Loguru setup: console sink plus optional file sink."""

from __future__ import annotations

import inspect
import sys
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, TextIO

from loguru import logger as _root_logger
from loguru._logger import Logger as LoguruLogger

from beltframe.config import get_settings

_CONFIGURED = False
_HANDLER_IDS: list[int] = []
_LOG_HANDLE: Optional[TextIO] = None
_LOG_FILE: Optional[Path] = None


# ---------- sinks as callables ----------
def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    # one record == one line
    sys.stderr.write(
        f"{r['time']:%H:%M:%S} | {r['level'].name: <3.3} | {module} | {r['message']}\n"
    )


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(
            f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n"
        )
        fh.flush()

    return _file_sink


def _own_record(record) -> bool:
    # records from get_logger() carry a bound module; host records do not
    return "module" in record["extra"]


def _release_handlers() -> None:
    global _LOG_HANDLE, _LOG_FILE

    for handler_id in _HANDLER_IDS:
        _root_logger.remove(handler_id)
    _HANDLER_IDS.clear()
    if _LOG_HANDLE is not None:
        _LOG_HANDLE.close()
    _LOG_HANDLE = None
    _LOG_FILE = None


def _configure_logger(level: str | None = None, to_file: bool | None = None) -> None:
    global _CONFIGURED, _LOG_HANDLE, _LOG_FILE

    settings = get_settings()
    level = (level or settings.logging.level).upper()
    to_file = settings.logging.to_file if to_file is None else to_file

    # only our own sinks are replaced; host sinks stay installed
    _release_handlers()
    _HANDLER_IDS.append(
        _root_logger.add(_console_sink, level=level, filter=_own_record, catch=True)
    )

    if to_file:
        log_dir = settings.paths.logs_root
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_path = log_dir / f"{settings.logging.file_prefix}_{timestamp}.log"
        _LOG_FILE = file_path
        _LOG_HANDLE = file_path.open("a", encoding="utf-8")
        _HANDLER_IDS.append(
            _root_logger.add(
                _make_file_sink(_LOG_HANDLE), level=level, filter=_own_record, catch=True
            )
        )

    _CONFIGURED = True


def get_logger(name: str | None = None) -> LoguruLogger:
    if not _CONFIGURED:
        _configure_logger()

    # resolve module name from the caller when not given
    module_name = name
    if module_name is None:
        frame = inspect.currentframe()
        caller_frame = frame.f_back if frame is not None else None
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__

    bound = _root_logger.bind(module=module_name or "unknown")

    def _tag(label: str, msg: str | None = None, *args, level: str = "info") -> None:
        text = f"[{label}] " + (msg or "")
        method = getattr(bound, level, bound.info)
        if args:
            text = text.format(*args)
        method(text)

    setattr(bound, "tag", _tag)
    return bound


def configure(level: str | None = None, to_file: bool | None = None) -> None:
    _configure_logger(level=level, to_file=to_file)


@contextmanager
def logging_context(
    *, level: str | None = None, to_file: bool | None = None
) -> Iterator[LoguruLogger]:
    configure(level=level, to_file=to_file)
    yield get_logger()


def log_file() -> Optional[Path]:
    """Path of the active file sink, if any."""
    return _LOG_FILE


__all__ = ["configure", "get_logger", "log_file", "logging_context"]
