"""Logging setup shared by every carematch module — stdlib only.

Console output always goes to stdout. A daily file under ``logs/`` (or
``CAREMATCH_LOG_DIR``) is added unless ``CAREMATCH_LOG_FILE=0``.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

_DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_HANDLER_TAG = "_carematch"
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; configures root handlers on first call."""
    global _configured
    if not _configured:
        _configure()
        _configured = True
    return logging.getLogger(name)


def log_file_path(now: datetime | None = None) -> Path:
    log_dir = Path(os.environ.get("CAREMATCH_LOG_DIR") or _DEFAULT_LOG_DIR)
    return log_dir / f"carematch_{(now or datetime.now()).strftime('%Y-%m-%d')}.log"


def _file_logging_enabled() -> bool:
    return os.environ.get("CAREMATCH_LOG_FILE", "1").strip().lower() not in ("0", "false", "no")


def _tagged(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
    return handler


def _configure() -> None:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    # Leave handlers installed by a host application (or pytest) alone.
    if any(not getattr(h, _HANDLER_TAG, False) for h in root.handlers):
        return

    console = _tagged(logging.StreamHandler(sys.stdout))
    console.setLevel(level)
    root.addHandler(console)

    if not _file_logging_enabled():
        return
    try:
        path = log_file_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = _tagged(logging.FileHandler(path, encoding="utf-8"))
        fh.setLevel(logging.DEBUG)
        root.addHandler(fh)
    except OSError:
        pass


def reset_logging() -> None:
    """Drop carematch's own handlers so the next get_logger() reconfigures."""
    global _configured
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG, False):
            root.removeHandler(h)
            h.close()
    _configured = False
