"""Logger configuration for luachflow.

This module configures the ``luachflow`` logger that every module of
the package logs through (``logging.getLogger(__name__)`` below the
package resolves to a child of it).

Goals
-----
- Be idempotent (safe to call multiple times).
- Work even if the host application already configured logging.
- Write to ``stderr`` by default, or append to a file when a path is
  given.
- Emit a visible *startup* entry so users can confirm the log is active.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import Lock
from typing import Optional, Union

_LOCK = Lock()
_CONFIGURED = False

LOGGER_NAME = "luachflow"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def _has_handler_for(logger: logging.Logger, log_path: Optional[str]) -> bool:
    for h in logger.handlers:
        if log_path is None:
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler):
                return True
        elif isinstance(h, logging.FileHandler):
            if os.path.abspath(h.baseFilename) == os.path.abspath(log_path):
                return True
    return False


def configure_calendar_logger(
    level: Union[int, str] = logging.WARNING,
    log_path: Optional[Union[str, os.PathLike]] = None,
    force: bool = False,
) -> logging.Logger:
    """Configure the package logger and return it.

    Parameters
    ----------
    level:
        Level name (``"DEBUG"``, ``"info"``...) or numeric level.
    log_path:
        File to append to.  When omitted the log goes to ``stderr``.
    force:
        If True, adds a fresh handler and writes a startup line even if
        the logger seems configured already.

    Returns
    -------
    logging.Logger
        The configured logger named ``luachflow``.
    """
    global _CONFIGURED

    with _LOCK:
        logger = logging.getLogger(LOGGER_NAME)
        numeric_level = _resolve_level(level)
        logger.setLevel(numeric_level)
        logger.propagate = False

        path = str(Path(log_path)) if log_path is not None else None

        if force or not _has_handler_for(logger, path):
            if path is None:
                handler: logging.Handler = logging.StreamHandler()
            else:
                handler = logging.FileHandler(path, mode="a", encoding="utf-8")
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)

        for h in logger.handlers:
            h.setLevel(numeric_level)

        # Startup entry: once per process unless forced
        if force or not _CONFIGURED:
            logger.info("=== luachflow logging started (pid=%s) ===", os.getpid())
            for h in logger.handlers:
                h.flush()
            _CONFIGURED = True

        return logger


__all__ = ["configure_calendar_logger", "LOGGER_NAME", "LOG_FORMAT"]
