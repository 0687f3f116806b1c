# gatuple: Geometric Algebra Tuple Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""gatuple logging system.

Provides structured logging under the ``gatuple`` hierarchy.
Engine diagnostics (table builds, config changes) and CLI results go
through :func:`get_logger` instead of ``print()``.

Environment variables:
    GATUPLE_LOG_LEVEL  — DEBUG / INFO (default) / WARNING / ERROR
    GATUPLE_LOG_FILE   — optional path; appends plain-text log lines
"""

import copy
import logging
import os
import sys

ROOT = "gatuple"

_CONFIGURED = False

# ANSI colour codes (used only when stderr is a TTY)
_COLORS = {
    logging.DEBUG: "\033[36m",     # cyan
    logging.INFO: "\033[32m",      # green
    logging.WARNING: "\033[33m",   # yellow
    logging.ERROR: "\033[31m",     # red
    logging.CRITICAL: "\033[35m",  # magenta
}
_RESET = "\033[0m"


class _ColorFormatter(logging.Formatter):
    """Colours level names on a TTY without touching the shared record."""

    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)
        record = copy.copy(record)
        record.levelname = f"{_COLORS.get(record.levelno, '')}{record.levelname}{_RESET}"
        return super().format(record)


def _level(name: str) -> int:
    return getattr(logging, str(name).upper(), logging.INFO)


def _configure_once() -> None:
    """One-time lazy init of the ``gatuple`` root logger."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    root = logging.getLogger(ROOT)
    root.setLevel(_level(os.environ.get("GATUPLE_LOG_LEVEL", "INFO")))
    root.propagate = False

    # Console handler on stderr
    use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_ColorFormatter("%(levelname)s %(name)s: %(message)s", use_color=use_color))
    root.addHandler(console)

    # Optional file handler
    log_file = os.environ.get("GATUPLE_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a")
        fh.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ))
        root.addHandler(fh)


def set_level(level: str) -> None:
    """Override the ``gatuple`` level, e.g. from the CLI config."""
    _configure_once()
    logging.getLogger(ROOT).setLevel(_level(level))


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``gatuple`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module.

    Returns:
        A :class:`logging.Logger` instance.
    """
    _configure_once()
    return logging.getLogger(f"{ROOT}.{name}")
