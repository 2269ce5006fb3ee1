"""Logging helpers for avro-phonetic."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_RESET = "\x1b[0m"
_LEVEL_COLORS: Mapping[int, str] = {
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[31m",
}


def _color_enabled(stream: object) -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    if str(os.environ.get("TERM", "")).strip().lower() in {"", "dumb"}:
        return False
    isatty = getattr(stream, "isatty", None)
    return callable(isatty) and bool(isatty())


class _LevelColorFormatter(logging.Formatter):
    """Wrap warning and error lines in ANSI colors."""

    def __init__(self, fmt: str, *, colors: Mapping[int, str]) -> None:
        super().__init__(fmt)
        self._colors = colors

    def format(self, record: logging.LogRecord) -> str:
        rendered = super().format(record)
        color = self._colors.get(record.levelno)
        return f"{color}{rendered}{_RESET}" if color else rendered


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, defaulting to INFO."""
    numeric_level = getattr(logging, str(level).strip().upper(), None)
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def configure_logging(level: str, *, stream: TextIO | None = None) -> logging.Handler:
    """Replace root handlers with one stream handler at level."""
    numeric_level = resolve_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric_level)
    colors = _LEVEL_COLORS if _color_enabled(handler.stream) else {}
    handler.setFormatter(_LevelColorFormatter(LOG_FORMAT, colors=colors))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(numeric_level)
    root.addHandler(handler)
    return handler
