"""Minimal structured logging helper.

Provides a lightweight wrapper around print() to emit key=value pairs with a
timestamp and level. The game screen shares the terminal with the log output,
so the default threshold is ``warn``; raise it with ``MAZE_LOG_LEVEL=debug`` or
redirect the stream with ``configure(stream=...)`` (the CLI ``--log-file`` flag).

Usage:
    from .logging_utils import get_logger
    log = get_logger("maze.generator")
    log.info(event="level_generated", level_no=1, size=10)

Non-numeric values are str()'d with spaces replaced. Reserved keys: level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import IO, Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("MAZE_LOG_LEVEL", "warn"), 30)
JSON_MODE = os.getenv("MAZE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")
_STREAM: Optional[IO[str]] = None


def configure(level: str | None = None, json_mode: bool | None = None, stream: IO[str] | None = None) -> None:
    """Override the environment-derived settings at runtime.

    ``stream`` replaces both stdout and stderr as the sink; pass ``None`` to keep
    the current sink. Unknown level names raise ``ValueError``.
    """
    global CURRENT_LEVEL, JSON_MODE, _STREAM
    if level is not None:
        if level not in LEVELS:
            raise ValueError(f"Unknown log level {level!r}; expected one of {sorted(LEVELS)}")
        CURRENT_LEVEL = LEVELS[level]
    if json_mode is not None:
        JSON_MODE = bool(json_mode)
    if stream is not None:
        _STREAM = stream


def reset_stream() -> None:
    """Drop a stream set by ``configure`` and go back to stdout/stderr."""
    global _STREAM
    _STREAM = None


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        try:
            return json.dumps(rec, separators=(",", ":"))
        except (TypeError, ValueError):
            return json.dumps({"level": level, "ts": int(time.time()), "error": "json_encode_failed"})
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "maze"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        target = _STREAM or (sys.stdout if lvl != "error" else sys.stderr)
        print(_format(lvl, **fields), file=target)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("maze")

__all__ = ["LEVELS", "configure", "get_logger", "log", "reset_stream"]
