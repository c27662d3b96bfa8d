"""Logging setup for front-ends. The library itself only creates loggers."""

from __future__ import annotations

import logging

# relativeCreated: ms since process start.
LOG_FORMAT = "%(relativeCreated)8.0fms %(levelname)-7s %(name)s: %(message)s"

CORE_LOGGERS = ("cue", "cue_tween", "cue_typewriter")


def setup_logging(level: int | str = "INFO", *, core_level: int | str | None = None) -> None:
    """Send log records to stderr for a front-end.

    ``level`` applies to the root logger; ``core_level`` (default: same as
    ``level``) applies to the presentation packages, so their per-beat debug
    output can be turned on without the rest of the process. The handler is
    only attached when the root has none.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(_level(level))
    core = _level(level if core_level is None else core_level)
    for name in CORE_LOGGERS:
        logging.getLogger(name).setLevel(core)


def _level(value: int | str) -> int:
    if isinstance(value, str):
        return getattr(logging, value.upper(), logging.INFO)
    return int(value)
