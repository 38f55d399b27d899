from __future__ import annotations

import logging

_ROOT = "kdtreex"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger namespaced under the package logger."""

    if not name:
        return logging.getLogger(_ROOT)
    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")
