"""Per-operation resource logging."""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

try:  # pragma: no cover - platform specific fallback
    import resource
except ImportError:  # pragma: no cover - Windows fallback
    resource = None  # type: ignore

from kdtreex import config as cx_config


@dataclass(frozen=True)
class _ResourceSnapshot:
    cpu_user: float
    max_rss_bytes: int


def _resource_snapshot() -> _ResourceSnapshot | None:
    if resource is None:  # pragma: no cover - Windows fallback
        return None
    usage = resource.getrusage(resource.RUSAGE_SELF)
    # ru_maxrss is reported in bytes on macOS and kilobytes elsewhere.
    scale = 1 if sys.platform == "darwin" else 1024
    return _ResourceSnapshot(
        cpu_user=float(usage.ru_utime),
        max_rss_bytes=int(usage.ru_maxrss) * scale,
    )


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)


@dataclass
class OperationLog:
    """Mutable record collected while an operation runs."""

    operation: str
    collect_resources: bool
    metadata: Dict[str, Any] = field(default_factory=dict)
    _wall_start: float = field(default_factory=time.perf_counter, repr=False)
    _resources_start: _ResourceSnapshot | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.collect_resources:
            self._resources_start = _resource_snapshot()

    def add_metadata(self, **values: Any) -> None:
        self.metadata.update(values)

    def render(self) -> str:
        wall_ms = (time.perf_counter() - self._wall_start) * 1e3
        parts = [f"op={self.operation}", f"wall_ms={wall_ms:.3f}"]
        end = _resource_snapshot() if self._resources_start is not None else None
        if self._resources_start is not None and end is not None:
            cpu_ms = (end.cpu_user - self._resources_start.cpu_user) * 1e3
            rss_delta = end.max_rss_bytes - self._resources_start.max_rss_bytes
            parts.append(f"cpu_user_ms={cpu_ms:.3f}")
            parts.append(f"rss_delta={rss_delta}")
        else:
            parts.append("cpu_user_ms=NA")
            parts.append("rss_delta=NA")
        parts.extend(f"{key}={_format_value(value)}" for key, value in self.metadata.items())
        return " ".join(parts)


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation: str,
    *,
    level: int = logging.INFO,
) -> Iterator[OperationLog | None]:
    """Time the wrapped block and emit a single ``op=...`` record on exit.

    Yields ``None`` when ``logger`` would drop the record anyway, so callers
    guard their ``add_metadata`` calls with ``if op_log is not None``.
    """

    config = cx_config.runtime_config()
    if not logger.isEnabledFor(level):
        yield None
        return

    op_log = OperationLog(operation, collect_resources=config.enable_diagnostics)
    try:
        yield op_log
    except Exception:
        op_log.add_metadata(status="error")
        logger.log(level, op_log.render())
        raise
    logger.log(level, op_log.render())
