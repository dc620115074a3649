"""Per-call timing for RuleService operations.

Telemetry is off unless ``--verbose`` turns it on. While on, every
``@traced`` call is timed, logged on ``labcheck.telemetry`` and, for
ServiceResult returns, recorded under ``meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from labcheck.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("labcheck_telemetry", default=False)

_log = structlog.get_logger("labcheck.telemetry")


@dataclass
class Span:
    """Wall-clock span of one traced call."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            data["annotations"] = dict(self.annotations)
        return data


def _record(span: Span, result: Any) -> Any:
    ok = True
    if isinstance(result, ServiceResult):
        ok = result.ok
        span.annotations["ok"] = ok
        result = result.model_copy(
            update={"meta": {**(result.meta or {}), "telemetry": span.to_dict()}}
        )
    _log.debug(
        "span.complete", span_name=span.name, duration_ms=round(span.duration_ms, 3), ok=ok
    )
    return result


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time *func* when telemetry is enabled; pass straight through otherwise."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)
        span = Span(name=func.__qualname__)
        try:
            result = func(*args, **kwargs)
        except Exception:
            span.end()
            _log.debug("span.failed", span_name=span.name, duration_ms=round(span.duration_ms, 3))
            raise
        span.end()
        return _record(span, result)

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def telemetry_enabled() -> bool:
    return _enabled.get()
