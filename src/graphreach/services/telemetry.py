"""Telemetry primitives — Span, @traced, trace_span.

Disabled by default (one ContextVar lookup per call). When enabled via
``--verbose``, service calls build a span tree with timings and
annotations (e.g. how many vertices were materialized for a call),
which is injected into ``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

import structlog

from graphreach.config.logging import SPAN_LOGGER
from graphreach.services.result import ServiceResult

log = structlog.get_logger(SPAN_LOGGER)

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)


@dataclass
class Span:
    """A timed unit of work with child spans and free-form annotations."""

    name: str
    children: list[Span] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "duration_ms": round(self.duration_ms, 2),
        }
        if self.annotations:
            result["annotations"] = self.annotations
        if self.children:
            result["children"] = [c.to_dict() for c in self.children]
        return result


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Open a child span under the current one.

    Yields None when telemetry is disabled or no parent span is active.
    """
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name)
    parent.children.append(child)
    token = _current_span.set(child)
    try:
        yield child
    finally:
        child.end()
        _current_span.reset(token)


def traced[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Decorator: time a service method and attach its span to the result meta."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        if not _enabled.get():
            return func(*args, **kwargs)

        span = Span(name=func.__qualname__)
        token = _current_span.set(span)
        try:
            result = func(*args, **kwargs)
        except Exception:
            log.debug("span.failed", span_name=span.name)
            raise
        finally:
            span.end()
            _current_span.reset(token)

        log.debug(
            "span.complete",
            span_name=span.name,
            duration_ms=round(span.duration_ms, 2),
            children=len(span.children),
        )
        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": span.to_dict()}
            result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn span collection on (called by AppContext in verbose mode)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
