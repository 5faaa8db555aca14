"""structlog setup for the graphreach CLI.

Everything goes to stderr; stdout carries only results. Two loggers matter:

- ``graphreach``: library modules, via ``logging.getLogger(__name__)``
- ``graphreach.telemetry``: span events from :mod:`graphreach.services.telemetry`

``--verbose`` opens both at DEBUG, otherwise only warnings pass.
``--log-json`` swaps the console renderer for one JSON object per line.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

PACKAGE_LOGGER = "graphreach"
SPAN_LOGGER = "graphreach.telemetry"


def _tag_spans(_logger: Any, _method: str, event_dict: EventDict) -> EventDict:
    """Mark span events with ``kind="span"`` so JSON consumers can filter them."""
    if event_dict.get("logger") == SPAN_LOGGER:
        event_dict.setdefault("kind", "span")
    return event_dict


def _processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _tag_spans,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Safe to call repeatedly: the root handler is replaced, not added.
    Third-party loggers (networkx, pydantic) stay at WARNING.
    """
    processors = _processors()
    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    level = logging.DEBUG if verbose else logging.WARNING
    for name in (PACKAGE_LOGGER, SPAN_LOGGER):
        logging.getLogger(name).setLevel(level)
