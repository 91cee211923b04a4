"""Structured logging for domain operations.

Uses structlog with JSON output for servers and a console renderer for
interactive use.  Callers may bind a region key to the context so every
entry logged while a region is being edited carries it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from region_domains.core.config import ObservabilityConfig
from region_domains.core.enums import LogFormat

_RENDERERS = {
    LogFormat.JSON: structlog.processors.JSONRenderer,
    LogFormat.CONSOLE: structlog.dev.ConsoleRenderer,
}


def bind_region(region: str) -> None:
    """Attach a region key to every subsequent log entry in this context."""
    structlog.contextvars.bind_contextvars(region=region)


def clear_region() -> None:
    structlog.contextvars.unbind_contextvars("region")


def _add_component(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: default the component to the logger name."""
    event_dict.setdefault("component", event_dict.get("logger", "region_domains"))
    return event_dict


def setup_logging(config: ObservabilityConfig | None = None) -> None:
    """Configure structlog and the stdlib root logger from *config*.

    Stdlib ``logging`` records from the domain modules share the level and
    stream; structlog loggers from ``get_logger`` get the renderer.
    """
    config = config or ObservabilityConfig()
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            _add_component,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.UnicodeDecoder(),
            _RENDERERS[LogFormat(config.log_format)](),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
