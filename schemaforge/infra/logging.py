"""
Logging configuration for schemaforge.

Structured logging through structlog, rendered by stdlib logging handlers.

Engine context keys:
- schemaforge.schema.id: identifier of the schema being validated
- schemaforge.instance.path: JSON pointer of the instance node
- schemaforge.schema.path: JSON pointer of the schema in use
- schemaforge.keyword: keyword being compiled or checked
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar

import structlog
from structlog.typing import EventDict, WrappedLogger

from .config import Settings, get_settings

_schema_id: ContextVar[str | None] = ContextVar("schemaforge.schema.id", default=None)

_RENAMED_KEYS = {
    "instance_path": "schemaforge.instance.path",
    "schema_path": "schemaforge.schema.path",
    "keyword": "schemaforge.keyword",
}


def add_engine_context(
    _logger: WrappedLogger,
    _method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """
    Structlog processor moving engine keys under the schemaforge.* namespace.

    Also adds schemaforge.schema.id when one is set in the current context.
    """
    for key, renamed in _RENAMED_KEYS.items():
        if key in event_dict:
            event_dict[renamed] = event_dict.pop(key)

    schema_id = _schema_id.get()
    if schema_id is not None:
        event_dict.setdefault("schemaforge.schema.id", schema_id)

    return event_dict


def set_schema_id(schema_id: str | None) -> None:
    """Set the identifier of the schema being validated."""
    _schema_id.set(schema_id)


def get_schema_id() -> str | None:
    """Get the identifier of the schema being validated."""
    return _schema_id.get()


def clear_context() -> None:
    """Clear all engine context values."""
    _schema_id.set(None)


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structured logging for applications embedding the engine."""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_engine_context,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
