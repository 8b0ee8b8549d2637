"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging.config
from typing import Optional

import structlog

_CONFIGURED = False


def get_interaction_id() -> Optional[str]:
    """Get the current interaction_id from contextvars."""
    try:
        ctx = structlog.contextvars.get_contextvars()
        return ctx.get("interaction_id")
    except (TypeError, AttributeError):
        return None


def set_interaction_id(interaction_id: Optional[str]) -> None:
    """Bind interaction_id to every entry logged from the current context."""
    structlog.contextvars.bind_contextvars(interaction_id=interaction_id)


def clear_interaction_id() -> None:
    """Clear interaction_id from context."""
    structlog.contextvars.unbind_contextvars("interaction_id")


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure structlog with JSON output. Idempotent - safe to call multiple times.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    global _CONFIGURED

    if _CONFIGURED:
        return

    level_num = getattr(logging, log_level.upper())

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processor": structlog.processors.JSONRenderer(),
                "foreign_pre_chain": [
                    structlog.stdlib.add_log_level,
                    structlog.stdlib.add_logger_name,
                    structlog.processors.TimeStamper(fmt="iso"),
                    structlog.processors.dict_tracebacks,
                ],
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": log_level.upper(),
            "handlers": ["console"],
        },
        "loggers": {
            "message_emit": {
                "level": log_level.upper(),
                "propagate": False,
                "handlers": ["console"],
            },
        },
    }
    logging.config.dictConfig(logging_config)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.dict_tracebacks,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    _CONFIGURED = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
