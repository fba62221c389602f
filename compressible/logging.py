"""Structured logging configuration for compressible."""

import logging
import sys
import warnings
from collections.abc import Mapping, MutableMapping
from functools import lru_cache
from typing import Any

import structlog
from pydantic import ValidationError
from structlog.types import Processor


def _is_development() -> bool:
    """Check if running in development mode."""
    from .config import get_settings

    return get_settings().is_development


def _add_app_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> Mapping[str, Any] | str | bytes | bytearray | tuple[Any, ...]:
    """Add application context to log entries."""
    event_dict["app"] = "compressible"
    return event_dict


def _logging_options(level: str | None) -> tuple[str, bool]:
    """
    Resolve (level, development) for configure_logging.

    Invalid settings fall back to INFO and JSON output with a warning, so that
    logging from classification code never raises. The settings error still
    surfaces wherever settings are used directly.
    """
    from .config import get_settings

    try:
        settings = get_settings()
    except ValidationError as e:
        warnings.warn(
            f"Invalid compressible settings, logging with defaults: {e}",
            UserWarning,
            stacklevel=3,
        )
        return level or "INFO", False
    return level or settings.log_level, settings.is_development


def get_processors(development: bool | None = None) -> list[Processor]:
    """Get structlog processors based on environment."""
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_app_context,
    ]

    if development is None:
        development = _is_development()

    if development:
        return shared_processors + [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        ]
    return shared_processors + [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


@lru_cache(maxsize=1)
def configure_logging(level: str | None = None) -> None:
    """Configure structured logging. Safe to call more than once."""
    level, development = _logging_options(level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=get_processors(development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)  # type: ignore[no-any-return]


# =============================================================================
# Lazy-loaded Module Loggers
# =============================================================================


class _LazyLogger:
    """Lazy logger that defers initialization until first use."""

    def __init__(self, name: str):
        self._name = name
        self._logger: structlog.stdlib.BoundLogger | None = None

    def _get_logger(self) -> structlog.stdlib.BoundLogger:
        if self._logger is None:
            self._logger = get_logger(self._name)
        return self._logger

    def __getattr__(self, name: str):
        return getattr(self._get_logger(), name)


table_logger = _LazyLogger("compressible.table")
classifier_logger = _LazyLogger("compressible.classifier")
middleware_logger = _LazyLogger("compressible.middleware")
cli_logger = _LazyLogger("compressible.cli")


__all__ = [
    "configure_logging",
    "get_logger",
    "get_processors",
    "table_logger",
    "classifier_logger",
    "middleware_logger",
    "cli_logger",
]
