"""Logging configuration for FHIR Explorer.

Events go through structlog and are handed to the standard library
``logging`` module, so the level set in ``Settings.log_level`` applies to
both. Logs are written to stderr; stdout carries CLI output only.
"""

import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger, LoggerFactory

from fhir_explorer.config import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog and the root stdlib logger from settings."""
    settings = settings or get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level),
    )

    structlog.configure(
        processors=build_processors(settings),
        context_class=dict,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def build_processors(settings: Optional[Settings] = None) -> List[Any]:
    """Processor chain for framework events, ending in the renderer."""
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        render_processor(settings),
    ]


def render_processor(settings: Optional[Settings] = None) -> Any:
    """JSON lines for machines, colored console output otherwise."""
    settings = settings or get_settings()

    if settings.log_format == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer()


def get_logger(name: str) -> BoundLogger:
    """Get a configured logger instance."""
    bound_logger: BoundLogger = structlog.get_logger(name)
    return bound_logger
