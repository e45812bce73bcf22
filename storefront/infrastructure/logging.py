"""Structured logging setup."""

import logging
import sys

import structlog

from storefront.infrastructure.config import Settings, settings as default_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure stdlib logging and structlog for the engine.

    Args:
        settings: Settings to read level and renderer from.
    """
    settings = settings or default_settings

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(message)s",
        stream=sys.stderr,
    )
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
