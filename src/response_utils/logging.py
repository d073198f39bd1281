"""Structured logging for the exception handlers.

Importing this package configures nothing: ``get_logger`` hands out structlog
loggers that follow whatever configuration the host application set up. Hosts
without their own setup can opt in once at startup::

    from response_utils.logging import LoggingSettings, configure_logging

    configure_logging(LoggingSettings())  # LOG_LEVEL / LOG_JSON from the env
"""

import logging
import sys
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger

LOGGER_NAMESPACE = "response_utils"


class LoggingSettings(BaseSettings):
    """Logging settings from environment variables."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def configure_logging(settings: LoggingSettings) -> logging.Handler:
    """Route structlog through stdlib and attach a stdout handler to ``response_utils``.

    This replaces the process-wide structlog configuration, so call it only
    from an application entry point. Returns the installed handler.
    """
    shared: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared)
    )

    library_logger = logging.getLogger(LOGGER_NAMESPACE)
    for existing in list(library_logger.handlers):
        library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(settings.log_level)
    library_logger.propagate = False
    return handler


def get_logger(name: str) -> BoundLogger:
    """Get a structlog logger, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
