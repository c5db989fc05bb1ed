"""
Logging Configuration
====================

Structured logging for the library. Modules log through ``get_logger``,
which follows whatever structlog configuration the host application has.
Importing the package configures nothing.

Applications without their own setup can call ``setup_logging()``:
production then renders JSON, other environments render console output.
"""

import logging
import logging.config
import sys
from typing import Dict, Any, List, Optional, TYPE_CHECKING
import structlog
from structlog.types import Processor

from .settings import get_settings

if TYPE_CHECKING:
    from .settings import Settings

LIBRARY_LOGGER = "pagelayout"


def _effective_level(settings: "Settings") -> str:
    return "DEBUG" if settings.debug else settings.log_level


def build_processors(settings: "Settings") -> List[Processor]:
    """
    Build the structlog processor chain for an environment.

    Context bound with ``structlog.contextvars`` by the host application
    (request ids, user ids) is merged into every event.
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.environment == "production":
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Plain text under test so captured output stays readable
        processors.append(structlog.dev.ConsoleRenderer(colors=settings.environment == "development"))
    return processors


def setup_logging(settings: Optional["Settings"] = None) -> None:
    """
    Configure structlog and the library's stdlib logger.

    Args:
        settings: Settings to configure from; the global settings by default
    """
    settings = settings or get_settings()

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.config.dictConfig(get_logging_config(settings))


def get_logging_config(settings: "Settings") -> Dict[str, Any]:
    """
    Get the stdlib logging configuration dictionary.

    Only the ``pagelayout`` logger is configured; the root logger and any
    loggers of the host application are left alone.
    """
    level = _effective_level(settings)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": {
            "pagelayout_console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "json" if settings.environment == "production" else "standard",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            LIBRARY_LOGGER: {
                "level": level,
                "handlers": ["pagelayout_console"],
                "propagate": False,
            },
        },
    }


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)

