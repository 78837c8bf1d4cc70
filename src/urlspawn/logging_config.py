"""Logging configuration.

Log records are structured key/value events rendered either for a terminal
or as one JSON object per line. Rendering is done by structlog's
ProcessorFormatter so records from the standard library logging module are
formatted the same way.
"""

import logging
import logging.config
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

LOG_LEVELS = ("debug", "info", "warning", "error")


def get_logging_config(*, level: str, use_json: bool) -> dict:
    """Build a logging.config dictionary and configure structlog to match.

    Args:
        level: One of LOG_LEVELS, case-insensitive
        use_json: Render records as JSON instead of console text
    """
    numeric_level = logging.getLevelName(level.upper())

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    shared_processors: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": structlog.stdlib.ProcessorFormatter,
                "foreign_pre_chain": shared_processors,
                "processors": [
                    structlog.processors.format_exc_info,
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(),
                ],
            },
            "console": {
                "()": structlog.stdlib.ProcessorFormatter,
                "foreign_pre_chain": shared_processors,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.dev.ConsoleRenderer(
                        colors=False, exception_formatter=structlog.dev.plain_traceback
                    ),
                ],
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "json" if use_json else "console",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {
                "handlers": ["default"],
                "level": numeric_level,
                "propagate": True,
            },
        },
    }


def configure_logging(*, level: str, use_json: bool) -> dict:
    """Configure structlog and the standard library logging module once per process."""
    logging_config = get_logging_config(level=level, use_json=use_json)
    logging.config.dictConfig(logging_config)
    return logging_config
