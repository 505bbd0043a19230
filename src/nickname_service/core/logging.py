"""Structured logging configuration.

Until ``setup_logging`` runs (the scripts call it at start-up), loggers use a
lightweight structlog pipeline that writes to stderr and drops events below
``Settings.log_level``. Library code therefore never prints debug events such
as ``profanity_detected`` unless asked to.
"""

import logging
import sys

import structlog

from nickname_service.core.config import Settings, get_settings

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _level_number(level_name: str) -> int:
    level = getattr(logging, level_name.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _renderer(settings: Settings, colors: bool = True):
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=colors)


def configure_default_logging(settings: Settings | None = None) -> None:
    """Configure the level-filtered pipeline used before ``setup_logging``."""
    settings = settings or get_settings()

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, _renderer(settings, colors=False)],
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(settings.log_level)),
        cache_logger_on_first_use=False,
    )


def setup_logging(settings: Settings | None = None) -> None:
    """Route structlog through stdlib logging with a stdout handler.

    Args:
        settings: Settings to use instead of the cached ``get_settings()``.
    """
    settings = settings or get_settings()

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(_level_number(settings.log_level))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    if not structlog.is_configured():
        configure_default_logging()
    return structlog.get_logger(name)
