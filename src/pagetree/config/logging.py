"""Logging configuration using structlog.

PageTree only emits debug events while trees are assembled and read
(page_object_attached, page_object_detached, path_composition_failed).
Nothing is configured on import: the host test suite decides where
events go, or calls configure_logging() to use the settings below.
"""

import logging

import structlog

from pagetree.config.settings import get_settings


def configure_logging() -> None:
    """Configure structlog from PAGETREE_LOG_LEVEL and PAGETREE_DEBUG.

    Only structlog is configured; stdlib logging and its root logger are
    left to the host application.
    """
    settings = get_settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            # Readable tree events while debugging page objects, JSON otherwise
            structlog.dev.ConsoleRenderer()
            if settings.debug
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get the structlog logger page tree modules log through."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
