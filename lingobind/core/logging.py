"""
lingobind/core/logging.py
─────────────────────────
Structured logging for the translation engine.

Events are snake_case names with keyword context, e.g.
``logger.info("cache_entry_expired", url=url, ttl_hours=1)``.
Console output in development, JSON lines in production; under pytest the
root level is raised above CRITICAL so nothing is emitted.
"""
import inspect
import logging
import sys

import structlog
from structlog.stdlib import BoundLogger

from config.settings import settings

_SILENT = logging.CRITICAL + 1


def _log_level() -> int:
    if "pytest" in sys.modules:
        return _SILENT
    return getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)


def _processors() -> list:
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.is_production
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        renderer,
    ]


def configure_logging() -> BoundLogger:
    """Route structlog through stdlib logging at the configured level."""
    level = _log_level()
    structlog.configure(
        processors=_processors(),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger("lingobind").setLevel(level)
    return structlog.stdlib.get_logger("lingobind")


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module (``component`` = last dotted part)."""
    frame = inspect.currentframe()
    module = inspect.getmodule(frame.f_back) if frame is not None else None
    if module is None:
        return logger.bind(component="unknown")

    name = module.__name__
    return logger.bind(component=name.rsplit(".", 1)[-1], module_path=name)
