"""Logging configuration for the storefront.

stdlib logging carries the handlers; structlog formats the records.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog

from storefront.config import LoggingSettings

_LEVEL_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_MAX_LOG_BYTES = 10 * 1024 * 1024

# Third-party loggers that are too chatty at the application level
_QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "passlib": logging.ERROR,
    "protean": logging.WARNING,
    "asyncio": logging.WARNING,
}


def get_log_level(env: str, settings: LoggingSettings | None = None) -> str:
    """An explicit ``[logging] level`` wins; otherwise the environment decides."""
    if settings is not None and settings.level:
        return settings.level.upper()
    return _LEVEL_BY_ENV.get(env, "INFO")


def _rotating_file(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(log_level: str, log_dir: str | None = None) -> None:
    """Console output always; rotating files under ``log_dir`` when one is configured."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    handlers[0].setLevel(log_level)

    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        handlers.append(_rotating_file(directory / "storefront.log", log_level))
        handlers.append(_rotating_file(directory / "storefront_error.log", logging.ERROR))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = handlers

    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def _renderers(env: str):
    if env in ("production", "staging"):
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=env == "development",
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
        )
    ]


def setup_structlog(env: str) -> None:
    """JSON lines in production and staging, rich console output elsewhere."""
    callsite = structlog.processors.CallsiteParameterAdder(
        parameters=[
            structlog.processors.CallsiteParameter.FILENAME,
            structlog.processors.CallsiteParameter.LINENO,
            structlog.processors.CallsiteParameter.FUNC_NAME,
        ]
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            callsite,
            *_renderers(env),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(env: str, settings: LoggingSettings | None = None) -> None:
    """Configure all logging for the application."""
    log_dir = settings.log_dir if settings is not None else None
    setup_stdlib_logging(get_log_level(env, settings), log_dir or None)
    setup_structlog(env)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Add context variables that will be included in all subsequent log messages."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
