import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import structlog

from oopatterns.config.schemas import LoggingConfig

# Processors shared by structlog loggers and plain stdlib records
_SHARED_PROCESSORS = [
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]

# Marks handlers installed by setup_logging so they can be replaced later
_HANDLER_MARKER = "_oopatterns_handler"


class DetailedFormatter(structlog.stdlib.ProcessorFormatter):
    """Render structlog events, then add caller information to the record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _configure_structlog() -> None:
    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + _SHARED_PROCESSORS
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. Defaults are used when None.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    formatter = DetailedFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False, pad_event=0),
        ],
        foreign_pre_chain=_SHARED_PROCESSORS,
        fmt=config.format,
    )

    handlers = []

    if config.writes_to_file():
        log_dir = os.path.dirname(config.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count
        )
        handlers.append(file_handler)

    if config.writes_to_stdout():
        # stderr keeps command output on stdout machine-readable
        handlers.append(logging.StreamHandler())

    # Replace handlers from a previous call, leave foreign ones alone
    for handler in root_logger.handlers[:]:
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    for handler in handlers:
        setattr(handler, _HANDLER_MARKER, True)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger("oopatterns")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
        log_file=config.file_path
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the stdlib logger of the same name."""
    return structlog.get_logger(name)


_configure_structlog()
