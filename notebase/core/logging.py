"""
Structured Logging.

structlog renders every record, including those emitted by stdlib
loggers such as uvicorn and sqlalchemy, through one processor chain.
Settings come from config/settings/logging.yaml (LoggingSchema);
arguments to setup_logging override the level and console format.

Each record carries timestamp, level, logger, event, func_name and
lineno. Inside an HTTP request RequestContextMiddleware also binds
request_id, method and path.

Usage:
    from notebase.core.logging import get_logger, setup_logging

    setup_logging()
    logger = get_logger(__name__)
    logger.info("Label created", extra={"label_id": 3})
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.typing import Processor

from notebase.core.config import find_project_root, get_app_config
from notebase.core.config_schema import FileHandlerSchema, LoggingSchema

# Libraries that are noisy below WARNING
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")

_PRE_CHAIN: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.CallsiteParameterAdder(
        parameters=[
            structlog.processors.CallsiteParameter.FUNC_NAME,
            structlog.processors.CallsiteParameter.LINENO,
        ],
    ),
]


def _formatter(renderer: Processor) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_PRE_CHAIN,
    )


def _file_handler(config: FileHandlerSchema) -> logging.Handler:
    """Rotating JSONL file; relative paths resolve against the project root."""
    path = find_project_root() / config.path
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=config.max_bytes,
        backupCount=config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    config: LoggingSchema | None = None,
) -> None:
    """
    Configure structlog and the root logger.

    Args:
        level: Overrides the configured level (DEBUG, INFO, ...).
        format_type: Overrides the console format ('json' or 'console').
        config: Logging settings; loaded from logging.yaml when omitted.
    """
    config = config or get_app_config().logging
    level = (level or config.level).upper()
    format_type = format_type or config.format

    structlog.configure(
        processors=_PRE_CHAIN + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []
    if config.handlers.console.enabled:
        console = logging.StreamHandler(sys.stdout)
        if format_type == "console":
            console.setFormatter(_formatter(structlog.dev.ConsoleRenderer(colors=True)))
        else:
            console.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        handlers.append(console)
    if config.handlers.file.enabled:
        handlers.append(_file_handler(config.handlers.file))

    root = logging.getLogger()
    root.handlers = handlers
    root.setLevel(getattr(logging, level))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Return a structlog logger, typically for __name__."""
    return structlog.get_logger(name)
