from __future__ import annotations

import logging
import os
from typing import Any

import structlog

from personnel.core.config import Settings, settings as default_settings


def _get_log_level(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)


def _resolve_format(config: Settings) -> str:
    if config.log_format:
        return config.log_format.lower()
    if config.app_env == "dev":
        return "console"
    return "json"


def setup_logging(
    log_file: str | os.PathLike | None = None, config: Settings | None = None
) -> None:
    """Configure structlog for structured logging.

    - JSON lines with ISO/UTC timestamp, level, event, and bound fields
    - Includes contextvars so values bound per operation flow automatically
    - Formats exception info if exc_info is attached (unexpected conditions)
    - Console rendering in dev unless LOG_FORMAT is set explicitly
    """

    config = config or default_settings

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if _resolve_format(config) == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        os.makedirs(os.path.dirname(str(log_file)) or ".", exist_ok=True)
        handlers.append(logging.FileHandler(str(log_file), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(
        level=_get_log_level(config.log_level),
        handlers=handlers,
        force=True,
    )


def get_logger(*args: Any, **kwargs: Any) -> structlog.stdlib.BoundLogger:  # convenience
    return structlog.get_logger(*args, **kwargs)
