"""Shared logging configuration using structlog."""

from __future__ import annotations

import logging
import os
import sys

import structlog

from pc_common.config.env import parse_bool_env

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _resolve_level(value: str | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if not value:
        return logging.INFO
    if value.isdigit():
        return int(value)
    return logging._nameToLevel.get(value.upper(), logging.INFO)


def configure_logging(*, debug: bool = False, force: bool = False) -> None:
    """Route stdlib and structlog records through one stderr handler.

    ``PC_LOG_LEVEL`` picks the level unless ``debug`` is set, ``PC_LOG_JSON``
    switches the console renderer for JSON lines. An already configured root
    logger is left alone unless ``force`` is given.
    """
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return

    renderer: structlog.types.Processor
    if parse_bool_env(os.environ.get("PC_LOG_JSON")):
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=_SHARED_PROCESSORS)
    )

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(os.environ.get("PC_LOG_LEVEL"), debug))
