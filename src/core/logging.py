"""Configuración de logging estructurado (structlog).

Por qué structlog:
- Eventos con contexto (`operation`, `ticket`) en vez de mensajes libres.
- Mismo pipeline para salida legible en consola o JSON.

Uso:
    from core.logging import configure_logging, get_logger

    configure_logging(level="INFO")
    log = get_logger(__name__)
    log.info("operation_started", operation="dog")
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

__all__ = ["configure_logging", "get_logger"]


def _level_from_name(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    if not level:
        return logging.WARNING
    return getattr(logging, level.upper(), logging.WARNING)


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging(*, level: str | int | None = None, json: bool = False) -> None:
    """Configure structlog on top of stdlib logging.

    Logs go to stderr so they never mix with rendered output on stdout.
    Calling it again reconfigures.
    """

    log_level = _level_from_name(level)

    renderer: Processor
    if json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    # httpx registra cada request en INFO; lo bajamos salvo en DEBUG.
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger."""

    log = structlog.get_logger(name)
    if initial_context:
        log = log.bind(**initial_context)
    return log
