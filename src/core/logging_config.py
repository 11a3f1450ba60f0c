"""Logging estructurado (structlog).

Por qué structlog:
- Eventos con clave/valor (url, status, generación) en vez de strings armados.
- El mismo pipeline sirve para consola (dev) o JSON (pipelines).

Los logs van a stderr; stdout queda para la salida de la CLI (Rich). Sin
`configure_logging`, solo se emiten eventos WARNING o superiores.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

from core.config import APP_NAME


def configure_logging(log_level: str = "WARNING", json_logs: bool = False) -> None:
    """Configura structlog + logging estándar. Idempotente."""

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )
    structlog.contextvars.bind_contextvars(app=APP_NAME)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def install_quiet_default() -> None:
    """Default para uso como librería: filtra debug/info y escribe en stderr.

    No pisa una configuración previa (de la aplicación anfitriona o de
    `configure_logging`).
    """

    if structlog.is_configured():
        return
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


install_quiet_default()
