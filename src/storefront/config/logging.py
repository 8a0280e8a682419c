"""structlog setup shared by the CLI and the HTTP server.

Everything, including uvicorn's and SQLAlchemy's stdlib loggers, goes
through one stderr handler whose formatter is a structlog
``ProcessorFormatter``, so a ``storefront serve`` run can be read as a
single stream: console lines for people, JSON lines with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# Third-party loggers and the level they run at when not verbose.
_QUIET_LOGGERS: dict[str, int] = {
    "alembic": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "uvicorn.error": logging.INFO,
}


def _drop_color_message(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """uvicorn duplicates every message as an ANSI ``color_message`` extra."""
    event_dict.pop("color_message", None)
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        _drop_color_message,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and set logger levels.

    Args:
        verbose: ``storefront.*`` at DEBUG and the uvicorn access log on.
            Otherwise ``storefront.*`` only reports WARNING and above.
        log_json: Render JSON lines instead of console output.

    Safe to call repeatedly; each call replaces the previous handler.
    """
    shared = _shared_processors()
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("storefront").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name, level in _QUIET_LOGGERS.items():
        logger = logging.getLogger(name)
        # uvicorn installs its own handlers unless log_config=None; route them here.
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(level)
    if verbose:
        logging.getLogger("uvicorn.access").setLevel(logging.INFO)
