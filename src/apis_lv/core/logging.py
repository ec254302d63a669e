"""structlog setup for applications embedding the APIs.lv client.

The library only emits events (`request_start`, `request_complete`,
`request_failed`, ...) through `get_logger`. Rendering is left to the
application, which can call `setup_logging` once at startup.
"""

import logging
import sys

import structlog

from . import config


def _render_processors(json_format: bool) -> list:
    if json_format:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def setup_logging(
    level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """Route client events through stdlib logging to stderr.

    Args:
        level: Minimum level name. Falls back to LOG_LEVEL, then INFO.
        json_format: One JSON object per line instead of console output.
            Falls back to LOG_FORMAT == 'json'.
    """
    if level is None:
        level = config.LOG_LEVEL
    if json_format is None:
        json_format = config.LOG_FORMAT.lower() == "json"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_render_processors(json_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for one client component, named `apis_lv.<name>`."""
    return structlog.get_logger(f"apis_lv.{name}")
