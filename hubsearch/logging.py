"""Structured logging helpers."""

from __future__ import annotations

import logging

import structlog

from hubsearch.config import HubSearchSettings, get_settings

# Chatty transport loggers kept at WARNING unless debugging.
_NOISY_LOGGERS = ("httpx", "httpcore")


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(
    level: int | str | None = None,
    *,
    settings: HubSearchSettings | None = None,
) -> None:
    """Route stdlib logging and structlog output to stdout.

    ``level`` wins over ``settings.log_level``; ``settings.json_logs`` picks
    the JSON renderer over the console one.
    """
    settings = settings or get_settings()
    resolved = _resolve_level(level if level is not None else settings.log_level)

    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


logger = structlog.get_logger("hubsearch")

__all__ = ["configure_logging", "logger"]
