"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog


class JsonLoggerFactory:
    """Configure structlog to render through the stdlib logging tree."""

    @staticmethod
    def shared_processors() -> list[Any]:
        return [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

    @staticmethod
    def configure(level: int = logging.INFO, json: bool = True) -> None:
        """Install a single root handler.

        ``json=False`` swaps the JSON renderer for structlog's console
        renderer, which is easier to read while developing.
        """
        structlog.configure(
            processors=JsonLoggerFactory.shared_processors()
            + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(level: int = logging.INFO, json: bool = True) -> None:
    """Shortcut for :meth:`JsonLoggerFactory.configure`."""
    JsonLoggerFactory.configure(level=level, json=json)


__all__ = ["JsonLoggerFactory", "configure_logging"]
