"""Observability – structured logging helpers."""
from search_helper.observability.logging.factory import JsonLoggerFactory, configure_logging
from search_helper.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
