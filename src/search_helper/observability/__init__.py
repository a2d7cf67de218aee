"""Observability – logging for search_helper."""
from search_helper.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
