"""Observability – structured logging helpers."""
from vidi_frontend.observability.logging.factory import JsonLoggerFactory, configure_logging
from vidi_frontend.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
