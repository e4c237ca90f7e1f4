"""Observability – structlog configuration and logger helper."""
from mp_filterstate.observability.logging.factory import JsonLoggerFactory
from mp_filterstate.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
