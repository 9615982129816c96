"""Observability – structured logging ports and helpers."""
from mp_analytics.observability.logging.factory import JsonLoggerFactory
from mp_analytics.observability.logging.processors import get_logger
from mp_analytics.observability.logging.protocol import Logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
