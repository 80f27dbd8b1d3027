"""Observability – structured logging helpers."""
from api_feature_flags.observability.logging.factory import JsonLoggerFactory
from api_feature_flags.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
