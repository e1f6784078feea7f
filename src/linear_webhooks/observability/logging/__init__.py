"""Observability – structured logging ports and helpers."""
from linear_webhooks.observability.logging.protocol import Logger
from linear_webhooks.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from linear_webhooks.observability.logging.factory import JsonLoggerFactory
from linear_webhooks.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "Logger",
    "SensitiveFieldsFilter",
    "get_logger",
]
