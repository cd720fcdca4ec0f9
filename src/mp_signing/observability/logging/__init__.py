"""Observability – structured logging helpers."""
from mp_signing.observability.logging.factory import JsonLoggerFactory, get_logger
from mp_signing.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
