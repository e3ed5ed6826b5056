"""
Core module for cross-cutting concerns.

This module provides:
- Structured logging configuration
- String coercion utilities
"""

from core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    unbind_context,
)
from core.utils import normalize_string_set, normalize_token

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
    "unbind_context",
    "normalize_string_set",
    "normalize_token",
]
