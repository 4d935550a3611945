"""
Logging setup for style_stats.

This module provides console and rotating file logging with structured or
colored output and credential masking.
"""

from .filters import SensitiveDataFilter
from .formatters import ColoredFormatter, StructuredFormatter
from .manager import LoggingManager, cleanup_logging, setup_logging

__all__ = [
    "LoggingManager",
    "setup_logging",
    "cleanup_logging",
    "StructuredFormatter",
    "ColoredFormatter",
    "SensitiveDataFilter",
]
