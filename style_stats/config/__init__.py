"""
Configuration management for style_stats.

This module provides configuration loading from files and environment
variables.
"""

from .loader import ConfigLoader
from .models import LoggingConfig, LogLevel, StyleStatsConfig

__all__ = [
    "ConfigLoader",
    "StyleStatsConfig",
    "LoggingConfig",
    "LogLevel",
]
