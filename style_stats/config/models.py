"""
Configuration models for style_stats.

This module defines all configuration data models with validation and defaults.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.http import FetchConfig


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.WARNING, description="Default logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    file_path: Optional[Path] = Field(default=None, description="Log file path")
    max_file_size: int = Field(
        default=10 * 1024 * 1024, description="Max log file size in bytes"
    )
    backup_count: int = Field(default=5, description="Number of backup log files")
    enable_console: bool = Field(default=True, description="Enable console logging")
    enable_file: bool = Field(default=False, description="Enable file logging")
    enable_structured: bool = Field(
        default=False, description="Enable structured JSON logging"
    )

    # Component-specific log levels
    component_levels: Dict[str, LogLevel] = Field(
        default_factory=dict, description="Per-component log levels"
    )


class StyleStatsConfig(BaseModel):
    """Global configuration container."""

    fetch: FetchConfig = Field(default_factory=FetchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(validate_assignment=True, extra="forbid")
