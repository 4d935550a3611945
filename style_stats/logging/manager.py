"""
Logging manager for style_stats.

Installs console and file handlers on the root logger from a LoggingConfig
and removes exactly those handlers again on cleanup, so repeated CLI runs in
one process do not stack output.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional

from ..config.models import LoggingConfig, LogLevel
from .filters import SensitiveDataFilter
from .formatters import ColoredFormatter, StructuredFormatter


def _level(level: LogLevel) -> int:
    return logging.getLevelName(level.value)


class LoggingManager:
    """Owns the handlers style_stats adds to the root logger."""

    def __init__(self) -> None:
        self._handlers: Dict[str, logging.Handler] = {}

    def setup_logging(self, config: LoggingConfig) -> None:
        """
        Replace any previously installed handlers with ones built from config.

        Console output goes to stderr; stdout is reserved for results.
        """
        self.cleanup()

        level = _level(config.level)
        logging.getLogger().setLevel(level)

        if config.enable_console:
            console = logging.StreamHandler(sys.stderr)
            self._install(
                "console",
                console,
                StructuredFormatter()
                if config.enable_structured
                else ColoredFormatter(config.format),
                level,
            )

        if config.enable_file and config.file_path:
            self._install("file", self._file_handler(config), self._plain(config), level)

        for component, component_level in config.component_levels.items():
            logging.getLogger(component).setLevel(_level(component_level))

        logging.getLogger(__name__).debug(
            f"Logging configured at {config.level.value} with handlers "
            f"{', '.join(self._handlers) or 'none'}"
        )

    @staticmethod
    def _plain(config: LoggingConfig) -> logging.Formatter:
        if config.enable_structured:
            return StructuredFormatter()
        return logging.Formatter(config.format)

    @staticmethod
    def _file_handler(config: LoggingConfig) -> logging.Handler:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.handlers.RotatingFileHandler(
            str(path),
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )

    def _install(
        self,
        name: str,
        handler: logging.Handler,
        formatter: logging.Formatter,
        level: int,
    ) -> None:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        # Locators and custom headers may carry credentials
        handler.addFilter(SensitiveDataFilter())
        logging.getLogger().addHandler(handler)
        self._handlers[name] = handler

    def set_level(self, level: LogLevel, component: Optional[str] = None) -> None:
        """Change the level of one component logger, or of root and our handlers."""
        if component:
            logging.getLogger(component).setLevel(_level(level))
            return

        logging.getLogger().setLevel(_level(level))
        for handler in self._handlers.values():
            handler.setLevel(_level(level))

    def cleanup(self) -> None:
        """Detach and close the handlers installed by this manager."""
        root = logging.getLogger()
        while self._handlers:
            _, handler = self._handlers.popitem()
            root.removeHandler(handler)
            handler.close()

    def is_configured(self) -> bool:
        return bool(self._handlers)


_logging_manager = LoggingManager()


def setup_logging(config: LoggingConfig) -> None:
    """Configure process-wide logging for style_stats."""
    _logging_manager.setup_logging(config)


def cleanup_logging() -> None:
    """Remove the handlers installed by setup_logging."""
    _logging_manager.cleanup()
