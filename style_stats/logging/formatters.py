"""
Log formatters for style_stats: JSON lines and colored console output.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else was passed through `extra`
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Renders each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


class ColoredFormatter(logging.Formatter):
    """Console formatter that highlights the level name with ANSI colors."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        use_colors: Optional[bool] = None,
    ):
        """
        Args:
            fmt: Log format string
            datefmt: Date format string
            use_colors: Force colors on or off; by default they are used when
                       stderr is a terminal
        """
        super().__init__(fmt, datefmt)
        if use_colors is None:
            use_colors = sys.stderr.isatty() and sys.platform != "win32"
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self.COLORS.get(record.levelname)
        if not (self.use_colors and color):
            return text
        return text.replace(
            record.levelname, f"{color}{self.BOLD}{record.levelname}{self.RESET}", 1
        )
