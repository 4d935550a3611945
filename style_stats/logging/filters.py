"""
Custom logging filters for style_stats.

This module provides a filter that masks credentials before they reach a
handler.
"""

import logging
import re
from typing import List, Pattern, Tuple


class SensitiveDataFilter(logging.Filter):
    """Filter to mask sensitive data in log messages."""

    def __init__(self) -> None:
        """Initialize sensitive data filter."""
        super().__init__()

        # (pattern, replacement) pairs
        self.patterns: List[Tuple[Pattern[str], str]] = [
            # URLs with credentials
            (re.compile(r"(https?://[^:/@\s]+):([^@\s]+)@", re.IGNORECASE), r"\1:***MASKED***@"),
            # Bearer tokens
            (re.compile(r"(bearer\s+)([a-zA-Z0-9._~+/=-]{8,})", re.IGNORECASE), r"\1***MASKED***"),
            # Authorization and cookie headers
            (
                re.compile(
                    r"((?:authorization|cookie|x-api-key)[\"']?\s*[:=]\s*[\"']?)([^\s\"',}]+)",
                    re.IGNORECASE,
                ),
                r"\1***MASKED***",
            ),
            # Tokens in query strings
            (
                re.compile(r"([?&](?:token|api[_-]?key|access_token)=)([^&\s]+)", re.IGNORECASE),
                r"\1***MASKED***",
            ),
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log record to mask sensitive data."""
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Malformed format arguments are left for the handler to report
            return True

        for pattern, replacement in self.patterns:
            message = pattern.sub(replacement, message)

        record.msg = message
        record.args = ()
        return True
