"""
Base models and common types for the style_stats library.

This module contains the content-kind enum, default request headers and the
shared pydantic configuration base.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict


class ContentKind(str, Enum):
    """
    Kind of a fetched document, as decided by the content classifier.

    A response body is either stylesheet text used as-is, or HTML markup that
    has to be mined for embedded and linked stylesheets.
    """

    CSS = "css"  # Appended to the stylesheet unchanged
    HTML = "html"  # Scanned for <style> blocks and <link rel="stylesheet">


@dataclass(frozen=True)
class RequestHeaders:
    """
    Immutable dataclass for HTTP request headers with common defaults.

    Attributes:
        user_agent: User-Agent header identifying the client
        accept: Accept header specifying acceptable content types
        accept_language: Accept-Language header for content localization
        custom_headers: Additional custom headers as key-value pairs
    """

    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    accept: str = "text/css,text/html;q=0.9,*/*;q=0.8"
    accept_language: str = "en-US,en;q=0.9"
    custom_headers: Dict[str, str] = field(default_factory=dict)

    def to_dict(self, compress: bool = True) -> Dict[str, str]:
        """Convert headers to dictionary format."""
        headers = {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
            "Accept-Encoding": "gzip, deflate" if compress else "identity",
        }
        headers.update(self.custom_headers)
        return headers


class BaseConfig(BaseModel):
    """Base configuration class with common validation settings."""

    model_config = ConfigDict(
        use_enum_values=True, validate_assignment=True, extra="forbid"
    )


__all__ = [
    "ContentKind",
    "RequestHeaders",
    "BaseConfig",
]
