"""
HTTP-specific models and configuration classes for the style_stats library.

This module contains the transport configuration handed to the content
fetcher and the immutable response record it produces.
"""

from __future__ import annotations

from dataclasses import dataclass

from multidict import CIMultiDictProxy
from pydantic import Field

from .base import BaseConfig, RequestHeaders


class FetchConfig(BaseConfig):
    """
    Transport configuration for stylesheet and document fetches.

    FetchConfig is passed verbatim from the caller to the content fetcher. It
    controls timeouts, concurrency, compression, redirects, TLS verification
    and default headers. There is no retry setting: one failed
    fetch fails the whole run.

    Example:
        ```python
        from style_stats import FetchConfig, RequestHeaders

        config = FetchConfig(
            total_timeout=15.0,
            compress=False,
            headers=RequestHeaders(custom_headers={"Cookie": "session=abc"}),
        )
        ```
    """

    # Timeout settings
    total_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Maximum total time for one fetch including connection and "
        "reading the body.",
    )
    connect_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Maximum time to wait for connection establishment.",
    )
    read_timeout: float = Field(
        default=20.0,
        gt=0,
        description="Maximum time to wait for response data once connected.",
    )

    # Concurrency settings
    max_concurrent_requests: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum number of fetches in flight within one wave.",
    )

    # Content settings
    compress: bool = Field(
        default=True,
        description="Request gzip/deflate encoded responses and decompress them "
        "transparently.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Whether to follow HTTP redirects. The final locator of a "
        "redirected page is used to resolve its relative stylesheet links.",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify SSL/TLS certificates for HTTPS requests.",
    )

    # Headers
    headers: RequestHeaders = Field(
        default_factory=RequestHeaders,
        description="Default headers sent with every fetch.",
    )


@dataclass(frozen=True)
class FetchedResponse:
    """Result of one successful fetch. Produced once, never mutated."""

    status_code: int
    headers: CIMultiDictProxy[str]
    body: str
    final_url: str

    @property
    def content_type(self) -> str:
        """Value of the Content-Type header, or an empty string."""
        return self.headers.get("Content-Type", "")


__all__ = [
    "FetchConfig",
    "FetchedResponse",
]
