"""
Exception hierarchy for the style_stats pipeline.

This module provides the custom exceptions raised while collecting and parsing
stylesheets, plus an error handler that converts aiohttp failures and HTTP
status codes into that hierarchy.
"""

from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional

import aiohttp


class StyleStatsError(Exception):
    """
    Base exception for all style_stats operations.

    Every failure of a pipeline run surfaces to the caller as a subclass of
    this exception; there is no partial result.

    Attributes:
        message: Human-readable error message
        url: Locator that caused the error (if applicable)
        details: Additional error details as keyword arguments
    """

    def __init__(self, message: str, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.details = kwargs


class TransportError(StyleStatsError):
    """
    Raised when a locator cannot be reached.

    Covers DNS resolution failures, refused connections, TLS problems and
    broken payloads.
    """

    pass


class TimeoutError(TransportError):
    """
    Raised when a request exceeds the configured timeout.

    Attributes:
        timeout_value: The timeout value that was exceeded (in seconds)
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        timeout_value: Optional[float] = None,
    ) -> None:
        super().__init__(message, url)
        self.timeout_value = timeout_value


class ConnectionError(TransportError):
    """Raised when a connection to the server cannot be established."""

    pass


class HttpStatusError(StyleStatsError):
    """Raised when a fetch completes with a status other than 200."""

    def __init__(
        self,
        message: str,
        status_code: int,
        url: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(message, url)
        self.status_code = status_code
        self.headers = dict(headers or {})


class AuthenticationError(HttpStatusError):
    """Raised for authentication-related statuses (401, 403)."""

    pass


class NotFoundError(HttpStatusError):
    """Raised when the resource is not found (404)."""

    pass


class ServerError(HttpStatusError):
    """Raised for server errors (5xx)."""

    pass


class UnsupportedContentTypeError(StyleStatsError):
    """Raised when a fetched body is neither recognizable CSS nor HTML."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> None:
        super().__init__(message, url)
        self.content_type = content_type


class InvalidArgumentError(StyleStatsError):
    """Raised for a disallowed combination of inputs or an unusable option."""

    pass


class CssSyntaxError(StyleStatsError):
    """Raised when the aggregated text cannot be parsed as CSS."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class EmptyStylesheetError(StyleStatsError):
    """Raised when the aggregated CSS parses but holds no rules."""

    pass


class FilesystemError(StyleStatsError):
    """Raised when a local stylesheet cannot be read."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class ErrorHandler:
    """
    Utility class for converting low-level failures into StyleStatsError.

    Provides methods to map aiohttp exceptions and HTTP status codes onto the
    pipeline's exception hierarchy.
    """

    @staticmethod
    def handle_aiohttp_error(
        error: Exception, url: Optional[str] = None
    ) -> StyleStatsError:
        """
        Convert aiohttp exceptions to StyleStatsError subclasses.

        Args:
            error: The original aiohttp exception
            url: The URL that caused the error

        Returns:
            Appropriate StyleStatsError subclass
        """
        if isinstance(error, StyleStatsError):
            return error

        elif isinstance(error, asyncio.TimeoutError):
            return TimeoutError(f"Request timed out: {error}", url=url)

        elif isinstance(error, aiohttp.ClientSSLError):
            return ConnectionError(f"SSL error: {error}", url=url)

        elif isinstance(error, aiohttp.ClientConnectorError):
            return ConnectionError(f"Connector error: {error}", url=url)

        elif isinstance(error, aiohttp.ClientConnectionError):
            return ConnectionError(f"Connection error: {error}", url=url)

        elif isinstance(error, aiohttp.ClientResponseError):
            return ErrorHandler.handle_http_status_error(
                error.status, str(error), url, getattr(error, "headers", None)
            )

        else:
            return TransportError(f"Unexpected network error: {error}", url=url)

    @staticmethod
    def handle_http_status_error(
        status_code: int,
        message: str,
        url: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> HttpStatusError:
        """
        Create appropriate HttpStatusError subclass based on status code.

        Args:
            status_code: HTTP status code
            message: Error message
            url: The URL that caused the error
            headers: Response headers

        Returns:
            Appropriate HttpStatusError subclass
        """
        if status_code in (401, 403):
            return AuthenticationError(
                f"Access denied: {message}", status_code, url, headers
            )

        elif status_code == 404:
            return NotFoundError(
                f"Resource not found: {message}", status_code, url, headers
            )

        elif 500 <= status_code < 600:
            return ServerError(f"Server error: {message}", status_code, url, headers)

        else:
            return HttpStatusError(
                f"Status code is {status_code}: {message}", status_code, url, headers
            )
