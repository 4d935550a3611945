"""
Async content fetcher implementation using AIOHTTP.

This module provides the ContentFetcher class that retrieves stylesheets and
HTML documents with proper session management and connection pooling.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional, Sequence

from aiohttp import ClientSession, ClientTimeout, TCPConnector

from style_stats.exceptions import ErrorHandler, StyleStatsError
from style_stats.models import FetchConfig, FetchedResponse

logger = logging.getLogger(__name__)


class ContentFetcher:
    """
    Async fetcher for stylesheet sources.

    ContentFetcher performs exactly one GET per locator. A status other than
    200 raises an HttpStatusError subclass and a network failure raises a
    TransportError subclass. There are no retries: the aggregation pipeline
    is all-or-nothing.

    Usage:
        ```python
        async with ContentFetcher(FetchConfig(total_timeout=10.0)) as fetcher:
            response = await fetcher.fetch("https://example.com/")
            print(response.final_url, response.content_type)
        ```

    Thread Safety:
        ContentFetcher instances are not thread-safe. Each instance should be
        used within a single asyncio event loop.

    Resource Management:
        Always use ContentFetcher as an async context manager so the session
        and its connections are closed when the run ends.
    """

    def __init__(self, config: Optional[FetchConfig] = None):
        """
        Initialize the fetcher.

        Args:
            config: Transport configuration. If None, uses the defaults of
                   FetchConfig (30s total timeout, compression on, redirects
                   followed, SSL verified).
        """
        self.config = config or FetchConfig()
        self._session: Optional[ClientSession] = None
        self._semaphore: Optional[asyncio.Semaphore] = None

    async def __aenter__(self) -> ContentFetcher:
        await self._create_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def _create_session(self) -> None:
        """
        Create aiohttp session with proper configuration.

        This method is idempotent: calling it multiple times has no effect.
        """
        if self._session is not None:
            return

        timeout = ClientTimeout(
            total=self.config.total_timeout,
            connect=self.config.connect_timeout,
            sock_read=self.config.read_timeout,
        )

        connector = TCPConnector(
            limit=self.config.max_concurrent_requests,
            ssl=None if self.config.verify_ssl else False,
            enable_cleanup_closed=True,
        )

        self._session = ClientSession(
            timeout=timeout,
            connector=connector,
            headers=self.config.headers.to_dict(compress=self.config.compress),
            auto_decompress=self.config.compress,
            raise_for_status=False,  # Status codes are checked in fetch()
        )

        self._semaphore = asyncio.Semaphore(self.config.max_concurrent_requests)

    async def close(self) -> None:
        """Close the session and cleanup resources."""
        if self._session:
            await self._session.close()
            self._session = None
        self._semaphore = None

    async def fetch(self, url: str) -> FetchedResponse:
        """
        Fetch a single locator.

        Args:
            url: Absolute http or https locator

        Returns:
            FetchedResponse with status, case-insensitive headers, decoded
            body and the post-redirect locator

        Raises:
            HttpStatusError: If the status code is not 200
            TransportError: If the locator cannot be reached
        """
        if self._session is None or self._semaphore is None:
            await self._create_session()

        logger.debug(f"Fetching {url}")

        try:
            async with self._semaphore:
                async with self._session.get(
                    url, allow_redirects=self.config.follow_redirects
                ) as response:
                    if response.status != 200:
                        raise ErrorHandler.handle_http_status_error(
                            response.status,
                            response.reason or "",
                            url,
                            response.headers,
                        )

                    body = await response.text(errors="replace")
                    # A byte order mark would end up mid-stylesheet
                    body = body.removeprefix("\ufeff")
                    result = FetchedResponse(
                        status_code=response.status,
                        headers=response.headers,
                        body=body,
                        final_url=str(response.url),
                    )
        except StyleStatsError as e:
            logger.error(f"Fetch failed for {url}: {e}")
            raise
        except Exception as e:
            error = ErrorHandler.handle_aiohttp_error(e, url)
            logger.error(f"Fetch failed for {url}: {error}")
            raise error from e

        logger.debug(
            f"Fetched {result.final_url} ({result.status_code}, "
            f"{result.content_type or 'no content-type'}, {len(body)} chars)"
        )
        return result

    async def fetch_all(self, urls: Sequence[str]) -> List[FetchedResponse]:
        """
        Fetch every locator concurrently and wait for all of them.

        Responses are returned in the order of ``urls``. The first failure
        propagates to the caller; remaining fetches are not awaited.
        """
        if not urls:
            return []
        return list(await asyncio.gather(*(self.fetch(url) for url in urls)))
