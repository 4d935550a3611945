"""
Async stylesheet collection and statistics with AIOHTTP.

This package collects CSS from remote pages, local files and literal text,
merges it into one stylesheet and reports structural statistics.

Features:
- Concurrent fetching of pages and linked stylesheets with aiohttp
- HTML mining of <style> blocks and <link rel="stylesheet"> references
- CSS parsing with tinycss2, flattening one level of @media grouping
- Rule, selector, declaration, media query and byte-size statistics
- Structured data models with Pydantic
"""

from .aggregator import SourceAggregator, collect_stats
from .core_fetcher import ContentFetcher
from .exceptions import (
    AuthenticationError,
    ConnectionError,
    CssSyntaxError,
    EmptyStylesheetError,
    FilesystemError,
    HttpStatusError,
    InvalidArgumentError,
    NotFoundError,
    ServerError,
    StyleStatsError,
    TimeoutError,
    TransportError,
    UnsupportedContentTypeError,
)
from .models import (
    AggregationResult,
    AtRule,
    ContentKind,
    Declaration,
    FetchConfig,
    FetchedResponse,
    MediaRule,
    RequestHeaders,
    SourceSet,
    StyleRule,
)
from .parsers import (
    ExtractedStyles,
    HtmlStylesheetExtractor,
    RuleExtractor,
    RuleStats,
    parse_stylesheet,
)
from .utils import ContentClassifier, sniff_css

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "SourceAggregator",
    "collect_stats",
    "ContentFetcher",
    "ContentClassifier",
    "sniff_css",
    "HtmlStylesheetExtractor",
    "ExtractedStyles",
    "RuleExtractor",
    "RuleStats",
    "parse_stylesheet",
    # Models
    "AggregationResult",
    "AtRule",
    "ContentKind",
    "Declaration",
    "FetchConfig",
    "FetchedResponse",
    "MediaRule",
    "RequestHeaders",
    "SourceSet",
    "StyleRule",
    # Exceptions
    "StyleStatsError",
    "TransportError",
    "ConnectionError",
    "TimeoutError",
    "HttpStatusError",
    "AuthenticationError",
    "NotFoundError",
    "ServerError",
    "UnsupportedContentTypeError",
    "InvalidArgumentError",
    "CssSyntaxError",
    "EmptyStylesheetError",
    "FilesystemError",
]
