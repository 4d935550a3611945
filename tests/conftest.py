"""
Shared test fixtures and configuration for the style_stats test suite.
"""

import tempfile
from pathlib import Path
from typing import Generator

import aioresponses
import pytest

from style_stats import FetchConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_config() -> FetchConfig:
    """Default test configuration for ContentFetcher."""
    return FetchConfig(
        total_timeout=5.0,
        connect_timeout=2.0,
        read_timeout=2.0,
        max_concurrent_requests=5,
    )


@pytest.fixture
def mock_aiohttp():
    """Mock aiohttp responses for testing."""
    with aioresponses.aioresponses() as m:
        yield m


@pytest.fixture
def sample_css() -> str:
    """Stylesheet with plain rules, a media block and an at-rule."""
    return """
    @charset "utf-8";
    body { margin: 0; padding: 0; }
    h1, h2 { font-weight: bold; }
    @media screen and (max-width: 600px) {
        .nav { display: none; }
        @font-face { font-family: "Nested"; }
    }
    @font-face { font-family: "Top"; src: url(top.woff); }
    .footer { /* muted */ color: #999 !important; }
    """


@pytest.fixture
def sample_html_response() -> str:
    """HTML page with two linked stylesheets and one inline style block."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Test Page</title>
        <link rel="stylesheet" href="a.css">
        <link rel="icon" href="favicon.ico">
        <link rel="stylesheet" href="/static/b.css">
        <style>.inline { color: green; }</style>
    </head>
    <body>
        <h1>Welcome to Test Page</h1>
    </body>
    </html>
    """
