"""
End-to-end workflow tests for style_stats.

These tests run the CLI and the library entry point against mocked sites,
covering the whole path from fetch to statistics.
"""

import json
import logging

import pytest

from style_stats import collect_stats
from style_stats.cli.main import main
from style_stats.exceptions import CssSyntaxError
from style_stats.logging import cleanup_logging

SITE_HTML = """
<!DOCTYPE html>
<html>
<head>
  <link rel="stylesheet" href="/css/base.css">
  <link rel="stylesheet" href="theme.css">
  <style>
    header { height: 4rem; }
  </style>
  <style>
    @media (prefers-color-scheme: dark) { body { background: #000; } }
  </style>
</head>
<body><header>Site</header></body>
</html>
"""

BASE_CSS = """
html, body { margin: 0; padding: 0; }
@media screen and (min-width: 768px) {
  .container { max-width: 720px; }
  .row, .col { display: flex; }
}
"""

THEME_CSS = """
@font-face { font-family: "Brand"; src: url(brand.woff2); }
.btn { color: #fff; background: #06c !important; }
"""


@pytest.fixture
def site(mock_aiohttp):
    """Mock a page under /docs/ with two linked stylesheets."""
    mock_aiohttp.get(
        "https://site.example/docs/",
        status=200,
        body=SITE_HTML,
        content_type="text/html",
        repeat=True,
    )
    mock_aiohttp.get(
        "https://site.example/css/base.css",
        status=200,
        body=BASE_CSS,
        content_type="text/css",
        repeat=True,
    )
    mock_aiohttp.get(
        "https://site.example/docs/theme.css",
        status=200,
        body=THEME_CSS,
        content_type="text/css",
        repeat=True,
    )
    return mock_aiohttp


class TestLibraryWorkflow:
    """Test collect_stats over a mocked site."""

    @pytest.mark.asyncio
    async def test_site_statistics(self, site, test_config):
        result = await collect_stats(urls=["https://site.example/docs/"], config=test_config)

        assert result.style_elements == 2
        assert result.css_files == 2
        assert result.media_queries == 2
        assert result.selectors == [
            "header",
            "body",
            "html",
            "body",
            ".container",
            ".row",
            ".col",
            ".btn",
        ]
        assert len(result.declarations) == 8
        assert result.declarations[-1].value == "#06c !important"
        assert result.css_size == len(result.css_string.encode("utf-8"))

    @pytest.mark.asyncio
    async def test_page_with_literal_css(self, site, test_config):
        result = await collect_stats(
            urls=["https://site.example/docs/"],
            styles=[".first { order: 1; }"],
            config=test_config,
        )

        assert result.selectors[0] == ".first"
        assert result.css_string.startswith(".first { order: 1; }")

    @pytest.mark.asyncio
    async def test_broken_remote_stylesheet(self, mock_aiohttp, test_config):
        mock_aiohttp.get(
            "https://broken.example/style.css",
            status=200,
            body=".a { color: red; } .b",
            content_type="text/css",
        )

        with pytest.raises(CssSyntaxError):
            await collect_stats(urls=["https://broken.example/style.css"], config=test_config)


class TestCLIWorkflow:
    """Test the command line against the mocked site."""

    @pytest.fixture(autouse=True)
    def isolated(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        monkeypatch.chdir(tmp_path)
        root_level = logging.getLogger().level
        yield tmp_path
        cleanup_logging()
        logging.getLogger().setLevel(root_level)

    @pytest.mark.asyncio
    async def test_cli_json(self, site, capsys):
        exit_code = await main(["https://site.example/docs/", "-f", "json", "--timeout", "5"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["cssFiles"] == 2
        assert data["styleElements"] == 2
        assert data["rules"][0] == {
            "selectors": ["header"],
            "declarations": [
                {
                    "type": "declaration",
                    "property": "height",
                    "value": "4rem",
                    "line": 2,
                    "column": 14,
                }
            ],
            "line": 2,
            "column": 5,
            "type": "rule",
        }

    @pytest.mark.asyncio
    async def test_cli_config_file(self, site, isolated, capsys):
        (isolated / "style_stats.yaml").write_text(
            "fetch:\n  total_timeout: 5\n  headers:\n    user_agent: cli-test\n",
            encoding="utf-8",
        )

        exit_code = await main(["https://site.example/docs/", "-f", "summary"])

        assert exit_code == 0
        assert "  cssFiles: 2" in capsys.readouterr().out
