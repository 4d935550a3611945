"""
Tests for the CLI main module.
"""

import json
import logging

import pytest

from style_stats.cli.main import main
from style_stats.cli.parsers import create_parser
from style_stats.cli.utils import apply_overrides, classify_inputs, parse_headers
from style_stats.config import StyleStatsConfig
from style_stats.exceptions import InvalidArgumentError
from style_stats.logging import cleanup_logging

CSS = "@media print { .p { color: black; } } .a { color: red; margin: 0; }"


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path, monkeypatch):
    """Run the CLI away from real config files and restore logging afterwards."""
    for name in ("STYLE_STATS_LOG_LEVEL", "STYLE_STATS_TIMEOUT", "STYLE_STATS_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    root_level = logging.getLogger().level
    yield tmp_path
    cleanup_logging()
    logging.getLogger().setLevel(root_level)


class TestCLIParser:
    """Test CLI argument parser."""

    def test_create_parser(self):
        parser = create_parser()
        assert parser.prog == "style-stats"

    def test_parse_options(self):
        args = create_parser().parse_args(
            [
                "https://example.com/",
                "-s",
                ".a {}",
                "-s",
                ".b {}",
                "-H",
                "Cookie: x=1",
                "--timeout",
                "5",
                "--no-compress",
                "-f",
                "json",
            ]
        )

        assert args.inputs == ["https://example.com/"]
        assert args.style == [".a {}", ".b {}"]
        assert args.headers == ["Cookie: x=1"]
        assert args.timeout == 5.0
        assert args.no_compress is True
        assert args.format == "json"


class TestCLIUtils:
    """Test argument conversion helpers."""

    def test_parse_headers(self, capsys):
        headers = parse_headers(["Cookie:session=abc", "Referer: https://e.com/", "broken"])

        assert headers == {"Cookie": "session=abc", "Referer": "https://e.com/"}
        assert "Invalid header format: broken" in capsys.readouterr().err

    def test_classify_inputs(self):
        sources = classify_inputs(["https://example.com/", ".x {}"], [".y {}"])

        assert sources.urls == ("https://example.com/",)
        assert sources.styles == (".x {}", ".y {}")

    def test_apply_overrides(self):
        args = create_parser().parse_args(
            ["--timeout", "7", "--no-verify-ssl", "--user-agent", "ua/1", "-H", "X-A: 1"]
        )

        config = apply_overrides(StyleStatsConfig(), args)

        assert config.fetch.total_timeout == 7.0
        assert config.fetch.verify_ssl is False
        assert config.fetch.compress is True
        assert config.fetch.headers.user_agent == "ua/1"
        assert config.fetch.headers.custom_headers == {"X-A": "1"}

    def test_apply_no_overrides(self):
        config = StyleStatsConfig()

        assert apply_overrides(config, create_parser().parse_args([])) is config

    def test_apply_invalid_override(self):
        args = create_parser().parse_args(["--timeout", "-5"])

        with pytest.raises(InvalidArgumentError) as exc_info:
            apply_overrides(StyleStatsConfig(), args)

        assert "total_timeout" in str(exc_info.value)


class TestMain:
    """Test complete CLI runs over literal CSS and files."""

    @pytest.mark.asyncio
    async def test_json_output(self, capsys):
        exit_code = await main([CSS, "-f", "json"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["selectors"] == [".p", ".a"]
        assert data["mediaQueries"] == 1
        assert len(data["declarations"]) == 3
        assert "cssString" not in data

    @pytest.mark.asyncio
    async def test_summary_output(self, capsys):
        exit_code = await main(["-s", CSS, "-f", "summary"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert out.startswith("Style Stats Summary:")
        assert "  rules: 2" in out
        assert "  selectors: 2" in out

    @pytest.mark.asyncio
    async def test_table_output(self, capsys):
        exit_code = await main([CSS])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Style Stats" in out
        assert "mediaQueries" in out

    @pytest.mark.asyncio
    async def test_css_file_input(self, isolated_cli, capsys):
        css_file = isolated_cli / "site.css"
        css_file.write_text(".site { color: blue; }", encoding="utf-8")

        exit_code = await main([str(css_file), "-f", "json"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["selectors"] == [".site"]

    @pytest.mark.asyncio
    async def test_output_file(self, isolated_cli):
        output = isolated_cli / "stats.txt"

        exit_code = await main([CSS, "-o", str(output)])

        assert exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("Style Stats Summary:")

    @pytest.mark.asyncio
    async def test_empty_stylesheet_fails(self, capsys):
        exit_code = await main(["/* nothing */", "-f", "json"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Rule is not found." in captured.err

    @pytest.mark.asyncio
    async def test_all_input_kinds_rejected(self, isolated_cli, capsys):
        css_file = isolated_cli / "a.css"
        css_file.write_text(".a {}", encoding="utf-8")

        exit_code = await main(["https://example.com/", str(css_file), ".b {}"])

        assert exit_code == 1
        assert "Argument is invalid" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_missing_config_file(self, capsys):
        exit_code = await main([CSS, "-c", "missing.yaml"])

        assert exit_code == 1
        assert "Config file not found" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_invalid_timeout_fails(self, capsys):
        exit_code = await main([CSS, "--timeout", "-5"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Invalid option" in captured.err

    @pytest.mark.asyncio
    async def test_unwritable_output_fails(self, isolated_cli, capsys):
        exit_code = await main([CSS, "-o", str(isolated_cli)])

        assert exit_code == 1
        assert "Cannot write" in capsys.readouterr().err
