"""
Tests for the content classifier.
"""

import pytest
from multidict import CIMultiDict, CIMultiDictProxy

from style_stats.exceptions import UnsupportedContentTypeError
from style_stats.models import ContentKind, FetchedResponse
from style_stats.utils.content_detector import ContentClassifier, sniff_css


def make_response(body: str, content_type: str = "") -> FetchedResponse:
    headers = CIMultiDict()
    if content_type:
        headers["content-type"] = content_type
    return FetchedResponse(
        status_code=200,
        headers=CIMultiDictProxy(headers),
        body=body,
        final_url="https://example.com/resource",
    )


class TestSniffCss:
    """Test the CSS text heuristic."""

    @pytest.mark.parametrize(
        "text",
        [
            ".a { color: red; }",
            "body{margin:0}",
            "\n\n  h1, h2 {\n  font-weight: bold;\n}",
            "@charset \"utf-8\"; .a { color: red; }",
            "@media print { .a { color: black; } }",
            "/* header */\n.a { color: red; }",
            ".empty {}",
        ],
    )
    def test_css_detected(self, text):
        assert sniff_css(text)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "<!DOCTYPE html><html><style>.a { color: red; }</style></html>",
            "<html><body>Test</body></html>",
            "<!-- build {hash: abc} -->\n<html><head><style>.x{color:red}</style></head></html>",
            "/* banner */\n<!DOCTYPE html><html></html>",
            '{"key": "value"}',
            "Plain text content",
        ],
    )
    def test_non_css_rejected(self, text):
        assert not sniff_css(text)


class TestContentClassifier:
    """Test classification of fetched responses."""

    def test_sniff_wins_over_header(self):
        """Test CSS-looking bodies are CSS whatever the header says."""
        response = make_response(".a { color: red; }", "text/plain")

        assert ContentClassifier().classify(response) == ContentKind.CSS

    def test_html_header(self):
        """Test markup with an HTML content type."""
        response = make_response("<html></html>", "text/html; charset=utf-8")

        assert ContentClassifier().classify(response) == ContentKind.HTML

    def test_page_opening_with_html_comment(self):
        """Test braces inside a leading HTML comment do not make a page CSS."""
        response = make_response(
            "<!-- build {hash: abc} -->\n<html><head></head></html>", "text/html"
        )

        assert ContentClassifier().classify(response) == ContentKind.HTML

    def test_css_header(self):
        """Test bodies that do not sniff as CSS fall back to the header."""
        response = make_response("", "text/css")

        assert ContentClassifier().classify(response) == ContentKind.CSS

    def test_header_lookup_is_case_insensitive(self):
        """Test the header is found regardless of its case."""
        headers = CIMultiDict({"Content-Type": "TEXT/HTML"})
        response = FetchedResponse(200, CIMultiDictProxy(headers), "<p>x</p>", "https://e.com/")

        assert ContentClassifier().classify(response) == ContentKind.HTML

    def test_unsupported(self):
        """Test other content raises UnsupportedContentTypeError."""
        response = make_response('{"key": "value"}', "application/json")

        with pytest.raises(UnsupportedContentTypeError) as exc_info:
            ContentClassifier().classify(response)

        assert exc_info.value.content_type == "application/json"
        assert exc_info.value.url == "https://example.com/resource"

    def test_missing_header(self):
        """Test a non-CSS body without content type is unsupported."""
        with pytest.raises(UnsupportedContentTypeError):
            ContentClassifier().classify(make_response("hello"))
