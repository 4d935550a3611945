"""
Content kind detection for fetched documents.

This module decides whether a fetched body is a stylesheet or an HTML
document, sniffing the text first and falling back to the Content-Type header.
"""

from __future__ import annotations

import logging
import re

from ..exceptions import UnsupportedContentTypeError
from ..models.base import ContentKind
from ..models.http import FetchedResponse

logger = logging.getLogger(__name__)

# Leading whitespace and CSS comments
_COMMENTS_RE = re.compile(r"^(?:\s+|/\*.*?\*/)*", re.DOTALL)

# Leading CSS comments and CDC tokens, once markup has been ruled out
_PREAMBLE_RE = re.compile(r"^(?:\s+|/\*.*?\*/|-->)*", re.DOTALL)

# Content patterns for text analysis
_CSS_PATTERNS = [
    # At-rules that only appear in stylesheets
    re.compile(
        r"@(?:charset|import|namespace|media|font-face|keyframes|"
        r"-[a-z]+-keyframes|supports|page|layer|container|property)\b",
        re.IGNORECASE,
    ),
    # selector { property: value
    re.compile(r"[^{}<>;@]+\{\s*(?:/\*.*?\*/\s*)*[-\w]+\s*:", re.DOTALL),
    # selector { }
    re.compile(r"[^{}<>;@]+\{\s*\}"),
]


def sniff_css(text: str) -> bool:
    """
    Check whether text starts like a stylesheet.

    Markup is never CSS: once whitespace and ``/* */`` comments are skipped,
    a leading ``<`` (including an HTML comment) rules the text out.

    Args:
        text: Decoded body

    Returns:
        True if the text opens with an at-rule or a rule block
    """
    if text[_COMMENTS_RE.match(text).end():].startswith("<"):
        return False
    stripped = text[_PREAMBLE_RE.match(text).end():]
    if not stripped:
        return False
    return any(pattern.match(stripped) for pattern in _CSS_PATTERNS)


class ContentClassifier:
    """Classifier for fetched responses."""

    def classify(self, response: FetchedResponse) -> ContentKind:
        """
        Decide how a fetched response is processed.

        Args:
            response: Fetched response

        Returns:
            ContentKind.CSS or ContentKind.HTML

        Raises:
            UnsupportedContentTypeError: If the body is neither
        """
        if sniff_css(response.body):
            logger.debug(f"{response.final_url} sniffed as CSS")
            return ContentKind.CSS

        content_type = response.content_type.lower()
        if "html" in content_type:
            kind = ContentKind.HTML
        elif "css" in content_type:
            kind = ContentKind.CSS
        else:
            logger.error(
                f"Unsupported content type {content_type!r} for {response.final_url}"
            )
            raise UnsupportedContentTypeError(
                "Content type is not HTML or CSS!",
                url=response.final_url,
                content_type=content_type,
            )

        logger.debug(f"{response.final_url} classified as {kind.value} by header")
        return kind
