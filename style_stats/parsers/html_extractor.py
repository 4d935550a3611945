"""
Stylesheet extraction from HTML documents.

Finds ``<link rel="stylesheet">`` references, resolved against the document's
locator, and the literal text of ``<style>`` blocks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


@dataclass
class ExtractedStyles:
    """Stylesheet sources found in one HTML document."""

    links: List[str] = field(default_factory=list)
    styles: List[str] = field(default_factory=list)
    link_elements: int = 0

    @property
    def style_elements(self) -> int:
        return len(self.styles)


class HtmlStylesheetExtractor:
    """Extractor for linked and inline stylesheets."""

    def __init__(self, parser: str = "html.parser"):
        """
        Initialize extractor.

        Args:
            parser: BeautifulSoup tree builder to use
        """
        self.parser = parser

    def extract(self, html: str, base_url: str) -> ExtractedStyles:
        """
        Extract stylesheet locators and inline styles.

        Args:
            html: HTML document text
            base_url: Locator the document was fetched from, used to resolve
                     relative ``href`` values

        Returns:
            ExtractedStyles with absolute link locators and ``<style>`` texts,
            both in document order
        """
        soup = BeautifulSoup(html, self.parser)
        result = ExtractedStyles()

        # rel is a multi-valued attribute, so ~= also matches "alternate stylesheet"
        for link in soup.select('link[rel~="stylesheet" i]'):
            result.link_elements += 1
            href = link.get("href")
            if not href:
                logger.debug(f"Skipping stylesheet link without href in {base_url}")
                continue
            result.links.append(urljoin(base_url, href.strip()))

        for style in soup.select("style"):
            result.styles.append(style.get_text())

        logger.debug(
            f"Found {result.link_elements} stylesheet links and "
            f"{result.style_elements} style elements in {base_url}"
        )
        return result
