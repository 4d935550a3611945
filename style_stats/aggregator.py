"""
Stylesheet source aggregation.

This module provides the SourceAggregator class that collects CSS from
literal fragments, local files and remote documents, concatenates it in a
fixed order and hands the result to the rule extractor.

Collection happens in two waves of concurrent fetches. The first wave covers
the caller's locators; HTML pages among them contribute their ``<style>``
blocks and the locators of their ``<link rel="stylesheet">`` elements, which
are fetched in the second wave. Linked stylesheets are not scanned further.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .core_fetcher import ContentFetcher
from .exceptions import FilesystemError, InvalidArgumentError
from .models import AggregationResult, ContentKind, FetchConfig, SourceSet
from .parsers.css_parser import RuleExtractor
from .parsers.html_extractor import HtmlStylesheetExtractor
from .utils.content_detector import ContentClassifier

logger = logging.getLogger(__name__)


class SourceAggregator:
    """
    Collects CSS from every source of one run and produces its statistics.

    The run is all-or-nothing: the first error of any kind propagates to the
    caller of :meth:`run` and no partial result is returned.

    Usage:
        ```python
        aggregator = SourceAggregator(
            urls=["https://example.com/"],
            files=[],
            styles=[],
            config=FetchConfig(total_timeout=10.0),
        )
        result = await aggregator.run()
        print(len(result.rules), result.media_queries, result.css_size)
        ```
    """

    css_suffixes = (".css",)

    def __init__(
        self,
        urls: Sequence[str] = (),
        files: Sequence[str] = (),
        styles: Sequence[str] = (),
        config: Optional[FetchConfig] = None,
    ):
        """
        Initialize the aggregator.

        Args:
            urls: Remote locators fetched in the first wave
            files: Local paths; only files with a ``.css`` suffix are read
            styles: Literal CSS fragments, placed first in the stylesheet
            config: Transport configuration passed to the content fetcher
        """
        self.sources = SourceSet(tuple(urls), tuple(files), tuple(styles))
        self.config = config or FetchConfig()
        self.classifier = ContentClassifier()
        self.html_extractor = HtmlStylesheetExtractor()
        self.rule_extractor = RuleExtractor()

    @classmethod
    def from_sources(
        cls, sources: SourceSet, config: Optional[FetchConfig] = None
    ) -> SourceAggregator:
        return cls(sources.urls, sources.files, sources.styles, config)

    def _read_local_files(self) -> List[str]:
        contents: List[str] = []
        for path in self.sources.files:
            if Path(path).suffix.lower() not in self.css_suffixes:
                logger.debug(f"Ignoring non-CSS file {path}")
                continue
            try:
                contents.append(Path(path).read_text(encoding="utf-8-sig"))
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Cannot read {path}: {e}")
                raise FilesystemError(f"Cannot read {path}: {e}", path=path) from e
            logger.debug(f"Read local stylesheet {path}")
        return contents

    async def run(self) -> AggregationResult:
        """
        Run the whole pipeline.

        Returns:
            AggregationResult for the collected stylesheet

        Raises:
            InvalidArgumentError: If locators, files and literal fragments
                                 are all supplied
            FilesystemError: If a local stylesheet cannot be read
            TransportError: If a locator cannot be reached
            HttpStatusError: If a fetch returns a status other than 200
            UnsupportedContentTypeError: If a first-wave body is neither CSS
                                        nor HTML
            CssSyntaxError: If the collected text cannot be parsed
            EmptyStylesheetError: If the collected text holds no rules
        """
        if self.sources.has_all_classes:
            raise InvalidArgumentError(
                "Argument is invalid: urls, files and styles cannot all be given"
            )

        start_time = time.time()
        result = AggregationResult()

        # Single accumulation point; only appended to between waves
        fragments: List[str] = list(self.sources.styles)
        fragments.extend(self._read_local_files())

        if self.sources.urls:
            async with ContentFetcher(self.config) as fetcher:
                responses = await fetcher.fetch_all(self.sources.urls)

                linked: List[str] = []
                for response in responses:
                    match self.classifier.classify(response):
                        case ContentKind.CSS:
                            result.css_files += 1
                            fragments.append(response.body)
                        case ContentKind.HTML:
                            extracted = self.html_extractor.extract(
                                response.body, response.final_url
                            )
                            result.css_files += extracted.link_elements
                            result.style_elements += extracted.style_elements
                            fragments.extend(extracted.styles)
                            linked.extend(extracted.links)

                if linked:
                    logger.debug(f"Fetching {len(linked)} linked stylesheets")
                    for response in await fetcher.fetch_all(linked):
                        fragments.append(response.body)

        result.css_string = "".join(fragments)
        result.css_size = len(result.css_string.encode("utf-8"))

        stats = self.rule_extractor.extract(result.css_string)
        result.rules = stats.rules
        result.selectors = stats.selectors
        result.declarations = stats.declarations
        result.media_queries = stats.media_queries

        logger.info(
            f"Collected {result.css_size} bytes of CSS: {len(result.rules)} rules, "
            f"{len(result.selectors)} selectors, {len(result.declarations)} "
            f"declarations in {time.time() - start_time:.2f}s"
        )
        return result


async def collect_stats(
    urls: Sequence[str] = (),
    files: Sequence[str] = (),
    styles: Sequence[str] = (),
    config: Optional[FetchConfig] = None,
) -> AggregationResult:
    """
    Convenience function for one aggregation run.

    Args:
        urls: Remote locators
        files: Local file paths
        styles: Literal CSS fragments
        config: Optional transport configuration

    Returns:
        AggregationResult for the collected stylesheet
    """
    return await SourceAggregator(urls, files, styles, config).run()
