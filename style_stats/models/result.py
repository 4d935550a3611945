"""
Input and result models for a stylesheet aggregation run.

This module contains the caller's source set, the nodes of the parsed CSS
tree and the final aggregation result.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

_URL_RE = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class SourceSet:
    """
    The three ordered input sequences of one run.

    Attributes:
        urls: Remote locators (http or https)
        files: Local file paths; only ``.css`` files are read
        styles: Literal CSS text fragments
    """

    urls: Tuple[str, ...] = ()
    files: Tuple[str, ...] = ()
    styles: Tuple[str, ...] = ()

    @classmethod
    def from_inputs(cls, inputs: Iterable[str]) -> SourceSet:
        """
        Sort loose inputs into locators, files and literal CSS.

        An input starting with ``http://`` or ``https://`` is a locator, an
        existing file is a path, an existing directory contributes the
        ``.css`` files directly inside it, anything else is CSS text.
        """
        urls: List[str] = []
        files: List[str] = []
        styles: List[str] = []

        for item in inputs:
            if _URL_RE.match(item):
                urls.append(item)
                continue

            path = Path(item)
            try:
                # Path("") is the current directory
                is_dir = bool(item.strip()) and path.is_dir()
                is_file = bool(item.strip()) and path.is_file()
            except (OSError, ValueError):
                # Long CSS text is not a usable path on every platform
                is_dir = is_file = False

            if is_dir:
                files.extend(
                    str(p)
                    for p in sorted(path.iterdir())
                    if p.is_file() and p.suffix.lower() == ".css"
                )
            elif is_file:
                files.append(item)
            else:
                styles.append(item)

        return cls(tuple(urls), tuple(files), tuple(styles))

    @property
    def has_all_classes(self) -> bool:
        """True when locators, files and literal fragments are all present."""
        return bool(self.urls and self.files and self.styles)


@dataclass
class Declaration:
    """A declaration or a comment inside a rule's block."""

    type: str
    property: Optional[str]
    value: str
    line: int = 0
    column: int = 0

    @property
    def is_declaration(self) -> bool:
        return self.type == "declaration"


@dataclass
class StyleRule:
    """Plain style rule: a selector list and its declarations."""

    selectors: List[str]
    declarations: List[Declaration] = field(default_factory=list)
    line: int = 0
    column: int = 0
    type: str = field(default="rule", init=False)


@dataclass
class MediaRule:
    """``@media`` grouping rule holding nested rules."""

    media: str
    rules: List["ParsedRule"] = field(default_factory=list)
    line: int = 0
    column: int = 0
    type: str = field(default="media", init=False)


@dataclass
class AtRule:
    """Any other at-rule; kept in the tree, never counted."""

    type: str
    name: str
    prelude: str
    content: Optional[str] = None
    line: int = 0
    column: int = 0


ParsedRule = Union[StyleRule, MediaRule, AtRule]


@dataclass
class AggregationResult:
    """
    Statistics and content produced by one aggregation run.

    Attributes:
        css_string: Every collected fragment, concatenated in aggregation order
        css_size: UTF-8 byte length of ``css_string``
        style_elements: Number of inline ``<style>`` blocks found in HTML
        media_queries: Number of top-level ``@media`` blocks
        css_files: Number of CSS resources fetched directly or linked from HTML
        rules: Flattened plain rules (top level and one level inside media)
        selectors: Selectors of ``rules`` in order
        declarations: Declarations of ``rules`` in order, comments excluded
    """

    css_string: str = ""
    css_size: int = 0
    style_elements: int = 0
    media_queries: int = 0
    css_files: int = 0
    rules: List[StyleRule] = field(default_factory=list)
    selectors: List[str] = field(default_factory=list)
    declarations: List[Declaration] = field(default_factory=list)

    def summary(self) -> Dict[str, int]:
        """Counts only, for display."""
        return {
            "cssSize": self.css_size,
            "styleElements": self.style_elements,
            "cssFiles": self.css_files,
            "mediaQueries": self.media_queries,
            "rules": len(self.rules),
            "selectors": len(self.selectors),
            "declarations": len(self.declarations),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used by the JSON output."""
        return {
            "cssString": self.css_string,
            "cssSize": self.css_size,
            "styleElements": self.style_elements,
            "mediaQueries": self.media_queries,
            "cssFiles": self.css_files,
            "rules": [asdict(rule) for rule in self.rules],
            "selectors": list(self.selectors),
            "declarations": [asdict(decl) for decl in self.declarations],
        }


__all__ = [
    "SourceSet",
    "Declaration",
    "StyleRule",
    "MediaRule",
    "AtRule",
    "ParsedRule",
    "AggregationResult",
]
