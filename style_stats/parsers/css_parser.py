"""
CSS parsing and rule statistics.

This module turns aggregated stylesheet text into a tree of rule nodes using
tinycss2, flattens one level of ``@media`` grouping and tallies selectors and
declarations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import tinycss2
from tinycss2 import ast

from ..exceptions import CssSyntaxError, EmptyStylesheetError
from ..models.result import (
    AtRule,
    Declaration,
    MediaRule,
    ParsedRule,
    StyleRule,
)

logger = logging.getLogger(__name__)


def _raise_parse_error(node: ast.ParseError) -> None:
    raise CssSyntaxError(
        f"Invalid CSS: {node.message}", line=node.source_line, column=node.source_column
    )


def _serialize(tokens: Iterable[ast.Node]) -> str:
    """Serialize component values without comments."""
    return tinycss2.serialize(
        token for token in tokens if not isinstance(token, ast.Comment)
    ).strip()


def split_selectors(prelude: List[ast.Node]) -> List[str]:
    """
    Split a qualified rule prelude into selectors.

    Only top-level commas separate selectors; commas inside functional
    pseudo-classes and attribute brackets belong to the selector.

    Raises:
        CssSyntaxError: If the prelude holds a stray ``}`` or ``;``, or a
                        selector between commas is empty
    """
    selectors: List[str] = []
    current: List[ast.Node] = []
    separator = None
    for token in prelude:
        if isinstance(token, ast.LiteralToken) and token.value in ("}", ";"):
            raise CssSyntaxError(
                f"Invalid CSS: unexpected {token.value!r} in selector",
                line=token.source_line,
                column=token.source_column,
            )
        if isinstance(token, ast.LiteralToken) and token.value == ",":
            selectors.append(_checked_selector(current, token))
            current = []
            separator = token
        else:
            current.append(token)
    selectors.append(_checked_selector(current, separator or _first(prelude)))
    return selectors


def _first(prelude: List[ast.Node]) -> Optional[ast.Node]:
    return prelude[0] if prelude else None


def _checked_selector(tokens: List[ast.Node], anchor: Optional[ast.Node]) -> str:
    selector = _serialize(tokens)
    if not selector:
        raise CssSyntaxError(
            "Invalid CSS: empty selector",
            line=getattr(anchor, "source_line", None),
            column=getattr(anchor, "source_column", None),
        )
    return selector


def _convert_declarations(content: List[ast.Node]) -> List[Declaration]:
    declarations: List[Declaration] = []
    nodes = tinycss2.parse_blocks_contents(
        content, skip_comments=False, skip_whitespace=True
    )
    for node in nodes:
        if isinstance(node, ast.ParseError):
            _raise_parse_error(node)
        elif isinstance(node, ast.Declaration):
            value = _serialize(node.value)
            if node.important:
                value = f"{value} !important"
            declarations.append(
                Declaration(
                    "declaration",
                    node.name,
                    value,
                    node.source_line,
                    node.source_column,
                )
            )
        elif isinstance(node, ast.Comment):
            declarations.append(
                Declaration(
                    "comment", None, node.value, node.source_line, node.source_column
                )
            )
        # Nested rules inside a style rule are not part of the tree
    return declarations


def _convert_rules(nodes: Iterable[ast.Node]) -> List[ParsedRule]:
    rules: List[ParsedRule] = []
    for node in nodes:
        if isinstance(node, ast.ParseError):
            _raise_parse_error(node)

        elif isinstance(node, ast.QualifiedRule):
            rules.append(
                StyleRule(
                    selectors=split_selectors(node.prelude),
                    declarations=_convert_declarations(node.content),
                    line=node.source_line,
                    column=node.source_column,
                )
            )

        elif isinstance(node, ast.AtRule):
            if node.lower_at_keyword == "media" and node.content is not None:
                children = tinycss2.parse_rule_list(
                    node.content, skip_comments=True, skip_whitespace=True
                )
                rules.append(
                    MediaRule(
                        media=_serialize(node.prelude),
                        rules=_convert_rules(children),
                        line=node.source_line,
                        column=node.source_column,
                    )
                )
            else:
                rules.append(
                    AtRule(
                        type=node.lower_at_keyword,
                        name=node.at_keyword,
                        prelude=_serialize(node.prelude),
                        content=(
                            tinycss2.serialize(node.content).strip()
                            if node.content is not None
                            else None
                        ),
                        line=node.source_line,
                        column=node.source_column,
                    )
                )
    return rules


def parse_stylesheet(css: str) -> List[ParsedRule]:
    """
    Parse stylesheet text into a rule tree.

    Comments between rules are dropped; comments inside declaration blocks
    are kept as ``comment`` declarations.

    Args:
        css: Stylesheet text

    Returns:
        Top-level rule nodes in source order

    Raises:
        CssSyntaxError: If tinycss2 reports a parse error anywhere in the tree
    """
    nodes = tinycss2.parse_stylesheet(css, skip_comments=False, skip_whitespace=True)
    return _convert_rules(node for node in nodes if not isinstance(node, ast.Comment))


@dataclass
class RuleStats:
    """Flattened rules and their tallies."""

    rules: List[StyleRule] = field(default_factory=list)
    selectors: List[str] = field(default_factory=list)
    declarations: List[Declaration] = field(default_factory=list)
    media_queries: int = 0


class RuleExtractor:
    """Extracts flattened rule statistics from aggregated CSS."""

    def extract(self, css: str) -> RuleStats:
        """
        Parse CSS and tally its rules.

        Plain rules come from the top level or from directly inside an
        ``@media`` block. Anything nested deeper, and every other at-rule,
        is left out.

        Args:
            css: Aggregated stylesheet text

        Returns:
            RuleStats for the stylesheet

        Raises:
            CssSyntaxError: If the text cannot be parsed
            EmptyStylesheetError: If parsing yields no top-level rules
        """
        tree = parse_stylesheet(css)
        if not tree:
            raise EmptyStylesheetError("Rule is not found.")

        stats = RuleStats()
        for node in tree:
            if isinstance(node, StyleRule):
                stats.rules.append(node)
            elif isinstance(node, MediaRule):
                stats.media_queries += 1
                stats.rules.extend(
                    child for child in node.rules if isinstance(child, StyleRule)
                )

        for rule in stats.rules:
            stats.selectors.extend(rule.selectors)
            stats.declarations.extend(
                decl for decl in rule.declarations if decl.is_declaration
            )

        logger.debug(
            f"Parsed {len(tree)} top-level nodes into {len(stats.rules)} rules, "
            f"{stats.media_queries} media queries"
        )
        return stats
