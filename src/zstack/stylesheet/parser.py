"""Lark-based extractor turning CSS text into RuleRecord objects.

Syntax example:
    .modal { z-index: 1000; width: 400px; margin: 10px; }
    @media (max-width: 600px) { #menu { z-index: 5; } }
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError

from zstack.errors import ParseError
from zstack.stylesheet.model import (
    RECOGNIZED_PROPERTIES,
    RuleRecord,
    SourceSpan,
    default_properties,
)

__all__ = ["extract_rules"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Strings and unquoted url() are matched first so a "/*" inside them is kept.
_SCAN_RE = re.compile(
    r"""
    "(?:[^"\\\n]|\\.)*"            # double-quoted string
    | '(?:[^'\\\n]|\\.)*'          # single-quoted string
    | url\([^)"']*\)               # unquoted url
    | (?P<comment>/\*.*?\*/)       # comment
    | (?P<open>/\*)                # unterminated comment
    """,
    re.VERBOSE | re.DOTALL | re.IGNORECASE,
)
_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)

_RECOGNIZED = frozenset(RECOGNIZED_PROPERTIES)


def _blank(match: re.Match[str]) -> str:
    if match.group("open"):
        offset = match.start()
        text = match.string
        line = text.count("\n", 0, offset) + 1
        column = offset - (text.rfind("\n", 0, offset) + 1) + 1
        raise ParseError("Unterminated comment", line=line, column=column)
    if match.group("comment"):
        return re.sub(r"[^\n]", " ", match.group(0))
    return match.group(0)


def _strip_comments(source: str) -> str:
    """Replace comments with whitespace of the same length.

    Offsets, lines and columns of everything else stay unchanged.  Comment
    markers inside strings and ``url()`` are left alone.
    """
    return _SCAN_RE.sub(_blank, source.replace("\ufeff", " "))


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into flat lists of RuleRecords."""

    def declaration(self, items: list[Token]) -> tuple[str, str]:
        name = str(items[0]).lower()
        value = str(items[1]).strip() if len(items) > 1 else ""
        return name, _IMPORTANT_RE.sub("", value)

    @v_args(meta=True)
    def rule_set(self, meta, items: list[object]) -> list[RuleRecord]:
        selector = str(items[0]).strip()
        properties = default_properties()
        nested: list[RuleRecord] = []
        for item in items[1:]:
            if isinstance(item, list):
                nested.extend(item)
                continue
            name, value = item  # type: ignore[misc]
            # Later declarations overwrite earlier ones.
            if name in _RECOGNIZED:
                properties[name] = value
        span = SourceSpan(
            start=meta.start_pos,
            end=meta.end_pos,
            line=meta.line,
            column=meta.column,
            end_line=meta.end_line,
            end_column=meta.end_column,
        )
        return [RuleRecord(selector=selector, properties=properties, span=span), *nested]

    def at_rule(self, items: list[object]) -> list[RuleRecord]:
        rules: list[RuleRecord] = []
        for item in items:
            if isinstance(item, list):
                rules.extend(item)
        return rules

    def at_statement(self, items: list[object]) -> list[RuleRecord]:
        return []

    def start(self, items: list[list[RuleRecord]]) -> list[RuleRecord]:
        rules: list[RuleRecord] = []
        for item in items:
            rules.extend(item)
        return rules


def extract_rules(source: str) -> list[RuleRecord]:
    """Parse CSS text into RuleRecords, one per style rule, in source order.

    Rules nested in grouping at-rules such as ``@media`` are included.
    Raises ParseError when the text is not well-formed.
    """
    text = _strip_comments(source)
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )
    try:
        tree = parser.parse(text)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        if line is not None and line < 1:
            line = column = None
        raise ParseError(str(e), line=line, column=column) from e
    rules = CssTransformer().transform(tree)
    logger.debug("Extracted %d rule(s) from %d characters", len(rules), len(source))
    return rules
