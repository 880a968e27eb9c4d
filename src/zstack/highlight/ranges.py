"""Text ranges covering each rule's selector and z-index declaration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from zstack.stylesheet.model import RuleRecord

__all__ = ["TextRange", "highlight_ranges", "locate", "position_at"]


@dataclass(frozen=True)
class TextRange:
    """A half-open ``[start, end)`` character range in the style-sheet text."""

    start: int
    end: int

    def slice(self, text: str) -> str:
        return text[self.start : self.end]

    def positions(self, text: str) -> tuple[tuple[int, int], tuple[int, int]]:
        return position_at(text, self.start), position_at(text, self.end)


def position_at(text: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a 0-based (line, character) pair."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    character = offset - (text.rfind("\n", 0, offset) + 1)
    return line, character


def locate(rule: RuleRecord, text: str) -> tuple[int, int] | None:
    """Reveal position for a rule, or None for a synthesized record."""
    if rule.span is None:
        return None
    return position_at(text, rule.span.start)


def _declaration_pattern(rule: RuleRecord) -> re.Pattern[str]:
    # The selector must not continue an identifier, so ".a" skips "div.a".
    value = rule.z_index
    tail = r"(?![\w.])" if value[-1:].isalnum() else ""
    return re.compile(
        r"(?<![\w.#-])"
        + re.escape(rule.selector)
        + r"\s*\{[^}]*(?i:z-index):\s*"
        + re.escape(value)
        + tail
    )


def highlight_ranges(rules: Iterable[RuleRecord], text: str) -> list[TextRange]:
    """Ranges spanning ``selector { ... z-index: value`` for every rule.

    Each range runs from the selector to the end of the z-index value.  Ranges
    are reported once, in the order they are first found.
    """
    ranges: list[TextRange] = []
    seen: set[TextRange] = set()
    for rule in rules:
        for match in _declaration_pattern(rule).finditer(text):
            found = TextRange(match.start(), match.end())
            if found not in seen:
                seen.add(found)
                ranges.append(found)
    return ranges
