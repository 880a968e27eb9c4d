"""Selector matching: join document elements with the rules that style them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from zstack.document.model import DocumentElementRecord, ElementSource
from zstack.stylesheet.model import RuleRecord

__all__ = ["MatchedEntry", "derive_selector", "match_elements"]


@dataclass(frozen=True)
class MatchedEntry:
    """An element paired with its rule, or with a zero-valued stand-in."""

    element: DocumentElementRecord
    rule: RuleRecord
    matched: bool = True


def derive_selector(element: DocumentElementRecord) -> str:
    return element.matched_selector


def _first_by_selector(rules: Iterable[RuleRecord]) -> dict[str, RuleRecord]:
    index: dict[str, RuleRecord] = {}
    for rule in rules:
        index.setdefault(rule.selector, rule)
    return index


def match_elements(
    document: ElementSource, rules: Iterable[RuleRecord]
) -> list[MatchedEntry]:
    """Match every document element against *rules* by exact selector text.

    Selector matching:
        - ``#id`` when the element has an id.
        - ``.a.b`` (classes in attribute order) when it has classes.
        - the bare tag name otherwise.

    The first rule with an equal selector wins.  Elements without a rule get
    a synthesized zero-valued record, so the result always has one entry per
    element.
    """
    index = _first_by_selector(rules)
    entries: list[MatchedEntry] = []
    for element in document.iter_elements():
        selector = derive_selector(element)
        rule = index.get(selector)
        if rule is None:
            entries.append(
                MatchedEntry(element=element, rule=RuleRecord.empty(selector), matched=False)
            )
        else:
            entries.append(MatchedEntry(element=element, rule=rule))
    return entries
