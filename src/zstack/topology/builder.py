"""Assemble a TopologyModel from extracted rules and optional matches."""

from __future__ import annotations

import logging
from typing import Sequence

from zstack.stylesheet.model import RuleRecord
from zstack.topology.geometry import resolve
from zstack.topology.matcher import MatchedEntry
from zstack.topology.model import ResolvedEntry, RulesOnly, RulesWithGeometry

logger = logging.getLogger(__name__)


def build(
    rules: Sequence[RuleRecord], matched: Sequence[MatchedEntry] | None = None
) -> RulesOnly | RulesWithGeometry:
    """Build a fresh model; without *matched* the result is RulesOnly."""
    if matched is None:
        return RulesOnly(rules=tuple(rules))
    entries = tuple(ResolvedEntry(entry=m, geometry=resolve(m)) for m in matched)
    logger.debug(
        "Resolved %d element(s), %d matched a rule",
        len(entries),
        sum(1 for e in entries if e.entry.matched),
    )
    return RulesWithGeometry(rules=tuple(rules), entries=entries)
