"""Topology model: the immutable result of one extraction pass.

Two shapes exist and consumers must handle both:

    RulesOnly          -- style-sheet data alone (no companion document)
    RulesWithGeometry  -- rules plus one resolved entry per document element
"""

from __future__ import annotations

from dataclasses import dataclass

from zstack.stylesheet.model import RuleRecord
from zstack.topology.geometry import GeometryRecord, parse_z_index
from zstack.topology.matcher import MatchedEntry

RANK_ORDERS = ("source", "z-index")


@dataclass(frozen=True)
class RankedRow:
    """One row of the ranked table/chart view."""

    position: int  # index in source order
    selector: str
    z_index: str
    z_value: int
    line: int | None = None


@dataclass(frozen=True)
class ResolvedEntry:
    """A matched element together with its resolved geometry."""

    entry: MatchedEntry
    geometry: GeometryRecord

    @property
    def selector(self) -> str:
        return self.entry.rule.selector

    def to_dict(self) -> dict[str, object]:
        data = self.entry.element.to_dict()
        data["selector"] = self.selector
        data["matched"] = self.entry.matched
        data.update(self.geometry.to_dict())
        return data


@dataclass(frozen=True)
class TopologyModel:
    """Rules in parse order plus the ranked view built from them."""

    rules: tuple[RuleRecord, ...]

    def ranked(self, order: str = "source") -> list[RankedRow]:
        """Rows for the ranked view.

        ``"source"`` keeps parse order; ``"z-index"`` sorts by numeric z-index,
        highest first, keeping parse order among equal values.
        """
        if order not in RANK_ORDERS:
            raise ValueError(f"Unknown rank order: {order!r}")
        rows = [
            RankedRow(
                position=i,
                selector=rule.selector,
                z_index=rule.z_index,
                z_value=parse_z_index(rule.z_index),
                line=rule.span.line if rule.span else None,
            )
            for i, rule in enumerate(self.rules)
        ]
        if order == "z-index":
            rows.sort(key=lambda row: -row.z_value)
        return rows

    def to_dict(self) -> dict[str, object]:
        return {"rules": [rule.to_dict() for rule in self.rules]}


@dataclass(frozen=True)
class RulesOnly(TopologyModel):
    """Topology without document correlation."""


@dataclass(frozen=True)
class RulesWithGeometry(TopologyModel):
    """Topology with one resolved entry per document element, in document order."""

    entries: tuple[ResolvedEntry, ...] = ()

    def by_rule(self) -> list[tuple[RuleRecord, list[ResolvedEntry]]]:
        """Each rule paired with the entries it styles, in rule order.

        Entries for unmatched elements belong to no rule and are left out.
        """
        groups: list[tuple[RuleRecord, list[ResolvedEntry]]] = [
            (rule, []) for rule in self.rules
        ]
        slots = {id(rule): members for rule, members in groups}
        for resolved in self.entries:
            members = slots.get(id(resolved.entry.rule))
            if members is not None:
                members.append(resolved)
        return groups

    def to_dict(self) -> dict[str, object]:
        data = super().to_dict()
        data["elements"] = [resolved.to_dict() for resolved in self.entries]
        return data
