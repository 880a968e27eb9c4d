"""Stylesheet model: SourceSpan and RuleRecord dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Properties captured from every rule body, in presentation order.
RECOGNIZED_PROPERTIES: tuple[str, ...] = (
    "z-index",
    "width",
    "height",
    "margin",
    "padding",
    "margin-top",
    "margin-bottom",
    "margin-left",
    "margin-right",
    "padding-top",
    "padding-bottom",
    "padding-left",
    "padding-right",
    "left",
    "right",
    "top",
    "bottom",
)

DEFAULT_VALUE = "0"


def default_properties() -> dict[str, str]:
    """Return a property mapping with every recognized property set to ``"0"``."""
    return {name: DEFAULT_VALUE for name in RECOGNIZED_PROPERTIES}


@dataclass(frozen=True)
class SourceSpan:
    """Location of a rule in the original style-sheet text.

    ``start`` and ``end`` are character offsets (end exclusive).  Lines and
    columns are 1-based, as reported by the parser.
    """

    start: int
    end: int
    line: int
    column: int
    end_line: int
    end_column: int

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(frozen=True)
class RuleRecord:
    """A parsed style rule: raw selector plus the recognized declarations."""

    selector: str
    properties: Mapping[str, str] = field(default_factory=default_properties)
    span: SourceSpan | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def __hash__(self) -> int:
        return hash((self.selector, tuple(self.properties.items()), self.span))

    @classmethod
    def empty(cls, selector: str) -> RuleRecord:
        """Build a zero-valued record for a selector no rule declares."""
        return cls(selector=selector)

    @property
    def z_index(self) -> str:
        return self.properties.get("z-index", DEFAULT_VALUE)

    @property
    def is_synthesized(self) -> bool:
        return self.span is None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"selector": self.selector}
        data.update(self.properties)
        if self.span is not None:
            data["span"] = {
                "start": self.span.start,
                "end": self.span.end,
                "line": self.span.line,
                "column": self.span.column,
            }
        return data
