"""Document model: DocumentElementRecord and the ElementSource protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol


@dataclass(frozen=True)
class DocumentElementRecord:
    """One element encountered while walking the markup tree."""

    tag: str
    id: str | None = None
    class_list: tuple[str, ...] = ()

    @property
    def matched_selector(self) -> str:
        """Simplified selector for this element: ``#id``, ``.a.b`` or the tag.

        An id wins over classes, classes win over the tag name.
        """
        if self.id:
            return f"#{self.id}"
        if self.class_list:
            return "." + ".".join(self.class_list)
        return self.tag

    def to_dict(self) -> dict[str, object]:
        return {
            "tag": self.tag,
            "id": self.id or "",
            "classList": list(self.class_list),
        }


class ElementSource(Protocol):
    """Anything that can walk its elements in document order."""

    def iter_elements(self) -> Iterator[DocumentElementRecord]: ...
