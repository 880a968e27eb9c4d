"""Presentation session holding the currently displayed highlight overlay."""

from __future__ import annotations

from typing import Callable, Sequence

from zstack.highlight.ranges import TextRange

Renderer = Callable[[Sequence[TextRange]], None]


class HighlightSession:
    """Replace-not-merge holder for one overlay.

    Applying a new set of ranges first clears the previous overlay through the
    renderer, then renders the new one.
    """

    def __init__(self, render: Renderer) -> None:
        self._render = render
        self._active: tuple[TextRange, ...] = ()

    @property
    def active(self) -> tuple[TextRange, ...]:
        return self._active

    def apply(self, ranges: Sequence[TextRange]) -> None:
        self.clear()
        self._active = tuple(ranges)
        self._render(self._active)

    def clear(self) -> None:
        if self._active:
            self._render(())
            self._active = ()
