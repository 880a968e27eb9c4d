from zstack.highlight.ranges import TextRange, highlight_ranges, locate, position_at
from zstack.highlight.session import HighlightSession

__all__ = ["TextRange", "highlight_ranges", "locate", "position_at", "HighlightSession"]
