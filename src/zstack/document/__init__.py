from zstack.document.loader import (
    HtmlDocument,
    companion_path_for,
    parse_document,
    read_companion,
)
from zstack.document.model import DocumentElementRecord, ElementSource

__all__ = [
    "DocumentElementRecord",
    "ElementSource",
    "HtmlDocument",
    "parse_document",
    "companion_path_for",
    "read_companion",
]
