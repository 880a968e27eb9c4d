"""BeautifulSoup-backed document walking and companion-document lookup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from zstack.document.model import DocumentElementRecord
from zstack.errors import NoCompanionDocument, ParseError

__all__ = ["HtmlDocument", "parse_document", "companion_path_for", "read_companion"]

logger = logging.getLogger(__name__)


def _class_tokens(tag: Tag) -> tuple[str, ...]:
    raw = tag.get("class")
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = raw.split()
    return tuple(token for token in raw if token)


def _element_record(tag: Tag) -> DocumentElementRecord:
    element_id = tag.get("id")
    if isinstance(element_id, list):
        element_id = " ".join(element_id)
    return DocumentElementRecord(
        tag=tag.name.lower(),
        id=element_id or None,
        class_list=_class_tokens(tag),
    )


class HtmlDocument:
    """A parsed HTML document exposing its elements in document order."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    def iter_elements(self) -> Iterator[DocumentElementRecord]:
        for tag in self._soup.find_all(True):
            yield _element_record(tag)

    def __len__(self) -> int:
        return len(self._soup.find_all(True))


def parse_document(
    markup: str | bytes, *, encoding: str = "utf-8", parser: str = "html.parser"
) -> HtmlDocument:
    """Parse markup text into an HtmlDocument.

    Bytes are decoded strictly with *encoding*.  Raises ParseError when the
    bytes do not decode or the tree builder rejects the markup.
    """
    if isinstance(markup, bytes):
        try:
            markup = markup.decode(encoding)
        except UnicodeDecodeError as e:
            raise ParseError(f"Document is not valid {encoding}: {e}") from e
    try:
        soup = BeautifulSoup(markup, parser)
    except ParserRejectedMarkup as e:
        raise ParseError(f"Document markup rejected: {e}") from e
    return HtmlDocument(soup)


def companion_path_for(css_path: str | Path, suffix: str = ".html") -> Path:
    """Return the document path paired with a style sheet (``a.css`` -> ``a.html``)."""
    return Path(css_path).with_suffix(suffix)


def read_companion(path: str | Path) -> bytes:
    """Read the companion document once.

    Raises NoCompanionDocument when the file is missing or unreadable.
    Decoding is left to parse_document so bad bytes surface as ParseError.
    """
    path = Path(path)
    if not path.is_file():
        raise NoCompanionDocument(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise NoCompanionDocument(path, cause=e) from e
    logger.debug("Read companion document %s (%d bytes)", path, len(data))
    return data
