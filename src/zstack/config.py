from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ZStackConfig:
    companion_suffix: str = ".html"
    encoding: str = "utf-8"
    html_parser: str = "html.parser"  # any BeautifulSoup tree builder name
    correlate_document: bool = True
