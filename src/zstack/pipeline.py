"""One-shot extraction pipeline: style sheet (+ document) to topology model."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from zstack.config import ZStackConfig
from zstack.document import companion_path_for, parse_document, read_companion
from zstack.errors import NoCompanionDocument, ParseError
from zstack.stylesheet import RuleRecord, extract_rules
from zstack.topology import RulesOnly, RulesWithGeometry, build, match_elements

logger = logging.getLogger(__name__)


def read_stylesheet(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a style sheet, raising ParseError when it does not decode."""
    try:
        return Path(path).read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise ParseError(f"Style sheet is not valid {encoding}: {e}") from e


def correlate(
    rules: Sequence[RuleRecord], markup: str | bytes, config: ZStackConfig
) -> RulesWithGeometry:
    """Parse *markup*, match its elements against *rules* and resolve geometry."""
    document = parse_document(markup, encoding=config.encoding, parser=config.html_parser)
    return build(rules, match_elements(document, rules))  # type: ignore[return-value]


def load_companion(
    css_path: str | Path,
    config: ZStackConfig,
    html_path: str | Path | None = None,
) -> bytes | None:
    """Read the document paired with *css_path*, or None if there is none."""
    companion = (
        Path(html_path)
        if html_path
        else companion_path_for(css_path, config.companion_suffix)
    )
    try:
        return read_companion(companion)
    except NoCompanionDocument as exc:
        logger.warning("%s; showing style-sheet data only", exc)
        return None


def run(
    css_text: str,
    markup: str | bytes | None = None,
    config: ZStackConfig | None = None,
) -> RulesOnly | RulesWithGeometry:
    """Run every stage on in-memory inputs.

    Without *markup* only the style sheet is processed.  A ParseError from
    either input aborts the run; nothing partial is returned.
    """
    config = config or ZStackConfig()
    rules = extract_rules(css_text)
    if markup is None or not config.correlate_document:
        return build(rules)
    return correlate(rules, markup, config)


def run_file(
    css_path: str | Path,
    config: ZStackConfig | None = None,
    html_path: str | Path | None = None,
) -> RulesOnly | RulesWithGeometry:
    """Run the pipeline for a style-sheet file and its companion document.

    The companion defaults to the sheet's path with the configured suffix.
    A missing companion degrades to a RulesOnly model.
    """
    config = config or ZStackConfig()
    css_path = Path(css_path)
    css_text = read_stylesheet(css_path, config.encoding)

    markup = None
    if config.correlate_document:
        markup = load_companion(css_path, config, html_path)

    model = run(css_text, markup, config)
    logger.info(
        "Extracted %d rule(s) from %s (%s)",
        len(model.rules),
        css_path.name,
        type(model).__name__,
    )
    return model
