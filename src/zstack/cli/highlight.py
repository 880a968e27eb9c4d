"""CLI command: zstack highlight -- print z-index declaration ranges."""

from __future__ import annotations

import click

from zstack.cli.rank import load_rules
from zstack.config import ZStackConfig
from zstack.highlight import highlight_ranges
from zstack.pipeline import read_stylesheet


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
def highlight(stylesheet: str) -> None:
    """Print the text ranges a decoration layer would highlight.

    Positions are 0-based (line, character) pairs.
    """
    config = ZStackConfig()
    rules = load_rules(stylesheet, config)
    text = read_stylesheet(stylesheet, config.encoding)

    ranges = highlight_ranges(rules, text)
    for found in ranges:
        (sl, sc), (el, ec) = found.positions(text)
        snippet = " ".join(found.slice(text).split())
        click.echo(f"{sl}:{sc}-{el}:{ec}  {snippet}")
    click.echo(f"{len(ranges)} range(s)")
