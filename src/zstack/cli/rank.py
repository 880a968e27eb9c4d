"""CLI command: zstack rank -- list style rules by z-index."""

from __future__ import annotations

import json
import sys
import click

from zstack.config import ZStackConfig
from zstack.errors import ParseError
from zstack.pipeline import read_stylesheet
from zstack.stylesheet import RuleRecord, extract_rules
from zstack.topology import RankedRow, build


def load_rules(stylesheet: str, config: ZStackConfig) -> list[RuleRecord]:
    """Read and parse a style sheet, exiting with code 1 on a parse error."""
    try:
        source = read_stylesheet(stylesheet, config.encoding)
        return extract_rules(source)
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error{location}: {exc}", err=True)
        sys.exit(1)


def echo_ranked(rows: list[RankedRow]) -> None:
    if not rows:
        click.echo("No style rules found.")
        return
    width = max(len("Selector"), *(len(row.selector) for row in rows))
    click.echo(f"{'Selector':<{width}}  {'Z-Index':<8}  Line")
    for row in rows:
        line = "" if row.line is None else str(row.line)
        click.echo(f"{row.selector:<{width}}  {row.z_index:<8}  {line}")


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--sort",
    "order",
    type=click.Choice(["source", "z-index"]),
    default="source",
    show_default=True,
    help="Row order: as written, or highest z-index first.",
)
@click.option("--json", "as_json", is_flag=True, help="Print rule records as JSON.")
def rank(stylesheet: str, order: str, as_json: bool) -> None:
    """Show the z-index of every rule in STYLESHEET."""
    rules = load_rules(stylesheet, ZStackConfig())
    rows = build(rules).ranked(order)

    if as_json:
        click.echo(json.dumps([rules[row.position].to_dict() for row in rows], indent=2))
        return
    echo_ranked(rows)
