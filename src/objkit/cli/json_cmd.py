"""CLI commands: objkit json -- JSON helpers built on the objkit codec."""

from __future__ import annotations

import sys
from typing import IO

import click

from objkit.codec import ParseError, parse_text, to_text
from objkit.config import ObjkitConfig


@click.group(name="json")
def json_group() -> None:
    """JSON text helpers."""


@json_group.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--indent", type=int, default=None, help="Indent nested values by N spaces")
@click.option("--sort-keys/--no-sort-keys", default=None, help="Sort object keys")
@click.pass_obj
def normalize(
    config: ObjkitConfig | None,
    source: IO[str],
    indent: int | None,
    sort_keys: bool | None,
) -> None:
    """Re-emit the JSON document in SOURCE (default: stdin) in canonical form."""
    config = config or ObjkitConfig()
    if indent is None:
        indent = config.json_indent
    if sort_keys is None:
        sort_keys = config.json_sort_keys

    try:
        value = parse_text(source.read())
        text = to_text(value, indent=indent, sort_keys=sort_keys)
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error: {exc}{location}", err=True)
        sys.exit(1)
    click.echo(text)
