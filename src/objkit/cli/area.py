"""CLI command: objkit area -- print the area of a rectangle."""

from __future__ import annotations

import click

from objkit.model import Rectangle


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width, height)
    click.echo(_format_number(rect.get_area()))
