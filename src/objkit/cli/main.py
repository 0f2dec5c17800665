"""objkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from objkit import __version__
from objkit.config import ObjkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """objkit - rectangles, JSON helpers and CSS selector building."""
    try:
        config = ObjkitConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    level = logging.DEBUG if verbose else config.log_level_number
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", force=True
    )
    ctx.obj = config


# Import and register subcommands
from objkit.cli.area import area  # noqa: E402
from objkit.cli.selector import selector  # noqa: E402
from objkit.cli.json_cmd import json_group  # noqa: E402

cli.add_command(area)
cli.add_command(selector)
cli.add_command(json_group)
