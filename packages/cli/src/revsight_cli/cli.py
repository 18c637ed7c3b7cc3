"""CLI entry point for revsight.

Commands:
  review   — submit a pull request to the review service and show the findings
  render   — show a previously saved review response without any network call
"""

from __future__ import annotations

import importlib.metadata
import logging

import click

from revsight_cli.commands.render import render_cmd
from revsight_cli.commands.review import review_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("revsight"),
    prog_name="revsight",
)
@click.option(
    "--config",
    "config_path",
    default=".revsight.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="REVSIGHT_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Terminal client for the automated code review service."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(review_cmd)
main.add_command(render_cmd)
