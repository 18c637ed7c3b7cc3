"""render command — show a saved review response without contacting the service."""

from __future__ import annotations

import json

import click
from rich.console import Console

from revsight_cli.render import render_result
from revsight_core.models import ReviewResult

console = Console()


@click.command("render")
@click.argument("response_file", type=click.File("r"))
def render_cmd(response_file):
    """Render a review response saved with `revsight review --json`.

    Pass - to read the response from standard input.
    """
    try:
        result = ReviewResult.from_dict(json.load(response_file))
    except json.JSONDecodeError as e:
        raise click.UsageError(f"{response_file.name} is not valid JSON: {e}")
    except TypeError as e:
        raise click.UsageError(f"{response_file.name} is not a review response: {e}")

    render_result(result, console)
