"""review command — submit a pull request to the review service."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.text import Text

from revsight_cli.render import render_result
from revsight_core.gateway import SubmissionError, submit
from revsight_core.models import SubmissionRequest
from revsight_core.validation import FORM_ERROR, validate_request

console = Console()

# (field, prompt label, hidden input)
_FORM_FIELDS = (
    ("owner", "Repository owner", False),
    ("repo", "Repository name", False),
    ("repo_id", "Repository ID", False),
    ("pr_id", "PR ID", False),
    ("github_token", "GitHub token", True),
    ("llm_api_key", "LLM API key", True),
)


def _prompt_missing(values: dict, skip: set[str]) -> None:
    for name, label, hidden in _FORM_FIELDS:
        if name in skip or values.get(name):
            continue
        values[name] = click.prompt(label, default="", show_default=False, hide_input=hidden)


@click.command("review")
@click.option("--owner", default=None, help="Repository owner (user or organisation).")
@click.option("--repo", default=None, help="Repository name.")
@click.option("--repo-id", "repo_id", default=None, help="Numeric GitHub repository ID.")
@click.option("--pr-id", "pr_id", default=None, help="Pull request number.")
@click.option("--language", default=None, help="Language label sent to the service. Overrides config file.")
@click.option("--github-token", "github_token", default=None, help="GitHub token. Defaults to GITHUB_TOKEN or gh CLI.")
@click.option(
    "--llm-api-key",
    "llm_api_key",
    default=None,
    help="API key the service uses for AI suggestions. Defaults to REVSIGHT_LLM_API_KEY.",
)
@click.option("--endpoint", default=None, help="Review service URL. Overrides config file.")
@click.option(
    "--lookup-repo-id",
    "lookup_repo_id",
    is_flag=True,
    help="Look up the repository ID on GitHub instead of asking for it.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the parsed review result as JSON.")
@click.option("--no-input", "no_input", is_flag=True, help="Never prompt for missing fields.")
@click.pass_context
def review_cmd(
    ctx,
    owner: str | None,
    repo: str | None,
    repo_id: str | None,
    pr_id: str | None,
    language: str | None,
    github_token: str | None,
    llm_api_key: str | None,
    endpoint: str | None,
    lookup_repo_id: bool,
    as_json: bool,
    no_input: bool,
):
    """Request an automated review of a pull request.

    Any required field not given as an option is prompted for. Nothing is
    sent until every required field is filled in.

    \b
    Environment variables:
      GITHUB_TOKEN           GitHub token (or use gh CLI)
      REVSIGHT_LLM_API_KEY   API key for the AI suggestions
    """
    from revsight_cli.auth import resolve_github_token
    from revsight_core.config import load_config

    config_path = ctx.obj.get("config_path", ".revsight.yml") if ctx.obj else ".revsight.yml"
    try:
        config = load_config(config_path, cli_overrides={"endpoint": endpoint, "language": language})
    except ValueError as e:
        raise click.UsageError(str(e))

    values = {
        "owner": owner or "",
        "repo": repo or "",
        "repo_id": repo_id or "",
        "pr_id": pr_id or "",
        "github_token": github_token or resolve_github_token() or "",
        "llm_api_key": llm_api_key or config.get("llm_api_key") or "",
    }

    if not no_input:
        _prompt_missing(values, skip={"repo_id"} if lookup_repo_id else set())

    if lookup_repo_id and not values["repo_id"] and values["owner"] and values["repo"] and values["github_token"]:
        from revsight_core.gh.repository import resolve_repo_id

        try:
            values["repo_id"] = resolve_repo_id(values["owner"], values["repo"], values["github_token"])
        except ValueError as e:
            raise click.UsageError(str(e))
        console.print(f"[dim]Resolved repository ID: {values['repo_id']}[/dim]")

    request = SubmissionRequest(language=config["language"], **values)

    errors = validate_request(request)
    if errors:
        for message in errors.values():
            console.print(Text(f"  {message}", style="red"))
        raise click.UsageError(FORM_ERROR)

    try:
        with console.status("Requesting review…"):
            result = submit(request, endpoint=config["endpoint"], timeout=config.get("timeout"))
    except SubmissionError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    render_result(result, console)
