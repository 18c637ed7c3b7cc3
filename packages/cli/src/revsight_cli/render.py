"""Rich rendering of a ReviewResult.

All service-supplied text goes through rich.text.Text, never through console
markup, so a suggestion containing "[red]" prints literally.
"""

from __future__ import annotations

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from revsight_core.models import Issue, IssueType, ReviewResult
from revsight_core.suggestions import BulletItem, CodeBlock, ContentBlock, Heading, parse_suggestions

_ISSUE_STYLE = {
    IssueType.SECURITY: "bold white on red",
    IssueType.LINT: "bold black on yellow",
    IssueType.CODESMELL: "bold white on magenta",
}
_DEFAULT_ISSUE_STYLE = "bold black on white"


def issue_style(issue_type: IssueType) -> str:
    return _ISSUE_STYLE.get(issue_type, _DEFAULT_ISSUE_STYLE)


def complexity_style(score) -> str:
    """Green for an optimal score of 0, yellow below 5, red otherwise."""
    if score == 0:
        return "green"
    if score < 5:
        return "yellow"
    return "red"


def complexity_badge(score) -> Panel:
    style = complexity_style(score)
    value = "Optimal" if score == 0 else str(score)
    body = Text.assemble(("Complexity Score\n", "dim"), (value, f"bold {style}"))
    return Panel(body, border_style=style, expand=False)


def issue_line(issue: Issue) -> Text:
    label = (issue.raw_type or issue.type.value).upper()
    line = Text.assemble((f" {label} ", issue_style(issue.type)), "  ", issue.message)
    if issue.line is not None:
        line.append(f"  Line {issue.line}", style="dim")
    return line


def _paragraph(text: str) -> Text:
    # The service marks emphasised lines by wrapping them in "**".
    if text.startswith("**"):
        return Text(text.replace("**", ""), style="bold")
    return Text(text)


def block_renderable(block: ContentBlock) -> RenderableType:
    if isinstance(block, Heading):
        style = "bold underline" if block.level == 2 else "bold"
        return Text(block.text, style=style)
    if isinstance(block, BulletItem):
        return Text.assemble("  • ", block.text)
    if isinstance(block, CodeBlock):
        return Panel(Text(block.text), style="white on grey15", border_style="grey35")
    return _paragraph(block.text)


def suggestions_panel(fragments: list[str]) -> Panel:
    blocks = parse_suggestions(fragments)
    return Panel(
        Group(*(block_renderable(b) for b in blocks)),
        title="AI Analysis & Suggestions",
        title_align="left",
        border_style="blue",
    )


def render_result(result: ReviewResult, console: Console) -> None:
    """Print the full review: file header, complexity, issues and suggestions."""
    console.print(Text.assemble(("Reviewed file: ", "bold"), (result.file or "(unknown)", "cyan")))
    console.print(complexity_badge(result.complexity))

    if result.issues:
        console.print(Text(f"Issues ({len(result.issues)})", style="bold"))
        for issue in result.issues:
            console.print(issue_line(issue))
    else:
        console.print(Text("No issues found.", style="green"))

    if result.ai_suggestions:
        console.print()
        console.print(suggestions_panel(result.ai_suggestions))
