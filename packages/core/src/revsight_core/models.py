"""Request and response models for the remote review service.

Plain dataclasses rather than a schema library: the service's response is
passed through leniently (missing keys get empty defaults) so a partial body
still renders instead of failing the whole submission.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_LANGUAGE = "JavaScript"


@dataclass
class SubmissionRequest:
    """One review request, built fresh per submission and discarded afterwards."""

    owner: str = ""
    repo: str = ""
    repo_id: str = ""
    pr_id: str = ""
    language: str = DEFAULT_LANGUAGE
    github_token: str = field(default="", repr=False)
    llm_api_key: str = field(default="", repr=False)

    def to_payload(self) -> dict:
        """Return the JSON object sent to the service (all values are strings)."""
        return {
            "owner": self.owner,
            "repo": self.repo,
            "repo_id": str(self.repo_id),
            "pr_id": str(self.pr_id),
            "language": self.language,
            "github_token": self.github_token,
            "llm_api_key": self.llm_api_key,
        }


class IssueType(str, Enum):
    SECURITY = "security"
    LINT = "lint"
    CODESMELL = "codesmell"
    OTHER = "other"

    @classmethod
    def parse(cls, value) -> IssueType:
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.OTHER


@dataclass
class Issue:
    type: IssueType
    message: str
    line: int | None = None
    raw_type: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> Issue:
        raw_type = d.get("type") or ""
        line = d.get("line")
        # Only positive integer line numbers are meaningful to the renderer.
        if isinstance(line, bool) or not isinstance(line, int) or line <= 0:
            line = None
        return cls(
            type=IssueType.parse(raw_type),
            message=str(d.get("message", "")),
            line=line,
            raw_type=str(raw_type),
        )


@dataclass
class ReviewResult:
    """The service's findings for one reviewed file.

    Owned by the caller for as long as it is displayed and replaced wholesale
    by the next successful submission.
    """

    file: str
    complexity: int | float = 0
    issues: list[Issue] = field(default_factory=list)
    ai_suggestions: list[str] | None = None

    @classmethod
    def from_dict(cls, d: dict) -> ReviewResult:
        if not isinstance(d, dict):
            raise TypeError(f"expected a JSON object, got {type(d).__name__}")

        raw_issues = d.get("issues")
        if not isinstance(raw_issues, list):
            raw_issues = []

        suggestions = d.get("aiSuggestions")
        if isinstance(suggestions, list):
            suggestions = [s if isinstance(s, str) else str(s) for s in suggestions]
        else:
            suggestions = None

        complexity = d.get("complexity", 0)
        if isinstance(complexity, bool) or not isinstance(complexity, (int, float)):
            complexity = 0

        return cls(
            file=str(d.get("file", "")),
            complexity=complexity,
            issues=[Issue.from_dict(i) for i in raw_issues if isinstance(i, dict)],
            ai_suggestions=suggestions,
        )

    def to_dict(self) -> dict:
        """Return the result in the service's wire shape."""
        data: dict = {
            "file": self.file,
            "complexity": self.complexity,
            "issues": [],
        }
        for issue in self.issues:
            entry: dict = {"type": issue.raw_type or issue.type.value, "message": issue.message}
            if issue.line is not None:
                entry["line"] = issue.line
            data["issues"].append(entry)
        if self.ai_suggestions is not None:
            data["aiSuggestions"] = list(self.ai_suggestions)
        return data
