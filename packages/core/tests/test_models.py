"""Tests for request/response models."""

import pytest

from revsight_core.models import DEFAULT_LANGUAGE, Issue, IssueType, ReviewResult, SubmissionRequest


def _request(**overrides):
    values = {
        "owner": "octo",
        "repo": "widgets",
        "repo_id": "123",
        "pr_id": "7",
        "github_token": "gh-secret",
        "llm_api_key": "llm-secret",
    }
    values.update(overrides)
    return SubmissionRequest(**values)


class TestSubmissionRequest:
    def test_payload_has_all_seven_keys(self):
        payload = _request().to_payload()
        assert set(payload) == {"owner", "repo", "repo_id", "pr_id", "language", "github_token", "llm_api_key"}

    def test_language_defaults(self):
        assert _request().to_payload()["language"] == DEFAULT_LANGUAGE == "JavaScript"

    def test_ids_are_sent_as_strings(self):
        payload = _request(repo_id=123, pr_id=7).to_payload()
        assert payload["repo_id"] == "123"
        assert payload["pr_id"] == "7"

    def test_repr_hides_credentials(self):
        text = repr(_request())
        assert "gh-secret" not in text
        assert "llm-secret" not in text
        assert "widgets" in text


class TestIssueType:
    def test_known_values(self):
        assert IssueType.parse("security") is IssueType.SECURITY
        assert IssueType.parse("lint") is IssueType.LINT
        assert IssueType.parse("codesmell") is IssueType.CODESMELL

    def test_case_insensitive(self):
        assert IssueType.parse("Security") is IssueType.SECURITY

    def test_unknown_is_other(self):
        assert IssueType.parse("performance") is IssueType.OTHER

    def test_missing_is_other(self):
        assert IssueType.parse(None) is IssueType.OTHER


class TestIssue:
    def test_from_dict(self):
        issue = Issue.from_dict({"type": "lint", "message": "Unused import", "line": 4})
        assert issue.type is IssueType.LINT
        assert issue.message == "Unused import"
        assert issue.line == 4
        assert issue.raw_type == "lint"

    def test_line_is_optional(self):
        assert Issue.from_dict({"type": "lint", "message": "x"}).line is None

    def test_non_positive_line_dropped(self):
        assert Issue.from_dict({"type": "lint", "message": "x", "line": 0}).line is None

    def test_non_integer_line_dropped(self):
        assert Issue.from_dict({"type": "lint", "message": "x", "line": "12"}).line is None

    def test_unknown_type_keeps_raw_value(self):
        issue = Issue.from_dict({"type": "perf", "message": "slow"})
        assert issue.type is IssueType.OTHER
        assert issue.raw_type == "perf"


class TestReviewResult:
    def test_from_dict_full(self):
        result = ReviewResult.from_dict(
            {
                "file": "app.js",
                "complexity": 3,
                "issues": [{"type": "security", "message": "eval() call", "line": 10}],
                "aiSuggestions": ["## Summary", "* Remove eval"],
            }
        )
        assert result.file == "app.js"
        assert result.complexity == 3
        assert len(result.issues) == 1
        assert result.issues[0].type is IssueType.SECURITY
        assert result.ai_suggestions == ["## Summary", "* Remove eval"]

    def test_missing_keys_get_defaults(self):
        result = ReviewResult.from_dict({})
        assert result.file == ""
        assert result.complexity == 0
        assert result.issues == []
        assert result.ai_suggestions is None

    def test_non_list_issues_ignored(self):
        assert ReviewResult.from_dict({"issues": "none"}).issues == []

    def test_non_string_fragments_converted(self):
        assert ReviewResult.from_dict({"aiSuggestions": ["a", 2]}).ai_suggestions == ["a", "2"]

    def test_non_object_body_rejected(self):
        with pytest.raises(TypeError):
            ReviewResult.from_dict(["not", "an", "object"])

    def test_to_dict_uses_wire_names(self):
        data = {
            "file": "app.js",
            "complexity": 0,
            "issues": [{"type": "lint", "message": "x", "line": 2}, {"type": "perf", "message": "y"}],
            "aiSuggestions": ["text"],
        }
        assert ReviewResult.from_dict(data).to_dict() == data

    def test_to_dict_omits_absent_suggestions(self):
        assert "aiSuggestions" not in ReviewResult(file="a.js").to_dict()
