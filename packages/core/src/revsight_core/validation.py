from __future__ import annotations

from dataclasses import fields

from revsight_core.models import SubmissionRequest

REQUIRED_FIELDS = ("owner", "repo", "repo_id", "pr_id", "github_token", "llm_api_key")

FORM_ERROR = "Please fill in all required fields correctly."


def field_error(name: str, value) -> str:
    """Return the error message for one field, or "" when it is acceptable."""
    if name in REQUIRED_FIELDS and not str(value or "").strip():
        return f"{name.replace('_', ' ').upper()} is required"
    return ""


def validate_request(request: SubmissionRequest) -> dict[str, str]:
    """Return a mapping of offending field name to message, in field order.

    An empty mapping means the request may be submitted.
    """
    errors: dict[str, str] = {}
    for f in fields(request):
        message = field_error(f.name, getattr(request, f.name))
        if message:
            errors[f.name] = message
    return errors
