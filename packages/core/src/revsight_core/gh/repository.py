from __future__ import annotations

from github import Github, GithubException


def get_repo(repo_name: str, token: str):
    return Github(token).get_repo(repo_name)


def resolve_repo_id(owner: str, repo: str, token: str) -> str:
    """Return the numeric GitHub id of owner/repo as a string."""
    full_name = f"{owner}/{repo}"
    try:
        return str(get_repo(full_name, token=token).id)
    except GithubException as e:
        raise ValueError(f"Could not look up repository {full_name}: {e}") from e
