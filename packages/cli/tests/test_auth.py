"""Tests for GitHub token resolution."""

import subprocess
from unittest.mock import MagicMock

from revsight_cli.auth import resolve_github_token


def test_env_var_takes_precedence(monkeypatch, mocker):
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    mock_run = mocker.patch("revsight_cli.auth.subprocess.run")

    assert resolve_github_token() == "env-token"
    mock_run.assert_not_called()


def test_falls_back_to_gh_cli(monkeypatch, mocker):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    mocker.patch(
        "revsight_cli.auth.subprocess.run",
        return_value=MagicMock(returncode=0, stdout="gh-token\n"),
    )

    assert resolve_github_token() == "gh-token"


def test_gh_not_logged_in(monkeypatch, mocker):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    mocker.patch("revsight_cli.auth.subprocess.run", return_value=MagicMock(returncode=1, stdout=""))

    assert resolve_github_token() is None


def test_gh_not_installed(monkeypatch, mocker):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    mocker.patch("revsight_cli.auth.subprocess.run", side_effect=FileNotFoundError)

    assert resolve_github_token() is None


def test_gh_timeout(monkeypatch, mocker):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    mocker.patch(
        "revsight_cli.auth.subprocess.run",
        side_effect=subprocess.TimeoutExpired(cmd="gh", timeout=5),
    )

    assert resolve_github_token() is None
