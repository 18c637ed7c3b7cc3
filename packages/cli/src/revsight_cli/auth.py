"""GitHub token resolution with gh CLI fallback.

The review service needs a GitHub token to read the pull request. Developers
who already use the GitHub CLI are authenticated without pasting a PAT.

Resolution order (stops at first success):
  1. --github-token option (handled by the caller)
  2. GITHUB_TOKEN environment variable
  3. `gh auth token` (GitHub CLI session)
"""

from __future__ import annotations

import logging
import os
import subprocess

logger = logging.getLogger(__name__)


def resolve_github_token() -> str | None:
    """Return a GitHub token or None if no source is available. Never raises."""
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        return token

    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        logger.debug("gh CLI unavailable; no token from GitHub CLI session.")
        return None

    if result.returncode == 0:
        gh_token = result.stdout.strip()
        if gh_token:
            logger.debug("Resolved GitHub token via gh CLI session.")
            return gh_token

    return None
