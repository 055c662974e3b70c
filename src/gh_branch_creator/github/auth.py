"""Authentication helpers for GitHub API."""

from __future__ import annotations

import httpx

from .. import __version__
from ..config import Config
from ..constants import API_VERSION, HTTP_TIMEOUT_S


def get_github_client(config: Config) -> httpx.Client:
    """Return a configured GitHub httpx client with the Authorization header set."""
    return httpx.Client(
        headers={
            "Authorization": f"Bearer {config.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": f"gh-branch-creator/{__version__}",
        },
        timeout=HTTP_TIMEOUT_S,
    )
