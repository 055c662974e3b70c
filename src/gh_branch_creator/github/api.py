"""GitHub REST API backend.

Resolves and creates git references with ``httpx``.  All requests go to
the configured API root only (``https://api.github.com`` by default).
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from ..config import Config
from ..errors import BaseBranchNotFound, CreateFailed
from ..models import CreateRefResponse
from ..policy.redaction import snippet
from .auth import get_github_client

logger = logging.getLogger(__name__)


class HttpRefBackend:
    """Ref backend talking to the REST API directly."""

    name = "http"

    def __init__(self, config: Config) -> None:
        self.config = config

    def _url(self, path: str) -> str:
        return f"{self.config.api_url}/repos/{quote(self.config.owner, safe='')}/{quote(self.config.repo, safe='')}/{path}"

    def _request(self, method: str, url: str, *, json: dict[str, object] | None = None) -> httpx.Response:
        with get_github_client(self.config) as client:
            return client.request(method, url, json=json)

    def resolve_ref(self, branch: str) -> str:
        """Return the commit SHA ``refs/heads/<branch>`` points at.

        Raises `BaseBranchNotFound` on transport errors, non-2xx responses
        and bodies without ``object.sha``.
        """
        url = self._url(f"git/ref/heads/{quote(branch, safe='/')}")
        try:
            resp = self._request("GET", url)
        except httpx.HTTPError as exc:
            logger.error("GitHub API request failed: %s", exc)
            raise BaseBranchNotFound(branch, str(exc)) from exc

        if not 200 <= resp.status_code < 300:
            logger.error("GitHub API error %s reading %s", resp.status_code, branch)
            raise BaseBranchNotFound(branch, f"HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise BaseBranchNotFound(branch, "response was not JSON") from exc

        obj = data.get("object") if isinstance(data, dict) else None
        sha = obj.get("sha") if isinstance(obj, dict) else None
        if not isinstance(sha, str) or not sha:
            raise BaseBranchNotFound(branch, "response had no object.sha")
        logger.debug("Resolved %s to %s", branch, sha)
        return sha

    def create_ref(self, ref: str, sha: str) -> CreateRefResponse:
        """POST a new ref; non-2xx responses are returned, not raised."""
        url = self._url("git/refs")
        try:
            resp = self._request("POST", url, json={"ref": ref, "sha": sha})
        except httpx.HTTPError as exc:
            logger.error("GitHub API request failed: %s", exc)
            raise CreateFailed(f"GitHub API request failed: {snippet(str(exc), [self.config.token])}") from exc

        if not 200 <= resp.status_code < 300:
            logger.info("GitHub API returned %s creating %s", resp.status_code, ref)
        return CreateRefResponse(status_code=resp.status_code, body=resp.text)
