"""GitHub CLI backend.

Resolves and creates git references by shelling out to ``gh api``.  The
configured token is handed to ``gh`` through ``GH_TOKEN`` so both backends
authenticate as the same identity.
"""

from __future__ import annotations

import logging
import os
import re
import subprocess
from urllib.parse import quote, urlsplit

from ..config import Config
from ..constants import DEFAULT_API_URL
from ..errors import BaseBranchNotFound, CreateFailed
from ..models import CreateRefResponse
from ..policy.redaction import snippet

logger = logging.getLogger(__name__)

# gh appends "(HTTP 422)" to the error it prints on stderr
_HTTP_STATUS = re.compile(r"\(HTTP (\d{3})\)")


def parse_http_status(stderr: str) -> int | None:
    """Return the HTTP status ``gh`` reported on stderr, if any."""
    match = _HTTP_STATUS.search(stderr or "")
    return int(match.group(1)) if match else None


class GhCliRefBackend:
    """Ref backend driving the ``gh`` executable."""

    name = "gh"

    def __init__(self, config: Config, executable: str = "gh") -> None:
        self.config = config
        self.executable = executable

    @property
    def _enterprise(self) -> bool:
        return self.config.api_url.rstrip("/") != DEFAULT_API_URL

    def _repo_path(self, path: str) -> str:
        return f"repos/{quote(self.config.owner, safe='')}/{quote(self.config.repo, safe='')}/{path}"

    def _argv(self, *args: str) -> list[str]:
        argv = [self.executable, "api"]
        if self._enterprise:
            argv += ["--hostname", urlsplit(self.config.api_url).hostname or self.config.api_url]
        return argv + list(args)

    def _run(self, argv: list[str]) -> subprocess.CompletedProcess[str]:
        env = {**os.environ, "GH_TOKEN": self.config.token, "GH_PROMPT_DISABLED": "1"}
        # gh reads a separate variable for hosts other than github.com
        if self._enterprise:
            env["GH_ENTERPRISE_TOKEN"] = self.config.token
        logger.debug("Running %s", " ".join(argv[:3]))
        return subprocess.run(
            argv,
            capture_output=True,
            text=True,
            check=False,
            env=env,
        )

    def resolve_ref(self, branch: str) -> str:
        """Return the commit SHA ``refs/heads/<branch>`` points at."""
        argv = self._argv(self._repo_path(f"git/ref/heads/{quote(branch, safe='/')}"), "--jq", ".object.sha")
        try:
            proc = self._run(argv)
        except OSError as exc:
            raise BaseBranchNotFound(branch, f"could not run gh: {exc}") from exc

        if proc.returncode != 0:
            status = parse_http_status(proc.stderr)
            logger.error("gh api failed reading %s (exit %s)", branch, proc.returncode)
            raise BaseBranchNotFound(branch, f"HTTP {status}" if status else snippet(proc.stderr, [self.config.token]))

        sha = proc.stdout.strip()
        if not sha or sha == "null":
            raise BaseBranchNotFound(branch, "response had no object.sha")
        return sha

    def create_ref(self, ref: str, sha: str) -> CreateRefResponse:
        """Create ``ref`` at ``sha``; a zero exit is reported as HTTP 201."""
        argv = self._argv("-X", "POST", self._repo_path("git/refs"), "-f", f"ref={ref}", "-f", f"sha={sha}")
        try:
            proc = self._run(argv)
        except OSError as exc:
            raise CreateFailed(f"could not run gh: {exc}") from exc

        if proc.returncode == 0:
            return CreateRefResponse(status_code=201, body=proc.stdout)
        # gh prints the JSON error body on stdout and a summary on stderr
        return CreateRefResponse(
            status_code=parse_http_status(proc.stderr),
            body=f"{proc.stdout}\n{proc.stderr}".strip(),
        )
