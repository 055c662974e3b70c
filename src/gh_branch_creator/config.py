"""Configuration loading for gh-branch-creator.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.

Required variables:
- GITHUB_TOKEN (or GH_TOKEN)
- GH_OWNER
- GH_REPO
- BASE_BRANCH
- NEW_BRANCH

Optional variables with defaults:
- GITHUB_API_URL (default: 'https://api.github.com')
- LOG_LEVEL (default: 'WARNING')
- BRANCH_STRATEGY (default: 'auto')
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_API_URL, DEFAULT_LOG_LEVEL, STRATEGY_AUTO
from .errors import ConfigurationError

# Field name -> environment variable reported when it is missing
REQUIRED_FIELDS = {
    "token": "GITHUB_TOKEN",
    "owner": "GH_OWNER",
    "repo": "GH_REPO",
    "base_branch": "BASE_BRANCH",
    "new_branch": "NEW_BRANCH",
}


def _env(name: str) -> str:
    return (os.getenv(name) or "").strip()


@dataclass(frozen=True)
class Config:
    """Configuration values for a single branch creation."""

    token: str = ""
    owner: str = ""
    repo: str = ""
    base_branch: str = ""
    new_branch: str = ""
    api_url: str = DEFAULT_API_URL
    log_level: str = DEFAULT_LOG_LEVEL
    strategy: str = STRATEGY_AUTO

    @property
    def repo_slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        A `.env` file in the working directory is loaded if present; variables
        already set in the environment take precedence over it.  Missing
        values are left empty so callers can overlay command-line flags
        before calling `validate`.
        """
        load_dotenv(find_dotenv(usecwd=True))

        # GH_TOKEN is accepted when GITHUB_TOKEN is unset
        token = _env("GITHUB_TOKEN") or _env("GH_TOKEN")

        return cls(
            token=token,
            owner=_env("GH_OWNER"),
            repo=_env("GH_REPO"),
            base_branch=_env("BASE_BRANCH"),
            new_branch=_env("NEW_BRANCH"),
            api_url=(_env("GITHUB_API_URL") or DEFAULT_API_URL).rstrip("/"),
            log_level=_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL,
            strategy=_env("BRANCH_STRATEGY") or STRATEGY_AUTO,
        )

    def with_overrides(self, **overrides: str | None) -> Config:
        """Return a copy with every non-empty override applied."""
        changes = {key: value.strip() for key, value in overrides.items() if value and value.strip()}
        if "api_url" in changes:
            changes["api_url"] = changes["api_url"].rstrip("/")
        return replace(self, **changes)

    def missing_fields(self) -> list[str]:
        """Return the environment variable names of every missing required field."""
        return [env for field, env in REQUIRED_FIELDS.items() if not getattr(self, field).strip()]

    def validate(self) -> None:
        """Raise `ConfigurationError` if any required field is empty."""
        missing = self.missing_fields()
        if missing:
            raise ConfigurationError(missing)
