"""Pytest configuration and fixtures for gh-branch-creator tests.

This module provides a FakeRefBackend that stands in for GitHub without
any network access, and clears the settings environment so a developer's
own token or `.env` file never leaks into a test.
"""

from __future__ import annotations

import os

import pytest

from gh_branch_creator.config import Config
from gh_branch_creator.models import CreateRefResponse

SETTINGS_VARS = (
    "GITHUB_TOKEN",
    "GH_TOKEN",
    "GH_OWNER",
    "GH_REPO",
    "BASE_BRANCH",
    "NEW_BRANCH",
    "GITHUB_API_URL",
    "LOG_LEVEL",
    "BRANCH_STRATEGY",
)

BASE_SHA = "abc123def4567890abc123def4567890abc123de"


class FakeRefBackend:
    """An in-memory ref namespace that counts every call.

    This is ONLY for testing - not used in production.
    """

    name = "fake"

    def __init__(self, refs: dict[str, str] | None = None, create_response: CreateRefResponse | None = None) -> None:
        self.refs = dict(refs or {})
        self.create_response = create_response
        self.calls: list[tuple[str, ...]] = []

    @property
    def network_calls(self) -> int:
        return len(self.calls)

    def resolve_ref(self, branch: str) -> str:
        from gh_branch_creator.errors import BaseBranchNotFound

        self.calls.append(("resolve_ref", branch))
        ref = f"refs/heads/{branch}"
        if ref not in self.refs:
            raise BaseBranchNotFound(branch, "HTTP 404")
        return self.refs[ref]

    def create_ref(self, ref: str, sha: str) -> CreateRefResponse:
        self.calls.append(("create_ref", ref, sha))
        if self.create_response is not None:
            return self.create_response
        if ref in self.refs:
            return CreateRefResponse(
                status_code=422,
                body='{"message":"Reference already exists","documentation_url":"https://docs.github.com/rest/git/refs#create-a-reference","status":"422"}',
            )
        self.refs[ref] = sha
        return CreateRefResponse(status_code=201, body=f'{{"ref":"{ref}","object":{{"sha":"{sha}"}}}}')


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove settings variables and disable `.env` loading."""
    for name in SETTINGS_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("gh_branch_creator.config.load_dotenv", lambda *args, **kwargs: False)
    yield
    # A real load_dotenv writes to os.environ outside monkeypatch's bookkeeping
    for name in SETTINGS_VARS:
        os.environ.pop(name, None)


@pytest.fixture
def config() -> Config:
    return Config(
        token="test-github-token",
        owner="acme",
        repo="infra",
        base_branch="main",
        new_branch="feature/x",
    )


@pytest.fixture
def fake_backend() -> FakeRefBackend:
    return FakeRefBackend(refs={"refs/heads/main": BASE_SHA})


@pytest.fixture
def dotenv_dir(monkeypatch, tmp_path):
    """Run from an empty directory with the real `.env` loader restored.

    Returns a writer that puts a `.env` file in that directory.
    """
    import dotenv

    monkeypatch.setattr("gh_branch_creator.config.load_dotenv", dotenv.load_dotenv)
    monkeypatch.chdir(tmp_path)

    def write(**values: str):
        path = tmp_path / ".env"
        path.write_text("".join(f"{key}={value}\n" for key, value in values.items()), encoding="utf-8")
        return path

    return write
