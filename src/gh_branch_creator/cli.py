"""CLI interface using Typer."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from .config import Config
from .constants import SHORT_SHA_LEN
from .errors import BranchCreatorError, ConfigurationError
from .models import AlreadyExists, Created, Failed
from .telemetry.logger import configure_logging, get_logger
from .workflow import create_branch, exit_code_for

logger = get_logger(__name__)

app = typer.Typer(
    help="Create a GitHub branch from the tip of another branch",
    add_completion=False,
)

USAGE = """
Required vars for "Create Branch" step:
  - GITHUB_TOKEN (or GH_TOKEN): GitHub token with "repo" scope
  - GH_OWNER: GitHub org/user, e.g. "acme-inc"
  - GH_REPO: Existing repo name, e.g. "platform-monorepo"
  - BASE_BRANCH: Base branch to branch from, e.g. "main"
  - NEW_BRANCH: New branch name, e.g. "idp/new-app-2025-09-09"

Quick start (copy/paste and edit):
  export GH_TOKEN=ghp_xxx
  export GH_OWNER=acme-inc
  export GH_REPO=platform-monorepo
  export BASE_BRANCH=main
  export NEW_BRANCH="idp/app-template-$(date +%Y%m%d%H%M)"

Tip: You can also put these in a local .env file in the working directory.
"""


def info(message: str) -> None:
    typer.echo(f"➡️  {message}")


def fail(message: str) -> None:
    typer.echo(f"❌ {message}", err=True)


@app.command()
def main(
    token: Annotated[Optional[str], typer.Option("--token", help="GitHub token (default: $GITHUB_TOKEN or $GH_TOKEN)")] = None,
    owner: Annotated[Optional[str], typer.Option("--owner", help="GitHub org/user (default: $GH_OWNER)")] = None,
    repo: Annotated[Optional[str], typer.Option("--repo", help="Repository name (default: $GH_REPO)")] = None,
    base: Annotated[Optional[str], typer.Option("--base", help="Existing branch to branch from (default: $BASE_BRANCH)")] = None,
    new: Annotated[Optional[str], typer.Option("--new", help="Branch to create (default: $NEW_BRANCH)")] = None,
    api_url: Annotated[Optional[str], typer.Option("--api-url", help="GitHub API root (default: $GITHUB_API_URL)")] = None,
    strategy: Annotated[
        Optional[str],
        typer.Option("--strategy", help="auto (gh if installed), gh or http (default: $BRANCH_STRATEGY)"),
    ] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level (default: $LOG_LEVEL)")] = None,
) -> None:
    """Create NEW_BRANCH in GH_OWNER/GH_REPO pointing at the tip of BASE_BRANCH.

    Exits 0 when the branch was created or already existed.
    """
    config = Config.load_from_env().with_overrides(
        token=token,
        owner=owner,
        repo=repo,
        base_branch=base,
        new_branch=new,
        api_url=api_url,
        log_level=log_level,
        strategy=strategy,
    )
    configure_logging(config.log_level)

    try:
        config.validate()
    except ConfigurationError as exc:
        fail(str(exc))
        typer.echo(USAGE, err=True)
        raise typer.Exit(exc.exit_code)

    info(f"Creating branch '{config.new_branch}' from '{config.base_branch}' in {config.repo_slug}...")

    try:
        outcome = create_branch(config)
    except BranchCreatorError as exc:
        logger.debug("Branch creation stopped: %r", exc)
        fail(str(exc))
        raise typer.Exit(exc.exit_code)

    if isinstance(outcome, Created):
        typer.echo(
            f"✅ Created branch '{config.new_branch}' (from {config.base_branch} @ {outcome.sha[:SHORT_SHA_LEN]})."
        )
    elif isinstance(outcome, AlreadyExists):
        typer.echo(f"ℹ️  Branch '{config.new_branch}' already exists. Nothing to do.")
    elif isinstance(outcome, Failed):
        fail(f"Failed to create branch: {outcome.reason}. Check token scopes and permissions.")

    raise typer.Exit(exit_code_for(outcome))


if __name__ == "__main__":
    app()
