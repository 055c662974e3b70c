"""Exception hierarchy for gh-branch-creator.

Each error carries the process exit code the command line reports for it.
"Already exists" is deliberately absent: it is a successful outcome.
"""

from __future__ import annotations

from .constants import EXIT_BASE_NOT_FOUND, EXIT_CONFIG, EXIT_CREATE_FAILED, EXIT_TOOLING


class BranchCreatorError(Exception):
    """Base error for all custom exceptions."""

    exit_code = EXIT_CREATE_FAILED


class ConfigurationError(BranchCreatorError):
    """Raised when required settings are missing, before any network call."""

    exit_code = EXIT_CONFIG

    def __init__(self, missing: list[str]):
        super().__init__(f"Missing required environment variables: {' '.join(missing)}")
        self.missing = missing


class ToolingError(BranchCreatorError):
    """Raised when no usable client is available."""

    exit_code = EXIT_TOOLING


class BaseBranchNotFound(BranchCreatorError):
    """Raised when the base branch cannot be read."""

    exit_code = EXIT_BASE_NOT_FOUND

    def __init__(self, branch: str, detail: str | None = None):
        message = f"Could not read base branch '{branch}'. Does it exist?"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.branch = branch
        self.detail = detail or ""


class CreateFailed(BranchCreatorError):
    """Raised when the create request could not be completed."""

    exit_code = EXIT_CREATE_FAILED
