"""Branch creation workflow.

Validate the configuration, resolve the base branch, create the new ref at
the same commit and classify what GitHub said.  Nothing is retried; a
failure to read the base branch stops the run before any write.
"""

from __future__ import annotations

import logging

from .classify import classify_create_response
from .config import Config
from .constants import EXIT_CREATE_FAILED, EXIT_OK
from .errors import CreateFailed
from .github.backend import RefBackend, select_backend
from .models import BranchReference, Failed, Outcome

logger = logging.getLogger(__name__)


def create_branch(
    config: Config,
    backend: RefBackend | None = None,
    strategy: str | None = None,
) -> Outcome:
    """Create ``config.new_branch`` from the tip of ``config.base_branch``.

    Raises `ConfigurationError` before touching the network when settings
    are missing, `ToolingError` when no backend is usable and
    `BaseBranchNotFound` when the base cannot be read.  Everything after
    the base has been resolved is reported through the returned outcome.
    ``strategy`` overrides ``config.strategy`` when given.
    """
    config.validate()
    if backend is None:
        backend = select_backend(config, strategy or config.strategy)

    sha = backend.resolve_ref(config.base_branch)
    target = BranchReference.for_branch(config.new_branch, sha)
    logger.info("Creating %s at %s in %s", target.name, sha, config.repo_slug)

    try:
        response = backend.create_ref(target.name, target.target_commit_sha)
    except CreateFailed as exc:
        return Failed(reason=str(exc))

    outcome = classify_create_response(response, sha, secrets=(config.token,))
    logger.info("Outcome for %s: %s", target.name, type(outcome).__name__)
    return outcome


def exit_code_for(outcome: Outcome) -> int:
    """Map an outcome to the process exit code."""
    return EXIT_OK if outcome.ok else EXIT_CREATE_FAILED
