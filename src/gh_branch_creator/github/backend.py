"""Backend selection.

Both backends expose the same two calls; the workflow only ever sees the
``RefBackend`` protocol.  Selection happens once per invocation.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from typing import Protocol

from ..config import Config
from ..constants import STRATEGIES, STRATEGY_AUTO, STRATEGY_GH
from ..errors import ToolingError
from ..models import CreateRefResponse
from .api import HttpRefBackend
from .gh_cli import GhCliRefBackend

logger = logging.getLogger(__name__)


class RefBackend(Protocol):
    name: str

    def resolve_ref(self, branch: str) -> str: ...

    def create_ref(self, ref: str, sha: str) -> CreateRefResponse: ...


def select_backend(
    config: Config,
    strategy: str = STRATEGY_AUTO,
    which: Callable[[str], str | None] = shutil.which,
) -> RefBackend:
    """Pick a backend for ``strategy``.

    ``auto`` prefers the ``gh`` client when it is on PATH and falls back to
    plain HTTP.  ``gh`` requires the client and raises `ToolingError` when
    it is missing.
    """
    strategy = (strategy or STRATEGY_AUTO).lower()
    if strategy not in STRATEGIES:
        raise ToolingError(f"Unknown strategy '{strategy}'. Choose one of: {', '.join(STRATEGIES)}")

    gh_path = which("gh")
    if strategy == STRATEGY_GH and not gh_path:
        raise ToolingError("GitHub CLI ('gh') was requested but is not installed.")

    if strategy in (STRATEGY_AUTO, STRATEGY_GH) and gh_path:
        logger.info("Using GitHub CLI at %s", gh_path)
        return GhCliRefBackend(config, executable=gh_path)

    logger.info("Using GitHub REST API at %s", config.api_url)
    return HttpRefBackend(config)
