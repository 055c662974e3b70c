"""Logging wrapper for gh-branch-creator."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: str | None) -> int:
    """Return the numeric level for ``level``, or WARNING when it is not a level name."""
    value = logging.getLevelName((level or "").strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(level: str = "WARNING") -> None:
    """Send package logs to stderr at ``level``.

    Status lines for the user are printed separately, so stdout stays clean.
    """
    logger = logging.getLogger("gh_branch_creator")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if not name.startswith("gh_branch_creator"):
        name = f"gh_branch_creator.{name}"
    return logging.getLogger(name)
