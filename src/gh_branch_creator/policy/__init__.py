"""Policy utilities for gh-branch-creator."""

from .redaction import redact_secrets, snippet

__all__ = [
    "redact_secrets",
    "snippet",
]
