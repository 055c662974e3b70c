"""Secret redaction utilities.

Response bodies and tool errors are echoed back to the user when a branch
cannot be created.  Before that happens the configured token, and anything
shaped like a GitHub credential, is replaced with ``"<REDACTED>"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..constants import MAX_BODY_SNIPPET

_TOKEN_PATTERNS = [
    # GitHub personal access, OAuth, user-to-server, server-to-server and refresh tokens
    re.compile(r"gh[pousr]_[A-Za-z0-9]{30,}", re.IGNORECASE),
    re.compile(r"github_pat_[A-Za-z0-9_]{20,}", re.IGNORECASE),
    # Bearer / token authorization values
    re.compile(r"(Bearer|token)\s+[A-Za-z0-9\-\._~\+/]{20,}=*", re.IGNORECASE),
]


def redact_secrets(text: str, secrets: Iterable[str]) -> str:
    """Return ``text`` with secrets and common token patterns replaced.

    :param text: arbitrary text that may contain secrets
    :param secrets: iterable of secret strings to redact
    :return: redacted text
    """
    redacted = text or ""
    for secret in secrets:
        if secret:
            redacted = redacted.replace(secret, "<REDACTED>")
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub("<REDACTED>", redacted)
    return redacted


def snippet(text: str, secrets: Iterable[str], limit: int = MAX_BODY_SNIPPET) -> str:
    """Redact ``text`` and collapse it to a single line of at most ``limit`` characters."""
    flat = " ".join(redact_secrets(text, secrets).split())
    if len(flat) > limit:
        return flat[: limit - 3] + "..."
    return flat
