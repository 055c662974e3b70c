"""Classification of a create-ref response into an outcome.

GitHub answers a create request for an existing ref with
``422 {"message": "Reference already exists", ...}``.  There is no stable
error code for this case on the git refs endpoint, so the match is a
case-insensitive substring check on the raw body.  A structured
``errors[].code == "already_exists"`` entry is accepted too, for
endpoints that report one.
"""

from __future__ import annotations

import json

from .models import AlreadyExists, Created, CreateRefResponse, Failed, Outcome
from .policy.redaction import snippet

ALREADY_EXISTS_PHRASE = "reference already exists"


def _has_already_exists_code(body: str) -> bool:
    try:
        data = json.loads(body)
    except ValueError:
        return False
    if not isinstance(data, dict):
        return False
    errors = data.get("errors")
    if not isinstance(errors, list):
        return False
    return any(isinstance(err, dict) and err.get("code") == "already_exists" for err in errors)


def is_already_exists(body: str | None) -> bool:
    """Return True if ``body`` says the reference already exists."""
    if not body:
        return False
    if ALREADY_EXISTS_PHRASE in body.lower():
        return True
    return _has_already_exists_code(body)


def classify_create_response(response: CreateRefResponse, sha: str, secrets: tuple[str, ...] = ()) -> Outcome:
    """Map a create-ref response to ``Created``, ``AlreadyExists`` or ``Failed``."""
    if response.success:
        return Created(sha=sha)
    if is_already_exists(response.body):
        return AlreadyExists()
    status = f"HTTP {response.status_code}" if response.status_code is not None else "tool error"
    detail = snippet(response.body, secrets)
    return Failed(reason=f"{status}: {detail}" if detail else status)
