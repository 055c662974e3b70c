"""Value types passed between the workflow and its backends."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BranchReference:
    """A named ref and the commit it points at."""

    name: str
    target_commit_sha: str

    @classmethod
    def for_branch(cls, branch: str, sha: str) -> BranchReference:
        return cls(name=f"refs/heads/{branch}", target_commit_sha=sha)


@dataclass(frozen=True)
class CreateRefResponse:
    """What a backend observed for the create call.

    ``status_code`` is ``None`` when the backend could not determine an
    HTTP status (for example an unexpected ``gh`` failure).
    """

    status_code: int | None
    body: str = ""

    @property
    def success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


@dataclass(frozen=True)
class Created:
    sha: str
    ok = True


@dataclass(frozen=True)
class AlreadyExists:
    ok = True


@dataclass(frozen=True)
class Failed:
    reason: str
    ok = False


Outcome = Created | AlreadyExists | Failed
