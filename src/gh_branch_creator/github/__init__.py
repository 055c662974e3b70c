"""GitHub API integration."""

from .api import HttpRefBackend
from .auth import get_github_client
from .backend import RefBackend, select_backend
from .gh_cli import GhCliRefBackend

__all__ = [
    "get_github_client",
    "HttpRefBackend",
    "GhCliRefBackend",
    "RefBackend",
    "select_backend",
]
