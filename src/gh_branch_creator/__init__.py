"""Top‑level package for gh-branch-creator.

This package creates a branch in a GitHub repository from the current tip
of a base branch, either through the GitHub REST API or through the ``gh``
command-line client.  See ``README.md`` for usage.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
