"""
Git helpers used when locating release artifacts.
"""

from .sha import git_sha, git_sha_sync

__all__ = ["git_sha", "git_sha_sync"]
