"""
Git Operations Module for Version Tagger

This module handles Git repository setup.

Functions:
    setup_git_client: Opens the Git repository the tags are created in

Raises:
    GitOperationError: When the repository cannot be opened
"""

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError
from .exceptions import GitOperationError


def setup_git_client(path: str = ".") -> Repo:
    """Open the Git repository containing `path`."""
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise GitOperationError(f"Failed to open git repository at '{path}': {e}") from e
