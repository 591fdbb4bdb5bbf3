"""
Git Operations Module for create-tag

This module handles opening the local repository the tool runs in.

Functions:
    open_repository: Opens the git repository containing a path

Raises:
    ExternalCommandError: When the path is not inside a git repository
"""

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from .exceptions import ExternalCommandError


def open_repository(path: str = ".") -> Repo:
    """Open the git repository containing path."""
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise ExternalCommandError("This command must be run in a Git repository!") from e
