"""
I/O Layer for create-tag

This module contains all I/O operations (file system, Git) separated from
business logic. This is the "imperative shell" that handles all side effects;
the policy core only ever sees the lists and answers it returns.
"""

import logging
from pathlib import Path
from typing import List, Dict, Optional, Any
import yaml
from git import Repo
from git.exc import GitCommandError

from .exceptions import ExternalCommandError

logger = logging.getLogger(__name__)


def _lines(output: str) -> List[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


class IOLayer:
    """Handles all I/O operations for the application."""

    def __init__(self, repo: Repo, remote: str = "origin", dry_run: bool = False):
        """Initialize the I/O layer.

        Args:
            repo: Git repository object
            remote: Name of the remote tags are pushed to
            dry_run: If True, don't perform actual writes
        """
        self.repo = repo
        self.remote = remote
        self.dry_run = dry_run

    # -----------------------------------------------------------------------------
    # File System Operations
    # -----------------------------------------------------------------------------

    def read_yaml(self, path: str) -> Optional[Dict[str, Any]]:
        """Read a YAML file and return its contents.

        Args:
            path: Path to the YAML file

        Returns:
            Dictionary with YAML contents or None if file doesn't exist
        """
        file_path = Path(path)
        if not file_path.exists():
            return None

        with file_path.open() as f:
            return yaml.safe_load(f) or {}

    # -----------------------------------------------------------------------------
    # Git Queries
    # -----------------------------------------------------------------------------

    def _git(self, *args: str) -> str:
        """Run a git command, translating failures into ExternalCommandError."""
        command = " ".join(("git",) + args)
        logger.debug("Running %s", command)
        try:
            return self.repo.git.execute(["git", *args])
        except GitCommandError as e:
            raise ExternalCommandError(f"{command} failed: {e.stderr.strip() or e}", command=command) from e

    def current_branch(self) -> str:
        """Name of the checked out branch (empty on a detached HEAD)."""
        return self._git("branch", "--show-current").strip()

    def branch_exists(self, branch_name: str) -> bool:
        """Check if a branch exists locally."""
        try:
            self._git("show-ref", "--verify", "--quiet", f"refs/heads/{branch_name}")
        except ExternalCommandError:
            return False
        return True

    def local_branches(self) -> List[str]:
        """List all local branch names."""
        return _lines(self._git("branch", "--format=%(refname:short)"))

    def local_tags(self) -> List[str]:
        """List all local tags."""
        return _lines(self._git("tag", "-l"))

    def has_remote(self, remote: Optional[str] = None) -> bool:
        """Check if the remote is configured."""
        remote = remote or self.remote
        return remote in _lines(self._git("remote"))

    def remote_tags(self, remote: Optional[str] = None) -> List[str]:
        """List tags on the remote, without the dereferenced ^{} entries."""
        remote = remote or self.remote
        tags = []
        for line in _lines(self._git("ls-remote", "--tags", remote)):
            ref = line.split()[-1]
            if ref.endswith("^{}"):
                continue
            tags.append(ref[len("refs/tags/"):] if ref.startswith("refs/tags/") else ref)
        return tags

    def remote_branch_exists(self, branch_name: str, remote: Optional[str] = None) -> bool:
        """Check if a branch exists on the remote."""
        remote = remote or self.remote
        return bool(_lines(self._git("ls-remote", "--heads", remote, branch_name)))

    def merge_base(self, first: str, second: str) -> Optional[str]:
        """Common ancestor of two references, or None if there is none."""
        try:
            return self._git("merge-base", first, second).strip() or None
        except ExternalCommandError:
            return None

    def tags_merged_into(self, commit: str) -> List[str]:
        """List tags reachable from a commit."""
        return _lines(self._git("tag", "-l", "--merged", commit))

    def commit_exists(self, reference: str) -> bool:
        """Check if a commit-ish reference resolves to a commit."""
        try:
            self._git("rev-parse", "--verify", "--quiet", f"{reference}^{{commit}}")
        except ExternalCommandError:
            return False
        return True

    # -----------------------------------------------------------------------------
    # Git Operations
    # -----------------------------------------------------------------------------

    def create_tag(self, tag: str, commit: str, message: str) -> bool:
        """Create an annotated tag.

        Returns:
            True if created, False if dry run

        Raises:
            ExternalCommandError: If git refuses (e.g. the tag already exists)
        """
        if self.dry_run:
            print(f"[DRY RUN] Would create tag {tag} on {commit}")
            return False

        self._git("tag", "-a", tag, commit, "-m", message)
        return True

    def push_tag(self, tag: str, remote: Optional[str] = None) -> bool:
        """Push a single tag to the remote."""
        remote = remote or self.remote
        if self.dry_run:
            print(f"[DRY RUN] Would push tag {tag} to {remote}")
            return False

        self._git("push", remote, f"refs/tags/{tag}")
        return True

    def push_branch(self, branch_name: str, remote: Optional[str] = None) -> bool:
        """Push a branch to the remote and set it as upstream."""
        remote = remote or self.remote
        if self.dry_run:
            print(f"[DRY RUN] Would push {branch_name} to {remote}")
            return False

        self._git("push", "-u", remote, branch_name)
        return True

    def delete_local_tag(self, tag: str) -> bool:
        """Delete a local tag. A tag that is already gone is not an error."""
        if self.dry_run:
            print(f"[DRY RUN] Would delete local tag {tag}")
            return False

        try:
            self._git("tag", "-d", tag)
        except ExternalCommandError:
            if tag in self.local_tags():
                raise
            logger.debug("Tag %s already absent locally", tag)
        return True

    def delete_remote_tag(self, tag: str, remote: Optional[str] = None) -> bool:
        """Delete a tag on the remote."""
        remote = remote or self.remote
        if self.dry_run:
            print(f"[DRY RUN] Would delete tag {tag} on {remote}")
            return False

        self._git("push", "--delete", remote, f"refs/tags/{tag}")
        return True
