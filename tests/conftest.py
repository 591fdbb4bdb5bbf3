"""Test fixtures for create-tag.

This module provides shared fixtures used across multiple test modules.
It sets up an in-memory repository that answers the same queries as the
I/O layer, so the policy core and the orchestration can be tested without git.

Fixtures:
    fake_repository: In-memory repository on branch 'main'
    feature_repository: In-memory repository on branch 'feature-x'
"""

import pytest

from create_tag.exceptions import ExternalCommandError


class FakeRepository:
    """In-memory stand-in for IOLayer.

    Attributes mirror the repository state; every mutating call is recorded
    in `calls` so tests can assert on the order of operations. In dry-run
    mode mutations go to `skipped_calls` instead and change nothing.
    """

    def __init__(
        self,
        branch="main",
        branches=None,
        tags=None,
        remote_tags=None,
        remote_branches=None,
        merge_bases=None,
        merged_tags=None,
        commits=("HEAD",),
        remote="origin",
        has_remote=True,
        dry_run=False,
    ):
        self.branch = branch
        self.branches = list(branches if branches is not None else [branch])
        self.tags = list(tags or [])
        self.remote_tag_list = list(remote_tags or [])
        self.remote_branches = list(remote_branches or [])
        self.merge_bases = dict(merge_bases or {})
        self.merged_tags = dict(merged_tags or {})
        self.commits = set(commits)
        self.remote = remote
        self.remote_configured = has_remote
        self.dry_run = dry_run
        self.calls = []
        self.skipped_calls = []
        self.failing = set()
        self.branch_sequence = []

    def _maybe_fail(self, operation, target):
        if (operation, target) in self.failing:
            raise ExternalCommandError(f"{operation} {target} failed", command=operation)

    # Queries

    def current_branch(self):
        if self.branch_sequence:
            self.branch = self.branch_sequence.pop(0)
        return self.branch

    def branch_exists(self, branch_name):
        return branch_name in self.branches

    def local_branches(self):
        return list(self.branches)

    def local_tags(self):
        return list(self.tags)

    def has_remote(self, remote=None):
        return self.remote_configured

    def remote_tags(self, remote=None):
        self._maybe_fail("ls-remote", remote or self.remote)
        return list(self.remote_tag_list)

    def remote_branch_exists(self, branch_name, remote=None):
        return branch_name in self.remote_branches

    def merge_base(self, first, second):
        return self.merge_bases.get((first, second))

    def tags_merged_into(self, commit):
        return list(self.merged_tags.get(commit, []))

    def commit_exists(self, reference):
        return reference in self.commits

    def read_yaml(self, path):
        return None

    # Mutations

    def _skip(self, *call):
        """Record a mutation skipped in dry-run mode."""
        if self.dry_run:
            self.skipped_calls.append(call)
        return self.dry_run

    def create_tag(self, tag, commit, message):
        if self._skip("create_tag", tag, commit, message):
            return False
        self._maybe_fail("create", tag)
        self.calls.append(("create_tag", tag, commit, message))
        self.tags.append(tag)
        return True

    def push_tag(self, tag, remote=None):
        if self._skip("push_tag", tag):
            return False
        self._maybe_fail("push_tag", tag)
        self.calls.append(("push_tag", tag))
        self.remote_tag_list.append(tag)
        return True

    def push_branch(self, branch_name, remote=None):
        if self._skip("push_branch", branch_name):
            return False
        self._maybe_fail("push_branch", branch_name)
        self.calls.append(("push_branch", branch_name))
        self.remote_branches.append(branch_name)
        return True

    def delete_local_tag(self, tag):
        if self._skip("delete_local_tag", tag):
            return False
        self._maybe_fail("delete_local", tag)
        self.calls.append(("delete_local_tag", tag))
        if tag in self.tags:
            self.tags.remove(tag)
        return True

    def delete_remote_tag(self, tag, remote=None):
        if self._skip("delete_remote_tag", tag):
            return False
        self._maybe_fail("delete_remote", tag)
        self.calls.append(("delete_remote_tag", tag))
        self.remote_tag_list.remove(tag)
        return True


@pytest.fixture
def fake_repository():
    """Repository on 'main' with two release tags."""
    return FakeRepository(
        branch="main",
        branches=["main", "feature-x"],
        tags=["v1.0.0", "v1.1.0"],
        remote_tags=["v1.0.0", "v1.1.0"],
        remote_branches=["main"],
    )


@pytest.fixture
def feature_repository():
    """Repository on 'feature-x' branched from main after v1.1.0."""
    return FakeRepository(
        branch="feature-x",
        branches=["main", "feature-x"],
        tags=["v1.0.0", "v1.1.0"],
        remote_tags=["v1.0.0", "v1.1.0"],
        remote_branches=["main", "feature-x"],
        merge_bases={("feature-x", "main"): "abc123"},
        merged_tags={"abc123": ["v1.0.0", "v1.1.0"]},
    )
