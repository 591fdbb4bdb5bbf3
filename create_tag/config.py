"""
Configuration Module for create-tag

This module contains configuration settings and data structures used throughout the application.
It defines the constants and the immutable tag policy that control how tags are
classified, proposed and cleaned up.

Constants:
    DEFAULT_COMMIT: Commit reference used when none is given
    DEFAULT_DEVELOPMENT_TAG: First tag proposed for development on an untagged repository
    DEFAULT_RELEASE_TAG: First tag proposed for a release on an untagged repository
    MAIN_LINE_BRANCHES: Branch names treated as the authoritative release line
    DEFAULT_REMOTE: Name of the remote tags are pushed to
    DEFAULT_TICKET_PROJECTS: Project codes accepted in ticket tags
    CONFIG_FILE_NAME: Optional per-repository configuration file

Classes:
    TagPolicy: Immutable configuration handed to the classifier, resolver and planner
"""

import re
from dataclasses import dataclass, field
from typing import Tuple

# Constants
DEFAULT_COMMIT = "HEAD"
DEFAULT_DEVELOPMENT_TAG = "v0.1.0"
DEFAULT_RELEASE_TAG = "v1.0.0"
BRANCH_MASTER = "master"
BRANCH_MAIN = "main"
MAIN_LINE_BRANCHES = (BRANCH_MASTER, BRANCH_MAIN)
DEFAULT_REMOTE = "origin"
DEFAULT_TICKET_PROJECTS = ("BACK", "FRONT")
CONFIG_FILE_NAME = ".create-tag.yaml"
TAG_MESSAGE_TEMPLATE = "Build tag {tag}"
CLEANUP_PREVIEW_LIMIT = 5

# Tag grammars (matched against the whole tag with re.fullmatch)
# SEMANTIC_VERSION_PATTERN: v1.0.0
# PRERELEASE_PATTERN: v1.2.3-alpha
# TEMPORARY_PATTERN: v1.2.3_FRONT-123.1 (branch segment is greedy up to the last dot)
# TEMPORARY_CLEANUP_PATTERN: loose match, also catches legacy/malformed temporary tags
SEMANTIC_VERSION_PATTERN = r"v([0-9]+)\.([0-9]+)\.([0-9]+)"
PRERELEASE_PATTERN = r"v([0-9]+)\.([0-9]+)\.([0-9]+)-[a-z]+"
TEMPORARY_PATTERN = r"(v[0-9]+\.[0-9]+\.[0-9]+)_(.+)\.([0-9]+)"
TEMPORARY_CLEANUP_PATTERN = r"_.*\.|_[A-Z]+-[0-9]+$"
TICKET_PATTERN_TEMPLATE = r"({projects})-[0-9]+\.[0-9]+"
PROJECT_CODE_PATTERN = r"[A-Z]+"


@dataclass(frozen=True)
class TagPolicy:
    """Immutable tag policy shared by the classifier, resolver and cleanup planner."""

    ticket_projects: Tuple[str, ...] = DEFAULT_TICKET_PROJECTS
    main_line_branches: Tuple[str, ...] = MAIN_LINE_BRANCHES
    default_development_tag: str = DEFAULT_DEVELOPMENT_TAG
    default_release_tag: str = DEFAULT_RELEASE_TAG
    semantic_pattern: re.Pattern = field(default=re.compile(SEMANTIC_VERSION_PATTERN), repr=False)
    prerelease_pattern: re.Pattern = field(default=re.compile(PRERELEASE_PATTERN), repr=False)
    temporary_pattern: re.Pattern = field(default=re.compile(TEMPORARY_PATTERN), repr=False)
    cleanup_pattern: re.Pattern = field(default=re.compile(TEMPORARY_CLEANUP_PATTERN), repr=False)

    @property
    def ticket_pattern(self) -> re.Pattern:
        """Ticket grammar built from the configured project codes."""
        projects = "|".join(re.escape(project) for project in self.ticket_projects)
        return re.compile(TICKET_PATTERN_TEMPLATE.format(projects=projects))

    def is_main_line(self, branch: str) -> bool:
        """Check if a branch name is one of the main-line branches."""
        return branch in self.main_line_branches
