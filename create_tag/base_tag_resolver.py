"""
Base Tag Resolution Module

Finds the semantic version tag a feature branch diverged from.
Read-only: the repository is only queried, never modified.
"""

import logging
from typing import Optional

from .config import TagPolicy
from .io_layer import IOLayer
from .tag_classification import latest_semantic_tag

logger = logging.getLogger(__name__)


def select_main_line_branch(repository: IOLayer, policy: TagPolicy = TagPolicy()) -> Optional[str]:
    """Return the first main-line branch that exists locally ('master' before 'main')."""
    for branch in policy.main_line_branches:
        if repository.branch_exists(branch):
            return branch
    return None


def resolve_base_tag(branch: str, repository: IOLayer, policy: TagPolicy = TagPolicy()) -> str:
    """
    Determine the semantic tag that best represents where a branch diverged.

    Steps, first success wins:
    1. pick the main-line branch;
    2. compute the merge base of the branch and the main line;
    3. take the greatest semantic tag merged into the merge base.
    Any failed step falls back to the greatest semantic tag in the whole
    repository, and to the default development tag if there is none.

    Args:
        branch: The feature branch name
        repository: Repository collaborator
        policy: Tag policy

    Returns:
        A semantic version tag string
    """
    global_latest = latest_semantic_tag(repository.local_tags(), policy)
    fallback = global_latest or policy.default_development_tag

    main_branch = select_main_line_branch(repository, policy)
    if main_branch is None:
        logger.info("No main-line branch found, using latest semantic tag %s", fallback)
        return fallback

    base_commit = repository.merge_base(branch, main_branch)
    if not base_commit:
        logger.info("No merge base between %s and %s, using latest semantic tag %s", branch, main_branch, fallback)
        return fallback

    base_tag = latest_semantic_tag(repository.tags_merged_into(base_commit), policy)
    if base_tag is None:
        logger.info("No semantic tag reachable from %s, using latest semantic tag %s", base_commit, fallback)
        return fallback

    logger.debug("Base tag for %s resolved to %s (merge base %s)", branch, base_tag, base_commit)
    return base_tag
