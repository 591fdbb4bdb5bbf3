"""
Cleanup Planning Module

Pure functions deciding which temporary tags are stale.

Candidates are selected with the loose cleanup grammar so malformed and legacy
temporary tags are caught too. The branch segment is the text between the first
'_' and the next '.', and a tag is kept while that segment is still contained in
one of the local branch names.
"""

from typing import Iterable, List

from .config import TagPolicy
from .models import CleanupAction, CleanupDecision, InventorySummary
from .tag_classification import is_cleanup_candidate


def extract_branch_segment(tag: str) -> str:
    """Text between the first '_' and the next '.' (or the end of the tag)."""
    _, separator, rest = tag.partition("_")
    if not separator:
        return ""
    return rest.split(".", 1)[0]


def decide_cleanup(tag: str, active_branches: Iterable[str]) -> CleanupDecision:
    """Decide whether a single cleanup candidate is kept or deleted."""
    segment = extract_branch_segment(tag)
    if not segment:
        return CleanupDecision(tag, CleanupAction.DELETE, "no branch segment")

    if any(segment in branch for branch in active_branches):
        return CleanupDecision(tag, CleanupAction.KEEP, f"branch '{segment}' is still active")

    return CleanupDecision(tag, CleanupAction.DELETE, f"branch '{segment}' no longer exists")


def plan_cleanup(
    tags: Iterable[str],
    active_branches: Iterable[str],
    policy: TagPolicy = TagPolicy(),
) -> List[CleanupDecision]:
    """
    Compute cleanup decisions for every candidate in an inventory.

    Run once for the local inventory and once for the remote one, always with
    the local branches as the liveness oracle.

    Args:
        tags: Tag inventory (local or remote)
        active_branches: Local branch names
        policy: Tag policy holding the cleanup grammar

    Returns:
        One decision per cleanup candidate, in inventory order
    """
    branches = list(active_branches)
    return [decide_cleanup(tag, branches) for tag in tags if is_cleanup_candidate(tag, policy)]


def tags_to_delete(decisions: Iterable[CleanupDecision]) -> List[str]:
    """Tags from the plan that should be deleted."""
    return [decision.tag for decision in decisions if decision.should_delete]


def summarize_inventory(tags: Iterable[str], policy: TagPolicy = TagPolicy()) -> InventorySummary:
    """Count all tags and the temporary ones among them."""
    tags = list(tags)
    temporary = sum(1 for tag in tags if is_cleanup_candidate(tag, policy))
    return InventorySummary(total=len(tags), temporary=temporary)
