"""
Temporary Tag Naming Module

Pure functions for naming temporary tags: <base_tag>_<branch>.<suffix>.

Suffixes are discovered by probing upward from 1 until a free slot is found,
which is O(n) in the number of existing suffixes for the (base tag, branch) pair.
"""

from typing import Iterable, Optional


def format_temporary_tag(base_tag: str, branch_segment: str, suffix: int) -> str:
    """Build a temporary tag name."""
    return f"{base_tag}_{branch_segment}.{suffix}"


def next_temporary_suffix(base_tag: str, branch_segment: str, local_tags: Iterable[str]) -> int:
    """
    Find the first free suffix for a base tag and branch.

    Args:
        base_tag: Semantic version tag the branch is based on
        branch_segment: Branch name used in the tag
        local_tags: Tags existing in the local repository

    Returns:
        The smallest suffix >= 1 whose tag does not exist locally
    """
    existing = set(local_tags)
    suffix = 1
    while format_temporary_tag(base_tag, branch_segment, suffix) in existing:
        suffix += 1
    return suffix


def last_temporary_tag(base_tag: str, branch_segment: str, local_tags: Iterable[str]) -> Optional[str]:
    """Return the most recent temporary tag for the pair, or None if there is none."""
    last_suffix = next_temporary_suffix(base_tag, branch_segment, local_tags) - 1
    if last_suffix < 1:
        return None
    return format_temporary_tag(base_tag, branch_segment, last_suffix)
