"""
Message Generation Module

Pure functions for generating tag messages, usage text and report lines.
This module contains no side effects - only text formatting logic.
"""

from typing import List

from .config import TAG_MESSAGE_TEMPLATE, CLEANUP_PREVIEW_LIMIT


def generate_tag_message(tag: str) -> str:
    """Annotation message stored on created tags."""
    return TAG_MESSAGE_TEMPLATE.format(tag=tag)


def generate_usage(program: str = "create-tag") -> List[str]:
    """Usage lines shown when arguments are rejected."""
    return [
        f"  {program}                            # Interactive mode",
        f"  {program} <tag-name>                 # Create tag from current commit",
        f"  {program} <tag-name> <commit-hash>   # Create tag from specific commit",
    ]


def generate_cleanup_preview(tags: List[str], limit: int = CLEANUP_PREVIEW_LIMIT) -> List[str]:
    """
    Preview lines for the detected temporary tags.

    Shows at most `limit` tags followed by a '... and N more' line.
    """
    lines = [f"   {tag}" for tag in tags[:limit]]
    if len(tags) > limit:
        lines.append(f"   ... and {len(tags) - limit} more")
    return lines


def generate_good_practices() -> List[str]:
    return [
        "   - Use this command to create all your tags",
        "   - Avoid using 'git tag' and 'git push --tags' directly",
        "   - Automatic cleanup keeps the repository clean",
    ]
