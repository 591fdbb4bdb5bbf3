"""
Tag Classification Module

Pure functions for detecting and validating git tag kinds.
This module contains no side effects - only tag analysis logic.
"""

from enum import Enum
from typing import Iterable, Optional
from dataclasses import dataclass

from .config import TagPolicy
from .exceptions import ValidationError
from .models import BranchContext


class TagKind(Enum):
    """Enum for the accepted tag grammars."""
    SEMANTIC_VERSION = "semantic version"
    TICKET = "ticket"
    PRERELEASE = "pre-release"
    TEMPORARY = "temporary"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """A vMAJOR.MINOR.PATCH version, ordered numerically."""
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"v{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class TemporaryTagParts:
    """Components of a temporary tag: <base_tag>_<branch_segment>.<suffix>."""
    base_tag: str
    branch_segment: str
    suffix: int


@dataclass(frozen=True)
class ClassifiedTag:
    """A tag string together with its classified kind and parsed parts."""
    raw: str
    kind: TagKind
    version: Optional[SemanticVersion] = None
    temporary: Optional[TemporaryTagParts] = None


def _version_from_match(match) -> SemanticVersion:
    return SemanticVersion(int(match.group(1)), int(match.group(2)), int(match.group(3)))


def parse_semantic_version(tag: str, policy: TagPolicy = TagPolicy()) -> Optional[SemanticVersion]:
    """Parse a semantic version tag, or return None if it is not one."""
    if not tag:
        return None
    match = policy.semantic_pattern.fullmatch(tag)
    return _version_from_match(match) if match else None


def classify_tag(tag: str, policy: TagPolicy = TagPolicy()) -> ClassifiedTag:
    """
    Classify a tag against the accepted grammars.

    Grammars are checked in priority order and the first match wins:
    semantic version, ticket, pre-release, temporary.

    Args:
        tag: The tag string
        policy: Tag policy holding the grammars

    Returns:
        ClassifiedTag with the kind and parsed components
    """
    if not tag:
        return ClassifiedTag(raw=tag or "", kind=TagKind.UNRECOGNIZED)

    if match := policy.semantic_pattern.fullmatch(tag):
        return ClassifiedTag(raw=tag, kind=TagKind.SEMANTIC_VERSION, version=_version_from_match(match))

    if policy.ticket_pattern.fullmatch(tag):
        return ClassifiedTag(raw=tag, kind=TagKind.TICKET)

    if match := policy.prerelease_pattern.fullmatch(tag):
        return ClassifiedTag(raw=tag, kind=TagKind.PRERELEASE, version=_version_from_match(match))

    return _classify_temporary(tag, policy)


def _classify_temporary(tag: str, policy: TagPolicy) -> ClassifiedTag:
    """Check only the temporary grammar."""
    if match := policy.temporary_pattern.fullmatch(tag):
        base_tag, branch_segment, suffix = match.groups()
        return ClassifiedTag(
            raw=tag,
            kind=TagKind.TEMPORARY,
            version=parse_semantic_version(base_tag, policy),
            temporary=TemporaryTagParts(base_tag, branch_segment, int(suffix)),
        )

    return ClassifiedTag(raw=tag, kind=TagKind.UNRECOGNIZED)


def detect_tag_kind(tag: str, policy: TagPolicy = TagPolicy()) -> TagKind:
    """Return only the kind of a tag."""
    return classify_tag(tag, policy).kind


def latest_semantic_tag(tags: Iterable[str], policy: TagPolicy = TagPolicy()) -> Optional[str]:
    """
    Find the greatest semantic version tag under numeric ordering.

    Tags that normalize to the same version (e.g. leading zeros) are
    tie-broken by their text, the greatest wins.

    Returns:
        The tag string or None if no semantic version tag exists
    """
    best = None
    for tag in tags:
        version = parse_semantic_version(tag, policy)
        if version is None:
            continue
        key = (version, tag)
        if best is None or key > best:
            best = key
    return best[1] if best else None


def is_cleanup_candidate(tag: str, policy: TagPolicy = TagPolicy()) -> bool:
    """Check if a tag matches the loose temporary-tag cleanup grammar."""
    return bool(tag) and policy.cleanup_pattern.search(tag) is not None


def accepted_formats(policy: TagPolicy = TagPolicy()) -> list:
    """Human-readable list of formats accepted on the main line."""
    projects = ", ".join(f"{project}-123.1" for project in policy.ticket_projects)
    return [
        "Semantic version tag: v1.2.3",
        f"Ticket tag: {projects}",
        "Pre-release tag: v1.2.3-alpha, v1.2.3-beta",
        "Temporary tag: v1.2.3_BRANCH_NAME.1",
    ]


def validate_tag(tag: str, context: BranchContext, policy: TagPolicy = TagPolicy()) -> ClassifiedTag:
    """
    Validate a tag against the grammar required on the current branch.

    On the main line every recognized kind is accepted. On any other branch
    only temporary tags are accepted.

    Raises:
        ValidationError: If the tag is not accepted on this branch
    """
    if context.is_main_line:
        classified = classify_tag(tag, policy)
        if classified.kind == TagKind.UNRECOGNIZED:
            raise ValidationError(
                f"Invalid tag format: {tag}",
                tag=tag,
                hints=["Accepted formats:"] + [f"   - {fmt}" for fmt in accepted_formats(policy)],
            )
        return classified

    classified = _classify_temporary(tag or "", policy)
    if classified.kind != TagKind.TEMPORARY:
        raise ValidationError(
            f"Invalid tag format: {tag}",
            tag=tag,
            hints=[
                "Accepted format:",
                "   - Temporary tag: v1.2.3_BRANCH_NAME.1",
                "Only temporary tags are allowed on feature branches",
                "It's recommended to use the interactive mode to create a temporary tag",
            ],
        )
    return classified
