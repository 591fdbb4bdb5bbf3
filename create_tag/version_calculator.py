"""
Version Calculation Module

Pure functions computing the next semantic versions from the latest one.
"""

from typing import Union

from .models import VersionCandidates
from .tag_classification import SemanticVersion, parse_semantic_version


def next_versions(latest: Union[SemanticVersion, str]) -> VersionCandidates:
    """
    Compute the next patch, minor and major versions.

    Callers fall back to the default development/release tags when the
    repository has no semantic version tag yet instead of calling this.

    Args:
        latest: The latest semantic version (parsed or as a tag string)

    Returns:
        VersionCandidates with fully formed vX.Y.Z strings

    Raises:
        ValueError: If a tag string is not a semantic version
    """
    if isinstance(latest, str):
        version = parse_semantic_version(latest)
        if version is None:
            raise ValueError(f"Not a semantic version tag: {latest}")
    else:
        version = latest

    return VersionCandidates(
        patch=str(SemanticVersion(version.major, version.minor, version.patch + 1)),
        minor=str(SemanticVersion(version.major, version.minor + 1, 0)),
        major=str(SemanticVersion(version.major + 1, 0, 0)),
    )
