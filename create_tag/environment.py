"""
Environment Configuration Module

Handles parsing and validation of environment variables and of the optional
per-repository configuration file. Environment variables override the file.
This is a pure module - no side effects, just data transformation.
"""

from dataclasses import dataclass
from typing import List, Dict, Optional, Any, Tuple
import logging
import re

import dpath

from .config import DEFAULT_REMOTE, DEFAULT_TICKET_PROJECTS, PROJECT_CODE_PATTERN, TagPolicy

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _file_value(file_data: Dict[str, Any], path: str, default: Any = None) -> Any:
    """Read a dotted path from the configuration file data."""
    if not file_data:
        return default
    try:
        return dpath.get(file_data, path, separator=".")
    except (KeyError, ValueError):
        return default


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def _as_projects(value: Any) -> Tuple[str, ...]:
    if value is None:
        return DEFAULT_TICKET_PROJECTS
    if isinstance(value, str):
        value = value.split(",")
    return tuple(str(project).strip() for project in value if str(project).strip())


@dataclass
class TaggerConfig:
    """Configuration parsed from environment variables and the config file."""

    remote: str = DEFAULT_REMOTE
    ticket_projects: Tuple[str, ...] = DEFAULT_TICKET_PROJECTS
    dry_run: bool = False
    cleanup: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Dict[str, str], file_data: Optional[Dict[str, Any]] = None) -> "TaggerConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)
            file_data: Parsed .create-tag.yaml content, if the file exists

        Returns:
            TaggerConfig instance
        """
        file_data = file_data or {}

        remote = env.get("CREATE_TAG_REMOTE")
        if remote is None:
            remote = _file_value(file_data, "remote", DEFAULT_REMOTE)

        projects = env.get("CREATE_TAG_TICKET_PROJECTS")
        if projects is None:
            projects = _file_value(file_data, "tags.ticket_projects")

        cleanup = env.get("CREATE_TAG_CLEANUP")
        if cleanup is None:
            cleanup = _file_value(file_data, "cleanup.enabled")

        config = cls(
            remote=str(remote).strip(),
            ticket_projects=_as_projects(projects),
            dry_run=_as_bool(env.get("CREATE_TAG_DRY_RUN"), False),
            cleanup=_as_bool(cleanup, True),
            log_level=env.get("CREATE_TAG_LOG_LEVEL", "WARNING").strip().upper(),
        )
        logger.debug("Loaded configuration: %s", config)
        return config

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not self.remote:
            errors.append("CREATE_TAG_REMOTE cannot be empty")

        if not self.ticket_projects:
            errors.append("At least one ticket project code is required")

        for project in self.ticket_projects:
            if not re.fullmatch(PROJECT_CODE_PATTERN, project):
                errors.append(f"Invalid ticket project code '{project}'. Must be uppercase letters (e.g., BACK)")

        if self.log_level not in LOG_LEVELS:
            errors.append(
                f"Invalid CREATE_TAG_LOG_LEVEL '{self.log_level}'. "
                f"Valid options are: {', '.join(LOG_LEVELS)}"
            )

        return errors

    def to_policy(self) -> TagPolicy:
        """Build the immutable tag policy from this configuration."""
        return TagPolicy(ticket_projects=self.ticket_projects)
