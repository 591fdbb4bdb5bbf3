"""
Interactive Session Module

Menu-driven selection of the tag to create when no tag is given on the
command line.

States: START -> MAIN_MENU | FEATURE_MENU -> CONFIRMED | CANCELLED.
An invalid choice is fatal, the user is not prompted again.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .base_tag_resolver import resolve_base_tag
from .config import TagPolicy
from .exceptions import ConcurrentModificationError, ValidationError
from .io_layer import IOLayer
from .models import BranchContext
from .plan_builder import read_branch_context
from .tag_classification import latest_semantic_tag
from .temporary_tags import format_temporary_tag, last_temporary_tag, next_temporary_suffix
from .utils import console, print_info, print_label, print_option, print_step, print_success, print_tip, print_plain
from .version_calculator import next_versions

logger = logging.getLogger(__name__)

CANCEL_CHOICE = "C"
ACCEPT_CHOICE = "V"


class SessionState(Enum):
    START = "start"
    MAIN_MENU = "main_menu"
    FEATURE_MENU = "feature_menu"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass
class SessionOutcome:
    """Final state of the session and the chosen tag, if any."""
    state: SessionState
    tag: Optional[str] = None

    @property
    def cancelled(self) -> bool:
        return self.state == SessionState.CANCELLED


class InteractiveSession:
    """Drives the menus and returns one chosen tag name."""

    def __init__(
        self,
        repository: IOLayer,
        policy: TagPolicy = TagPolicy(),
        read_input: Optional[Callable[[str], str]] = None,
    ):
        self.repository = repository
        self.policy = policy
        self.read_input = read_input or console.input
        self.state = SessionState.START

    def run(self) -> SessionOutcome:
        """
        Run the session.

        Returns:
            SessionOutcome in CONFIRMED or CANCELLED state

        Raises:
            ValidationError: On a detached HEAD, an invalid menu choice or an empty manual tag
            ConcurrentModificationError: If the branch changed during the prompt
        """
        console.print()
        context = read_branch_context(self.repository, self.policy)
        if not context.name:
            raise ValidationError(
                "Not on a branch (detached HEAD), tag creation cancelled",
                hints=["Check out a branch, or pass the tag name and commit as arguments"],
            )
        latest_tag = latest_semantic_tag(self.repository.local_tags(), self.policy)
        print_label("Current branch", context.name)

        if context.is_main_line:
            self.state = SessionState.MAIN_MENU
            selected = self._main_menu(latest_tag)
        else:
            self.state = SessionState.FEATURE_MENU
            selected = self._feature_menu(context, latest_tag)

        if selected is None:
            self.state = SessionState.CANCELLED
            console.print("🚫  Tag creation cancelled.", style="yellow")
            return SessionOutcome(self.state)

        self._ensure_branch_unchanged(context)
        self.state = SessionState.CONFIRMED
        return SessionOutcome(self.state, selected)

    def _ask(self) -> str:
        return self.read_input(": ").strip().upper()

    def _main_menu(self, latest_tag: Optional[str]) -> Optional[str]:
        if latest_tag is None:
            console.print("No tag found", style="yellow")
            print_step("Select an option (1-3) or C to cancel:")
            print_option("1", "Development", self.policy.default_development_tag)
            print_option("2", "Release", self.policy.default_release_tag)
            print_option("3", "Enter tag manually")
            choices = {
                "1": (self.policy.default_development_tag, "development"),
                "2": (self.policy.default_release_tag, "release"),
            }
            manual_choice = "3"
        else:
            candidates = next_versions(latest_tag)
            print_label("Latest tag", latest_tag)
            print_step("Select an option (1-4) or C to cancel:")
            print_option("1", "Patch - Bug fixes", candidates.patch)
            print_option("2", "Minor - New features", candidates.minor)
            print_option("3", "Major - Breaking changes", candidates.major)
            print_option("4", "Enter tag manually")
            choices = {
                "1": (candidates.patch, "patch"),
                "2": (candidates.minor, "minor"),
                "3": (candidates.major, "major"),
            }
            manual_choice = "4"

        choice = self._ask()
        if choice == CANCEL_CHOICE:
            return None
        if choice in choices:
            tag, label = choices[choice]
            print_success(f"Selected tag: {tag} ({label})")
            return tag
        if choice == manual_choice:
            return self._manual_entry()

        raise ValidationError("Invalid option, tag creation cancelled")

    def _manual_entry(self) -> str:
        print_info("Enter tag:")
        tag = self.read_input("").strip()
        if not tag:
            raise ValidationError("Empty tag, tag creation cancelled")
        print_success(f"Selected tag: {tag}")
        return tag

    def _feature_menu(self, context: BranchContext, latest_tag: Optional[str]) -> Optional[str]:
        local_tags = self.repository.local_tags()
        base_tag = resolve_base_tag(context.name, self.repository, self.policy)
        suffix = next_temporary_suffix(base_tag, context.name, local_tags)
        last_tag = last_temporary_tag(base_tag, context.name, local_tags)
        proposal = format_temporary_tag(base_tag, context.name, suffix)

        print_label("Latest tag", latest_tag or "none")
        print_label("Latest base tag for this branch", base_tag)
        if last_tag:
            print_label("Latest temporary tag for this branch", last_tag)

        console.print()
        print_tip(
            "On a feature branch, only temporary tags are allowed. "
            "Final tags should be created on the main branch after merge."
        )
        print_step("Enter V to create the following tag or C to cancel:")
        print_plain(f"   Temporary - Feature development {proposal}")

        choice = self._ask()
        if choice == CANCEL_CHOICE:
            return None
        if choice == ACCEPT_CHOICE:
            print_success(f"Selected tag: {proposal}")
            return proposal

        raise ValidationError("Invalid option, tag creation cancelled")

    def _ensure_branch_unchanged(self, initial: BranchContext) -> None:
        current = read_branch_context(self.repository, self.policy)
        if current.name != initial.name or current.is_main_line != initial.is_main_line:
            logger.debug("Branch changed from %s to %s during the session", initial.name, current.name)
            raise ConcurrentModificationError(
                "The branch changed while the command was running!",
                initial_branch=f"{initial.name} (main: {initial.is_main_line})",
                current_branch=f"{current.name} (main: {current.is_main_line})",
            )
