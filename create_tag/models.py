"""Data models for planning and execution separation."""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum

from .config import DEFAULT_COMMIT


class CleanupAction(Enum):
    """Outcome of the cleanup policy for a single temporary tag."""
    KEEP = "keep"
    DELETE = "delete"


@dataclass(frozen=True)
class BranchContext:
    """Current branch and the local branches used as the liveness oracle."""
    name: str
    is_main_line: bool
    local_branches: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class VersionCandidates:
    """Next semantic versions proposed from the latest semantic tag."""
    patch: str
    minor: str
    major: str


@dataclass
class TagProposal:
    """A tag name waiting to be validated and created."""
    tag: str
    commit: str = DEFAULT_COMMIT


@dataclass(frozen=True)
class CleanupDecision:
    """Keep or delete decision for one cleanup candidate."""
    tag: str
    action: CleanupAction
    reason: str

    @property
    def should_delete(self) -> bool:
        return self.action == CleanupAction.DELETE


@dataclass
class CleanupResult:
    """Result of executing cleanup decisions against one inventory."""
    location: str  # 'local' or 'remote'
    deleted: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    kept: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)  # dry run


@dataclass(frozen=True)
class InventorySummary:
    """Counts shown after cleanup."""
    total: int
    temporary: int

    @property
    def clean(self) -> int:
        return self.total - self.temporary


@dataclass
class TagPlan:
    """Complete plan for creating one tag."""
    proposal: TagProposal
    message: str
    context: BranchContext
    remote: Optional[str] = None  # None when no remote is configured
    push_branch: bool = False
    cleanup: bool = False
    dry_run: bool = False

    @property
    def tag(self) -> str:
        return self.proposal.tag


@dataclass
class ExecutionResult:
    """Result of executing a tag plan."""
    success: bool
    tag_created: bool = False
    tag_pushed: bool = False
    branch_pushed: bool = False
    errors: List[str] = field(default_factory=list)
    cleanup_results: List[CleanupResult] = field(default_factory=list)
    dry_run: bool = False
