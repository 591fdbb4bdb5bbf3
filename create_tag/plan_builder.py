"""Plan builder - turns a proposed tag into a validated execution plan."""

import logging
from typing import Optional

from .config import DEFAULT_COMMIT, TagPolicy
from .exceptions import ConflictError, NotFoundError
from .io_layer import IOLayer
from .message_generation import generate_tag_message
from .models import BranchContext, TagPlan, TagProposal
from .tag_classification import validate_tag
from .utils import print_step, print_success

logger = logging.getLogger(__name__)


def read_branch_context(repository: IOLayer, policy: TagPolicy = TagPolicy()) -> BranchContext:
    """Read the current branch and the local branches."""
    name = repository.current_branch()
    return BranchContext(
        name=name,
        is_main_line=policy.is_main_line(name),
        local_branches=repository.local_branches(),
    )


def check_tag_exists(tag: str, repository: IOLayer, check_remote: bool) -> None:
    """
    Fail if the tag exists locally or on the remote.

    Raises:
        ConflictError: If the tag already exists in either inventory
    """
    if tag in repository.local_tags():
        raise ConflictError(f"The tag {tag} already exists locally", tag=tag, location="local")

    if check_remote and tag in repository.remote_tags():
        raise ConflictError(f"The tag {tag} already exists on the remote", tag=tag, location="remote")


def prepare_plan(
    proposal: TagProposal,
    repository: IOLayer,
    policy: TagPolicy = TagPolicy(),
    context: Optional[BranchContext] = None,
    cleanup: bool = True,
) -> TagPlan:
    """
    Prepare a complete execution plan.

    This function reads current state and validates the proposal, but doesn't
    make any modifications.

    Args:
        proposal: Tag name and target commit
        repository: Repository collaborator
        policy: Tag policy
        context: Branch context read at startup (read again if omitted)
        cleanup: Whether temporary tags are cleaned up after creation

    Raises:
        ValidationError: If the tag grammar is not accepted on the branch
        ConflictError: If the tag already exists
        NotFoundError: If the commit does not resolve
    """
    if context is None:
        context = read_branch_context(repository, policy)

    print_step(f"Validating tag {proposal.tag}...", icon="👮🏻‍♂️")
    classified = validate_tag(proposal.tag, context, policy)
    print_success(f"Valid {classified.kind.value} tag: {proposal.tag}")

    remote = repository.remote if repository.has_remote() else None
    if remote is None:
        logger.info("Remote %s is not configured, skipping remote checks", repository.remote)

    check_tag_exists(proposal.tag, repository, check_remote=remote is not None)

    commit = proposal.commit or DEFAULT_COMMIT
    if not repository.commit_exists(commit):
        raise NotFoundError(f"Commit '{commit}' does not exist")

    push_branch = False
    if remote is not None and context.name:
        push_branch = not repository.remote_branch_exists(context.name)

    return TagPlan(
        proposal=TagProposal(tag=proposal.tag, commit=commit),
        message=generate_tag_message(proposal.tag),
        context=context,
        remote=remote,
        push_branch=push_branch,
        cleanup=cleanup and context.is_main_line,
        dry_run=repository.dry_run,
    )
