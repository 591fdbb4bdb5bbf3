"""Plan executor - executes a prepared tag plan and the cleanup that follows it."""

import logging
from typing import List

from .cleanup_planner import plan_cleanup, tags_to_delete
from .config import TagPolicy
from .exceptions import ExternalCommandError
from .io_layer import IOLayer
from .message_generation import generate_cleanup_preview
from .models import CleanupDecision, CleanupResult, ExecutionResult, TagPlan
from .tag_classification import is_cleanup_candidate
from .utils import console, print_info, print_plain, print_step, print_success, print_warning

logger = logging.getLogger(__name__)


def execute_plan(plan: TagPlan, repository: IOLayer) -> ExecutionResult:
    """
    Execute a prepared plan.

    Creates the tag locally, then pushes the branch (when missing on the remote)
    and the tag. A failed creation aborts before anything is pushed; a failed
    push is reported and the local tag is kept.

    Raises:
        ExternalCommandError: If the local tag cannot be created
    """
    result = ExecutionResult(success=True, dry_run=plan.dry_run)

    print_step(f"Creating tag {plan.tag}...", icon="🏷")
    result.tag_created = repository.create_tag(plan.tag, plan.proposal.commit, plan.message)
    if result.tag_created:
        print_success("Tag created locally")

    if plan.remote is None:
        print_info(f"No '{repository.remote}' remote configured, tag not pushed")
        return result

    if plan.push_branch:
        branch = plan.context.name
        print_info(f"Branch {branch} does not exist on remote, pushing it first...")
        try:
            result.branch_pushed = repository.push_branch(branch, plan.remote)
        except ExternalCommandError as e:
            logger.warning("Failed to push branch %s: %s", branch, e)
            _push_failed(result, f"Failed to push branch {branch} to the remote repository")
            return result
        if result.branch_pushed:
            print_success(f"Branch {branch} pushed to the remote repository")

    try:
        result.tag_pushed = repository.push_tag(plan.tag, plan.remote)
    except ExternalCommandError as e:
        logger.warning("Failed to push tag %s: %s", plan.tag, e)
        _push_failed(result, "Failed to push tag to the remote repository")
        return result

    if result.tag_pushed:
        print_success("Tag pushed to the remote repository")
    return result


def _push_failed(result: ExecutionResult, message: str) -> None:
    print_warning(message)
    print_warning("The tag exists only in the local repository")
    result.success = False
    result.errors.append(message)


def execute_cleanup(
    plan: TagPlan,
    repository: IOLayer,
    policy: TagPolicy = TagPolicy(),
) -> List[CleanupResult]:
    """
    Delete stale temporary tags from the local and the remote inventory.

    Both passes use the local branches as the liveness oracle. Failed
    deletions are reported per tag and never abort the batch.
    """
    print_step("Cleaning up temporary tags...", icon="🧹")

    local_tags = repository.local_tags()
    candidates = [tag for tag in local_tags if is_cleanup_candidate(tag, policy)]
    results = []

    if not candidates:
        print_success("No temporary tags to clean up")
    else:
        console.print(f"{len(candidates)} temporary tags detected", style="yellow")
        for line in generate_cleanup_preview(candidates):
            print_plain(line)

        active_branches = repository.local_branches()
        console.print()
        console.print("Deleting temporary tags on the local repository...", style="yellow")
        decisions = plan_cleanup(local_tags, active_branches, policy)
        local_result = _delete_tags(decisions, repository.delete_local_tag, "local")
        results.append(local_result)
        _report_deleted(local_result, "tags", "the local repository")

    if plan.remote is None:
        return results

    console.print()
    console.print("Deleting temporary tags on the remote repository...", style="yellow")
    try:
        remote_tags = repository.remote_tags(plan.remote)
    except ExternalCommandError as e:
        print_warning(f"Failed to list remote tags: {e}")
        return results

    decisions = plan_cleanup(remote_tags, repository.local_branches(), policy)
    if not decisions:
        print_success("No temporary tags to clean up on the remote repository")
        return results

    remote_result = _delete_tags(
        decisions, lambda tag: repository.delete_remote_tag(tag, plan.remote), "remote"
    )
    results.append(remote_result)
    _report_deleted(remote_result, "temporary tags", "the remote repository")
    return results


def _delete_tags(decisions: List[CleanupDecision], delete, location: str) -> CleanupResult:
    """Apply delete decisions one by one, collecting failures."""
    result = CleanupResult(location=location)
    to_delete = set(tags_to_delete(decisions))

    for decision in decisions:
        if decision.tag not in to_delete:
            logger.debug("Keeping %s tag %s: %s", location, decision.tag, decision.reason)
            result.kept.append(decision.tag)
            continue

        logger.info("Deleting %s tag %s: %s", location, decision.tag, decision.reason)
        try:
            deleted = delete(decision.tag)
        except ExternalCommandError as e:
            logger.warning("Failed to delete %s tag %s: %s", location, decision.tag, e)
            print_warning(f"Failed to delete tag {decision.tag}")
            result.failed.append(decision.tag)
            continue
        if deleted:
            result.deleted.append(decision.tag)
        else:
            result.skipped.append(decision.tag)

    return result


def _report_deleted(result: CleanupResult, noun: str, where: str) -> None:
    if result.skipped:
        print_info(f"[DRY RUN] Would delete {len(result.skipped)} {noun} from {where}")
    else:
        print_success(f"{len(result.deleted)} {noun} deleted from {where}")
