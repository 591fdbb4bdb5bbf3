#!/usr/bin/env python3

"""
Git Tag Creation Command

Simplified CLI using the Functional Core, Imperative Shell pattern.
All tag policy is in pure functions, all git access is in the I/O layer.

Usage:
    create-tag                            # Interactive mode
    create-tag <tag-name>                 # Create tag from current commit
    create-tag <tag-name> <commit-hash>   # Create tag from specific commit
"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .cleanup_planner import summarize_inventory
from .config import CONFIG_FILE_NAME, DEFAULT_COMMIT, TagPolicy
from .environment import TaggerConfig
from .exceptions import (
    ConcurrentModificationError,
    TaggerError,
    UsageError,
    ValidationError,
)
from .git_operations import open_repository
from .io_layer import IOLayer
from .message_generation import generate_good_practices, generate_usage
from .models import TagProposal
from .plan_builder import prepare_plan, read_branch_context
from .plan_executor import execute_cleanup, execute_plan
from .session import InteractiveSession
from .utils import (
    console,
    print_error,
    print_header,
    print_info,
    print_plain,
    print_step,
    print_success,
    print_tip,
    print_warning,
    setup_logging,
)

logger = logging.getLogger(__name__)

OPTION_PREFIX = "--"


def parse_arguments(argv: List[str]) -> Optional[TagProposal]:
    """
    Turn positional arguments into a proposal.

    Returns:
        None for interactive mode, a TagProposal otherwise

    Raises:
        UsageError: For any option or too many arguments
    """
    for arg in argv:
        if arg.startswith(OPTION_PREFIX):
            raise UsageError(f"Unknown option: {arg}")

    if len(argv) > 2:
        raise UsageError(f"Too many arguments: {' '.join(argv[2:])}")

    if not argv:
        return None

    return TagProposal(tag=argv[0], commit=argv[1] if len(argv) > 1 else DEFAULT_COMMIT)


def print_inventory(repository: IOLayer, policy: TagPolicy) -> None:
    """Print the tag inventory counts."""
    print_step("Analyzing tag inventory...", icon="📊")
    summary = summarize_inventory(repository.local_tags(), policy)
    print_plain(f"   Total tags: {summary.total}")
    print_plain(f"   Temporary tags: {summary.temporary}")
    print_plain(f"   Clean tags: {summary.clean}")
    if summary.temporary == 0:
        print_success("The repository is perfectly cleaned up!")


def run(argv: List[str], env) -> int:
    """Run the command and return the exit code."""
    print_header("🏷️  Git tag creation")
    print_header("==========================================")

    try:
        proposal = parse_arguments(argv)
    except UsageError as e:
        print_error(str(e))
        print_info("This command does not accept any options.")
        print_info("Usages:")
        for line in generate_usage():
            print_plain(line)
        return 1

    repo = open_repository(".")
    config_path = Path(repo.working_tree_dir or ".") / CONFIG_FILE_NAME
    file_data = IOLayer(repo).read_yaml(str(config_path))

    config = TaggerConfig.from_env(env, file_data)
    errors = config.validate()
    if errors:
        for error in errors:
            print_error(f"Error: {error}")
        return 1

    setup_logging(getattr(logging, config.log_level))
    if config.dry_run:
        print_info("Dry run: no tag will be created, pushed or deleted")

    policy = config.to_policy()
    repository = IOLayer(repo, remote=config.remote, dry_run=config.dry_run)
    context = read_branch_context(repository, policy)

    if proposal is None:
        outcome = InteractiveSession(repository, policy).run()
        if outcome.cancelled:
            return 0
        proposal = TagProposal(tag=outcome.tag)

    plan = prepare_plan(proposal, repository, policy, context=context, cleanup=config.cleanup)
    result = execute_plan(plan, repository)
    if not result.success:
        return 1

    if plan.cleanup:
        result.cleanup_results = execute_cleanup(plan, repository, policy)
        for cleanup_result in result.cleanup_results:
            if cleanup_result.failed:
                logger.warning("%d %s tags could not be deleted", len(cleanup_result.failed), cleanup_result.location)
        print_inventory(repository, policy)

    console.print()
    if not result.tag_created:
        print_info(f"[DRY RUN] Tag {plan.tag} was not created")
        return 0

    console.print(f"🎉  Tag {plan.tag} created successfully!", style="yellow", markup=False)
    console.print()
    print_tip("Good practices:")
    for line in generate_good_practices():
        print_plain(line)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        exit_code = run(argv, os.environ)
    except ValidationError as e:
        print_error(str(e))
        for hint in e.hints:
            print_plain(hint)
        exit_code = 1
    except ConcurrentModificationError as e:
        print_error(str(e))
        print_plain(f"Initial branch: {e.initial_branch}")
        print_plain(f"Current branch: {e.current_branch}")
        print_warning("You need to rerun the command on the current branch.")
        exit_code = 1
    except TaggerError as e:
        print_error(str(e))
        exit_code = 1
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print_error(f"Unexpected error: {e}")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
