"""Plan executor - runs the check or tagging loop over all Version files."""

import logging
from datetime import date
from typing import List, Optional

from .config import MAX_PRE_VERSION_COUNT
from .exceptions import VersionAlreadyTaggedError
from .io_layer import IOLayer
from .models import (
    BranchContext,
    CheckStatus,
    ExecutionResult,
    TagAction,
    TagPlan,
    VersionDeclaration,
)
from .plan_builder import prepare_check, prepare_tag_plan

logger = logging.getLogger(__name__)


def execute_check(
    declarations: List[VersionDeclaration],
    branch_context: BranchContext,
    io_layer: IOLayer,
    today: Optional[date] = None,
) -> ExecutionResult:
    """
    Check every Version file, stopping at the first one that needs a bump.

    Raises:
        VersionAlreadyTaggedError: If a non-default branch reuses a tagged version
    """
    result = ExecutionResult(dry_run=io_layer.dry_run)

    for declaration in declarations:
        check = prepare_check(declaration, branch_context, io_layer, today)
        result.checked.append(check)

        if not check.ok:
            raise VersionAlreadyTaggedError(check.message, version_file=check.version_file, tag=check.tag)
        if check.status == CheckStatus.ALREADY_TAGGED:
            logger.warning(f"Version {check.tag} already exists as a tag on {io_layer.remote_name}.")
        else:
            logger.info(check.message)

    return result


def execute_tagging(
    declarations: List[VersionDeclaration],
    branch_context: BranchContext,
    io_layer: IOLayer,
    max_attempts: int = MAX_PRE_VERSION_COUNT,
    today: Optional[date] = None,
) -> ExecutionResult:
    """
    Create and push a tag for every Version file.

    Each Version file is planned and executed before the next one is looked
    at, and the first error aborts the run.
    """
    result = ExecutionResult(dry_run=io_layer.dry_run)

    for declaration in declarations:
        plan = prepare_tag_plan(declaration, branch_context, io_layer, max_attempts, today)
        execute_tag_plan(plan, io_layer, result)

    return result


def execute_tag_plan(plan: TagPlan, io_layer: IOLayer, result: ExecutionResult) -> None:
    """Create, push and publish a single planned tag."""
    if plan.action == TagAction.SKIP:
        logger.warning(f"Release tag {plan.tag} already exists. Skipping.")
        result.skipped_tags.append(plan.tag)
        return

    logger.info(f"Creating and pushing {plan.kind.value} tag {plan.tag} for {plan.version_file}...")
    io_layer.create_tag(plan.tag)
    io_layer.push_tag(plan.tag)
    io_layer.publish_tag(plan.tag)

    logger.info(f"Successfully pushed tag {plan.tag}.")
    result.created_tags.append(plan.tag)
