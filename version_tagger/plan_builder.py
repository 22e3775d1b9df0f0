"""Plan builder - decides what to do with each Version file."""

import logging
from datetime import date
from typing import Optional

from .config import MAX_PRE_VERSION_COUNT
from .io_layer import IOLayer
from .models import BranchContext, CheckResult, TagPlan, VersionDeclaration
from .tag_allocation import TagExists, check_version, plan_prerelease_tag, plan_release_tag
from .version_resolution import is_date_version, resolve_base_version

logger = logging.getLogger(__name__)


def _remote_tag_oracle(io_layer: IOLayer) -> TagExists:
    """Wrap the remote existence check so every lookup is logged."""

    def exists(tag: str) -> bool:
        logger.info(f"  Trying tag: {tag}")
        found = io_layer.tag_exists(tag)
        if found:
            logger.warning(f"  Tag {tag} already exists.")
        return found

    return exists


def prepare_check(
    declaration: VersionDeclaration,
    branch_context: BranchContext,
    io_layer: IOLayer,
    today: Optional[date] = None,
) -> CheckResult:
    """
    Check a single Version file against the remote.

    Reads remote state but doesn't make any modifications.
    """
    is_date = is_date_version(declaration)
    base_version = resolve_base_version(declaration, today)

    if not is_date:
        logger.info(f"Checking version {base_version} from file {declaration.path}...")

    return check_version(
        version_file=declaration.path,
        base_version=base_version,
        is_date=is_date,
        branch_context=branch_context,
        exists=_remote_tag_oracle(io_layer),
    )


def prepare_tag_plan(
    declaration: VersionDeclaration,
    branch_context: BranchContext,
    io_layer: IOLayer,
    max_attempts: int = MAX_PRE_VERSION_COUNT,
    today: Optional[date] = None,
) -> TagPlan:
    """
    Decide which tag a single Version file should produce.

    The default branch gets release tags, every other branch gets
    prerelease tags. Reads remote state but doesn't make any modifications.

    Args:
        declaration: The Version file
        branch_context: Current and default branch
        io_layer: IO layer answering remote tag lookups
        max_attempts: Exclusive upper bound of the counter search
        today: Date used for date versions, defaults to the local system date

    Raises:
        SuffixExhaustedError: If no free tag counter is left
    """
    is_date = is_date_version(declaration)
    base_version = resolve_base_version(declaration, today)
    exists = _remote_tag_oracle(io_layer)

    if branch_context.is_default:
        if is_date:
            logger.info(f"Finding release tag for date version {base_version}...")
        return plan_release_tag(
            version_file=declaration.path,
            base_version=base_version,
            is_date=is_date,
            exists=exists,
            max_attempts=max_attempts,
        )

    logger.info(
        f"Finding next prerelease version for {base_version} on branch {branch_context.current_branch}..."
    )
    return plan_prerelease_tag(
        version_file=declaration.path,
        base_version=base_version,
        current_branch=branch_context.current_branch,
        exists=exists,
        max_attempts=max_attempts,
    )
