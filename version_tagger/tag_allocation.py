"""
Tag Allocation Module

Pure functions deciding which tag to check or create for a base version.
Remote state is only seen through the `exists` predicate passed in, so
this module contains no side effects and can be tested without Git.
"""

import re
from typing import Callable, Optional

from .config import MAX_PRE_VERSION_COUNT
from .exceptions import SuffixExhaustedError
from .models import BranchContext, CheckResult, CheckStatus, TagAction, TagKind, TagPlan

TagExists = Callable[[str], bool]

_DISALLOWED_BRANCH_CHARS = re.compile(r"[^0-9A-Za-z]")


def sanitize_branch_name(branch: str) -> str:
    """
    Make a branch name usable as a prerelease identifier.

    Every character outside [0-9A-Za-z] becomes a hyphen. Runs of hyphens
    are kept as they are so names match tags created by earlier releases.

    Example:
        'feature/DEV-123-new-login' -> 'feature-DEV-123-new-login'
    """
    return _DISALLOWED_BRANCH_CHARS.sub("-", branch)


def first_free_suffix(base: str, exists: TagExists, max_attempts: int = MAX_PRE_VERSION_COUNT) -> Optional[int]:
    """
    Find the lowest counter whose tag "{base}.{counter}" is not taken.

    Counters are tried in ascending order from 1 while below max_attempts,
    and the first free one wins.

    Args:
        base: Tag name the counter is appended to
        exists: Predicate telling whether a tag already exists
        max_attempts: Exclusive upper bound of the counter

    Returns:
        The counter, or None when every candidate is taken
    """
    for counter in range(1, max_attempts):
        if not exists(f"{base}.{counter}"):
            return counter
    return None


def check_version(
    version_file: str,
    base_version: str,
    is_date: bool,
    branch_context: BranchContext,
    exists: TagExists,
) -> CheckResult:
    """
    Check whether a Version file still needs a version bump.

    Date versions always pass without querying the remote. An existing tag is
    tolerated on the default branch and fatal on any other branch.

    Args:
        version_file: Path of the Version file, used in messages
        base_version: Resolved base tag name
        is_date: True when the Version file contains the date sentinel
        branch_context: Current and default branch
        exists: Predicate telling whether a tag exists on the remote

    Returns:
        CheckResult describing the outcome
    """
    if is_date:
        return CheckResult(
            version_file=version_file,
            tag=base_version,
            status=CheckStatus.SKIPPED_DATE,
            message=f"Version file '{version_file}' is set to 'date'. Tag will be based on the current date.",
        )

    if not exists(base_version):
        return CheckResult(
            version_file=version_file,
            tag=base_version,
            status=CheckStatus.NOT_TAGGED,
            message=f"Version {base_version} is not yet tagged.",
        )

    if branch_context.is_default:
        return CheckResult(
            version_file=version_file,
            tag=base_version,
            status=CheckStatus.ALREADY_TAGGED,
            message=f"Version {base_version} already exists as a tag.",
        )

    return CheckResult(
        version_file=version_file,
        tag=base_version,
        status=CheckStatus.MUST_BUMP,
        message=(
            f"Version {base_version} already exists as a tag. "
            f"Version file '{version_file}' must be updated before merging."
        ),
    )


def plan_release_tag(
    version_file: str,
    base_version: str,
    is_date: bool,
    exists: TagExists,
    max_attempts: int = MAX_PRE_VERSION_COUNT,
) -> TagPlan:
    """
    Decide which release tag to create on the default branch.

    Semantic versions are created once and skipped afterwards. Date versions
    get a ".N" counter when the day's base tag is already taken.

    Raises:
        SuffixExhaustedError: If every date counter below max_attempts is taken
    """
    if not exists(base_version):
        return TagPlan(
            version_file=version_file,
            base_version=base_version,
            tag=base_version,
            kind=TagKind.DATE_RELEASE if is_date else TagKind.RELEASE,
            action=TagAction.CREATE,
        )

    if not is_date:
        return TagPlan(
            version_file=version_file,
            base_version=base_version,
            tag=base_version,
            kind=TagKind.RELEASE,
            action=TagAction.SKIP,
        )

    counter = first_free_suffix(base_version, exists, max_attempts)
    if counter is None:
        raise SuffixExhaustedError(
            f"Could not find an available date version for {base_version} "
            f"after {max_attempts} attempts (Version file '{version_file}').",
            base_version=base_version,
            max_attempts=max_attempts,
        )

    return TagPlan(
        version_file=version_file,
        base_version=base_version,
        tag=f"{base_version}.{counter}",
        kind=TagKind.DATE_RELEASE,
        action=TagAction.CREATE,
    )


def plan_prerelease_tag(
    version_file: str,
    base_version: str,
    current_branch: str,
    exists: TagExists,
    max_attempts: int = MAX_PRE_VERSION_COUNT,
) -> TagPlan:
    """
    Decide which prerelease tag to create on a non-default branch.

    Candidates are "{base}-{branch}.{N}" with the sanitized branch name and
    N counting up from 1.

    Raises:
        SuffixExhaustedError: If every counter below max_attempts is taken
    """
    prerelease_base = f"{base_version}-{sanitize_branch_name(current_branch)}"

    counter = first_free_suffix(prerelease_base, exists, max_attempts)
    if counter is None:
        raise SuffixExhaustedError(
            f"Could not find an available prerelease version for {base_version} "
            f"after {max_attempts} attempts (Version file '{version_file}').",
            base_version=base_version,
            max_attempts=max_attempts,
        )

    return TagPlan(
        version_file=version_file,
        base_version=base_version,
        tag=f"{prerelease_base}.{counter}",
        kind=TagKind.PRERELEASE,
        action=TagAction.CREATE,
    )
