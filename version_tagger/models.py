"""Data models for planning and execution separation."""

from dataclasses import dataclass, field
from typing import List
from enum import Enum

from .config import VERSION_FILE_NAME


class RunMode(Enum):
    """What the tagging run should do."""
    CHECK = "check_version"
    TAG = "tag"


class CheckStatus(Enum):
    """Outcome of checking a single Version file."""
    SKIPPED_DATE = "skipped_date"          # Date versions are not pre-validated
    NOT_TAGGED = "not_tagged"
    ALREADY_TAGGED = "already_tagged"      # Tolerated on the default branch
    MUST_BUMP = "must_bump"                # Fatal on any other branch


class TagKind(Enum):
    """Naming scheme used for a tag."""
    RELEASE = "release"
    DATE_RELEASE = "date_release"
    PRERELEASE = "prerelease"


class TagAction(Enum):
    """What the executor should do with a planned tag."""
    CREATE = "create"
    SKIP = "skip"


@dataclass(frozen=True)
class VersionDeclaration:
    """A Version file and the directory it was found in."""
    location: str  # Relative to the tree root, "" for the root itself
    content: str

    @property
    def path(self) -> str:
        """Path of the Version file relative to the tree root."""
        if not self.location:
            return VERSION_FILE_NAME
        return f"{self.location}/{VERSION_FILE_NAME}"


@dataclass(frozen=True)
class BranchContext:
    """The branch being built and the remote's default branch."""
    current_branch: str
    default_branch: str

    @property
    def is_default(self) -> bool:
        return self.current_branch == self.default_branch


@dataclass
class CheckResult:
    """Result of checking one Version file against the remote."""
    version_file: str
    tag: str
    status: CheckStatus
    message: str

    @property
    def ok(self) -> bool:
        return self.status != CheckStatus.MUST_BUMP


@dataclass
class TagPlan:
    """A tag decision for one Version file."""
    version_file: str
    base_version: str
    tag: str
    kind: TagKind
    action: TagAction


@dataclass
class ExecutionResult:
    """Summary of a tagging run."""
    created_tags: List[str] = field(default_factory=list)
    skipped_tags: List[str] = field(default_factory=list)
    checked: List[CheckResult] = field(default_factory=list)
    dry_run: bool = False
