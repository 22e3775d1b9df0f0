"""
I/O Layer for Version Tagger

This module contains all I/O operations (file system, Git remote)
separated from business logic. This is the "imperative shell" that
handles all side effects.

The dry-run variant is chosen once per run: it answers every read exactly
like the live layer and only logs the operations that would change the
remote.
"""

import logging
import os
import re
from pathlib import Path
from typing import List, Optional
from git import Repo
from git.exc import GitCommandError

from .config import IGNORED_FOLDERS, VERSION_FILE_NAME
from .exceptions import GitOperationError, VersionFileError
from .models import VersionDeclaration
from .utils import append_github_output

logger = logging.getLogger(__name__)

# `git ls-remote --exit-code` exits with 2 when no matching ref was found
LS_REMOTE_NO_MATCH = 2

_HEAD_BRANCH_RE = re.compile(r"HEAD branch:\s*(\S+)")


class IOLayer:
    """Handles all I/O operations for the application."""

    dry_run = False

    def __init__(self, repo: Repo, remote_name: str = "origin", github_output: Optional[str] = None):
        """Initialize the I/O layer.

        Args:
            repo: Git repository object
            remote_name: Remote the tags are checked against and pushed to
            github_output: Optional GitHub Actions output file for created tags
        """
        self.repo = repo
        self.remote_name = remote_name
        self.github_output = github_output

    # -----------------------------------------------------------------------------
    # File System Operations
    # -----------------------------------------------------------------------------

    def read_file(self, path: str) -> Optional[str]:
        """Read a text file.

        Args:
            path: Path to the file

        Returns:
            File content as string or None if file doesn't exist
        """
        file_path = Path(path)
        if not file_path.exists():
            return None

        with file_path.open(encoding="utf-8") as f:
            return f.read()

    def discover_version_files(self, root: str = ".") -> List[VersionDeclaration]:
        """Find all Version files below a directory.

        Args:
            root: Directory to search, locations are relative to it

        Returns:
            Declarations sorted by Version file path
        """
        declarations = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in IGNORED_FOLDERS)
            if VERSION_FILE_NAME not in filenames:
                continue

            location = Path(os.path.relpath(dirpath, root)).as_posix()
            if location == ".":
                location = ""
            declaration_path = f"{location}/{VERSION_FILE_NAME}" if location else VERSION_FILE_NAME
            try:
                content = self.read_file(os.path.join(dirpath, VERSION_FILE_NAME))
            except (OSError, UnicodeDecodeError) as e:
                raise VersionFileError(
                    f"Failed to read Version file '{declaration_path}': {e}", version_file=declaration_path
                ) from e
            declarations.append(VersionDeclaration(location=location, content=content or ""))

        return sorted(declarations, key=lambda d: d.path)

    # -----------------------------------------------------------------------------
    # Git Read Operations
    # -----------------------------------------------------------------------------

    def get_current_branch(self) -> str:
        """Get the name of the checked out branch."""
        try:
            branch = self.repo.git.rev_parse("--abbrev-ref", "HEAD").strip()
        except GitCommandError as e:
            raise GitOperationError(f"Failed to determine current branch: {e}") from e

        if branch == "HEAD":
            logger.warning("Repository is in detached HEAD state")
        return branch

    def get_default_branch(self) -> str:
        """Get the default branch advertised by the remote."""
        try:
            output = self.repo.git.remote("show", self.remote_name)
        except GitCommandError as e:
            raise GitOperationError(f"Failed to query remote {self.remote_name}: {e}") from e

        match = _HEAD_BRANCH_RE.search(output)
        if not match or match.group(1) == "(unknown)":
            raise GitOperationError(f"Could not determine default branch of remote {self.remote_name}")
        return match.group(1)

    def fetch_tags(self) -> None:
        """Fetch all tags from the remote."""
        logger.info(f"Fetching all tags from {self.remote_name}...")
        try:
            self.repo.git.fetch("--tags", self.remote_name)
        except GitCommandError as e:
            raise GitOperationError(f"Failed to fetch tags from {self.remote_name}: {e}") from e

    def tag_exists(self, tag: str) -> bool:
        """Check if a tag exists on the remote.

        Every call asks the remote, nothing is cached.
        """
        try:
            self.repo.git.ls_remote("--exit-code", "--tags", self.remote_name, f"refs/tags/{tag}")
        except GitCommandError as e:
            if e.status == LS_REMOTE_NO_MATCH:
                return False
            raise GitOperationError(f"Failed to check tag {tag} on {self.remote_name}: {e}") from e
        return True

    # -----------------------------------------------------------------------------
    # Git Tag Operations
    # -----------------------------------------------------------------------------

    def create_tag(self, tag: str) -> bool:
        """Create a lightweight tag at HEAD.

        Returns:
            True if created, False if dry run
        """
        try:
            self.repo.create_tag(tag)
        except GitCommandError as e:
            raise GitOperationError(f"Failed to create tag {tag}: {e}") from e
        return True

    def push_tag(self, tag: str) -> bool:
        """Push a tag to the remote.

        Returns:
            True if pushed, False if dry run
        """
        try:
            self.repo.git.push(self.remote_name, tag)
        except GitCommandError as e:
            raise GitOperationError(f"Failed to push tag {tag} to {self.remote_name}: {e}") from e
        return True

    def publish_tag(self, tag: str) -> bool:
        """Expose a created tag to later workflow steps.

        Returns:
            True if written, False if there is no output file or dry run
        """
        if not self.github_output:
            return False
        append_github_output(self.github_output, "tag", tag)
        return True


class DryRunIOLayer(IOLayer):
    """I/O layer that logs tag mutations instead of performing them."""

    dry_run = True

    def create_tag(self, tag: str) -> bool:
        logger.warning(f"[DRY RUN] Would create tag: {tag}")
        return False

    def push_tag(self, tag: str) -> bool:
        logger.warning(f"[DRY RUN] Would push tag {tag} to {self.remote_name}")
        return False

    def publish_tag(self, tag: str) -> bool:
        if self.github_output:
            logger.info(f"[DRY RUN] Would write tag={tag} to {self.github_output}")
        return False


def create_io_layer(
    repo: Repo,
    remote_name: str = "origin",
    dry_run: bool = False,
    github_output: Optional[str] = None,
) -> IOLayer:
    """Create the live or dry-run I/O layer."""
    layer_class = DryRunIOLayer if dry_run else IOLayer
    return layer_class(repo, remote_name, github_output)
