"""
Utility Functions Module for Version Tagger

This module provides helper functions used throughout the application.

Functions:
    setup_logging: Configures application logging
    append_github_output: Appends a key=value line to a GitHub Actions output file
    print_run_summary: Displays the tags created, skipped and checked by a run
"""

import logging
from pathlib import Path

from .models import ExecutionResult

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def append_github_output(path: str, key: str, value: str) -> None:
    """Append an output value for downstream workflow steps."""
    with Path(path).open("a", encoding="utf-8") as f:
        f.write(f"{key}={value}\n")


def print_run_summary(result: ExecutionResult) -> None:
    """Print a summary of an ExecutionResult."""
    prefix = "[DRY RUN] " if result.dry_run else ""
    if result.checked:
        print(f"\n{prefix}Checked {len(result.checked)} Version file(s):")
        for check in result.checked:
            print(f"- {check.version_file}: {check.tag} ({check.status.value})")
    if result.created_tags:
        print(f"\n{prefix}Created {len(result.created_tags)} tag(s):")
        for tag in result.created_tags:
            print(f"  - {tag}")
    if result.skipped_tags:
        print("\nSkipped existing tag(s):")
        for tag in result.skipped_tags:
            print(f"  - {tag}")
