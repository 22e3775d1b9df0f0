#!/usr/bin/env python3

"""
Version Tag Script for CI Pipelines

Reads Version files from the repository tree and either checks that their
versions are not tagged yet or creates and pushes the tags.
All decisions are pure functions, all I/O is in the I/O layer.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .environment import EnvironmentConfig
from .exceptions import VersionTaggerError
from .git_operations import setup_git_client
from .io_layer import create_io_layer
from .models import BranchContext, RunMode
from .plan_executor import execute_check, execute_tagging
from .utils import print_run_summary, setup_logging

logger = logging.getLogger(__name__)

EPILOG = """\
version file format:
  Create a file named "Version" containing:
  - Semantic version: "1.2.3" -> creates tag "v1.2.3"
  - Date-based: "date" -> creates tag "vYYYY.M.D" (e.g. "v2025.10.17")
  - Monorepo: place Version files in subdirs -> creates "subdir/v1.2.3"

environment variables:
  GIT_REMOTE_NAME        Git remote name (default: origin)
  DRY_RUN                Set to 'true' to preview actions without pushing (default: false)
  MAX_PRE_VERSION_COUNT  Upper bound of the tag counter search (default: 50)
  TARGET_PATH            Directory to search for Version files (default: .)
  GITHUB_OUTPUT          File receiving tag=<name> for every created tag

exit codes:
  0    Success, or no Version files found
  1    Error (version already exists, no free tag counter, git failure, ...)
"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="version-tagger",
        description="A Git tag management tool that supports semantic versioning and date-based versioning.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=[mode.value for mode in RunMode],
        default=RunMode.TAG.value,
        help=(
            "check_version: check if versions in Version files are already tagged "
            "(fails on non-default branches if the version exists); "
            "tag (default): create and push release tags on the default branch "
            "and prerelease tags on other branches"
        ),
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point - Discover, decide and tag."""
    args = parse_args(argv)
    setup_logging()

    try:
        # Step 1: Parse environment
        config = EnvironmentConfig.from_env(os.environ, mode=RunMode(args.command))

        # Step 2: Validate configuration
        errors = config.validate()
        if errors:
            for error in errors:
                print(f"Error: {error}")
            sys.exit(1)

        # Step 3: Setup I/O layer
        repo = setup_git_client(config.target_path)
        io_layer = create_io_layer(repo, config.remote_name, config.dry_run, config.github_output)

        current_branch = io_layer.get_current_branch()
        logger.info(f"Current branch is: {current_branch}")

        # Step 4: Find Version files
        declarations = io_layer.discover_version_files(config.target_path)
        if not declarations:
            logger.warning("No 'Version' files found. Nothing to do.")
            return

        io_layer.fetch_tags()
        default_branch = io_layer.get_default_branch()
        logger.info(f"Default branch is: {default_branch}")
        branch_context = BranchContext(current_branch=current_branch, default_branch=default_branch)

        # Step 5: Check or tag every Version file
        if config.mode == RunMode.CHECK:
            logger.info("Running in 'check_version' mode.")
            result = execute_check(declarations, branch_context, io_layer)
            print_run_summary(result)
            print("\nAll version files look good!")
            return

        logger.info("Running in 'create_tag' mode.")
        if config.dry_run:
            logger.warning("DRY RUN MODE: No tags will actually be created or pushed.")
        result = execute_tagging(declarations, branch_context, io_layer, config.max_attempts)
        print_run_summary(result)
        print("\nTagging process complete.")
    except VersionTaggerError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
