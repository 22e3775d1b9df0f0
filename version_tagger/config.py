"""
Configuration Module for Version Tagger

This module contains constants used throughout the application.
They define the Version file format and the defaults of the tagging run.

Constants:
    VERSION_FILE_NAME: Name of the version declaration files to look for
    DATE_SENTINEL: Version file content that selects date-based versioning
    DEFAULT_REMOTE_NAME: Remote used when GIT_REMOTE_NAME is not set
    MAX_PRE_VERSION_COUNT: Exclusive upper bound of the tag counter search
    IGNORED_FOLDERS: Set of folder names never searched for Version files
"""

VERSION_FILE_NAME = "Version"
DATE_SENTINEL = "date"
DEFAULT_REMOTE_NAME = "origin"
MAX_PRE_VERSION_COUNT = 50
IGNORED_FOLDERS = {".git"}
