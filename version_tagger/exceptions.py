"""Custom exceptions for Version Tagger."""


class VersionTaggerError(Exception):
    """Base class for errors that abort a tagging run."""


class GitOperationError(VersionTaggerError):
    """Raised when a Git command against the repository or remote fails."""


class VersionAlreadyTaggedError(VersionTaggerError):
    """Raised in check mode when a feature branch reuses an existing version."""

    def __init__(self, message: str, version_file: str = None, tag: str = None):
        self.version_file = version_file
        self.tag = tag
        super().__init__(message)


class VersionFileError(VersionTaggerError):
    """Raised when a Version file cannot be read."""

    def __init__(self, message: str, version_file: str = None):
        self.version_file = version_file
        super().__init__(message)


class SuffixExhaustedError(VersionTaggerError):
    """Raised when no free tag counter exists below the configured bound."""

    def __init__(self, message: str, base_version: str = None, max_attempts: int = None):
        self.base_version = base_version
        self.max_attempts = max_attempts
        super().__init__(message)
