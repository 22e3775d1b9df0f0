"""Test fixtures for Version Tagger.

This module provides shared fixtures used across multiple test modules.
It sets up a mocked Git repository backed by an in-memory remote so that
tag lookups, tag creation and pushes can be verified without network access.

Fixtures:
    fake_remote: In-memory remote holding the existing tags
    mock_repo: Mock GitPython repository wired to fake_remote
    version_tree: Temporary directory tree with Version files
"""

from unittest.mock import Mock

import pytest
from git.exc import GitCommandError


class FakeRemote:
    """In-memory stand-in for a Git remote."""

    def __init__(self, tags=(), default_branch="main"):
        self.tags = set(tags)
        self.default_branch = default_branch
        self.pushed = []
        self.lookups = []

    def ls_remote(self, *args):
        ref = args[-1]
        tag = ref[len("refs/tags/"):]
        self.lookups.append(tag)
        if tag in self.tags:
            return f"0123456789abcdef\t{ref}"
        raise GitCommandError(["git", "ls-remote", *args], 2)

    def push(self, remote, tag):
        self.pushed.append(tag)
        self.tags.add(tag)
        return ""

    def show(self, *args):
        return (
            "* remote origin\n"
            "  Fetch URL: git@github.com:example/repo.git\n"
            "  Push  URL: git@github.com:example/repo.git\n"
            f"  HEAD branch: {self.default_branch}\n"
        )


@pytest.fixture
def fake_remote():
    """Provides an empty in-memory remote whose default branch is main."""
    return FakeRemote()


@pytest.fixture
def mock_repo(fake_remote):
    """Provides a mock Git repository talking to fake_remote.

    The checked out branch is "main"; tests change it through
    `mock_repo.git.rev_parse.return_value`.
    """
    repo = Mock()
    repo.git = Mock()
    repo.git.rev_parse.return_value = "main"
    repo.git.remote.side_effect = fake_remote.show
    repo.git.ls_remote.side_effect = fake_remote.ls_remote
    repo.git.push.side_effect = fake_remote.push
    repo.git.fetch.return_value = ""
    return repo


def write_version_file(directory, content):
    """Helper to create a Version file."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "Version"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def version_tree(tmp_path):
    """Creates a monorepo-style tree with two Version files.

    tmp_path/
    ├── Version            "1.2.3"
    └── service1/
        └── Version        "date"

    Returns:
        Path: The tree root
    """
    write_version_file(tmp_path, "1.2.3\n")
    write_version_file(tmp_path / "service1", "date\n")
    return tmp_path
