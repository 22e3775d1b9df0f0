"""Test module for git_operations.py.

This module verifies the setup and error handling of the Git repository
client. Repository access is mocked, so no real repository is required.

Test Cases:
    test_setup_git_client_success: Verifies successful repository setup
    test_setup_git_client_failure: Verifies proper error handling
"""

from unittest.mock import Mock, patch
import pytest
from git.exc import InvalidGitRepositoryError, NoSuchPathError
from version_tagger.git_operations import setup_git_client
from version_tagger.exceptions import GitOperationError


def test_setup_git_client_success():
    """Tests that the repository is opened from the target path upwards."""
    mock_repo = Mock()
    with patch("version_tagger.git_operations.Repo", return_value=mock_repo) as mock_repo_class:
        repo = setup_git_client("services")

    assert repo == mock_repo
    mock_repo_class.assert_called_once_with("services", search_parent_directories=True)


@pytest.mark.parametrize("error", [InvalidGitRepositoryError("/tmp/x"), NoSuchPathError("/tmp/x")])
def test_setup_git_client_failure(error):
    """Tests that repository errors are raised as GitOperationError."""
    with patch("version_tagger.git_operations.Repo") as mock_repo_class:
        mock_repo_class.side_effect = error

        with pytest.raises(GitOperationError) as exc_info:
            setup_git_client("/tmp/x")

    assert "Failed to open git repository at '/tmp/x'" in str(exc_info.value)
