"""Tests for check and tagging runs over several Version files.

These run the real I/O layer against the mocked repository from conftest,
so every remote lookup and push goes through GitPython's call surface.
"""

from dataclasses import fields
from datetime import date

import pytest

from version_tagger.exceptions import SuffixExhaustedError, VersionAlreadyTaggedError
from version_tagger.io_layer import DryRunIOLayer, IOLayer
from version_tagger.models import BranchContext, CheckStatus, ExecutionResult, VersionDeclaration
from version_tagger.plan_executor import execute_check, execute_tagging

TODAY = date(2025, 10, 7)
DEFAULT = BranchContext(current_branch="main", default_branch="main")
FEATURE = BranchContext(current_branch="feature/login-fix", default_branch="main")

DECLARATIONS = [
    VersionDeclaration("", "1.2.3\n"),
    VersionDeclaration("service1", "date\n"),
]


def test_tagging_on_default_branch(mock_repo, fake_remote):
    result = execute_tagging(DECLARATIONS, DEFAULT, IOLayer(mock_repo), today=TODAY)

    assert result.created_tags == ["v1.2.3", "service1/v2025.10.7"]
    assert fake_remote.pushed == ["v1.2.3", "service1/v2025.10.7"]
    assert [c.args[0] for c in mock_repo.create_tag.call_args_list] == ["v1.2.3", "service1/v2025.10.7"]
    mock_repo.git.push.assert_any_call("origin", "v1.2.3")


def test_tagging_on_feature_branch(mock_repo, fake_remote):
    result = execute_tagging(DECLARATIONS, FEATURE, IOLayer(mock_repo), today=TODAY)

    assert result.created_tags == [
        "v1.2.3-feature-login-fix.1",
        "service1/v2025.10.7-feature-login-fix.1",
    ]


def test_repeated_feature_runs_count_up(mock_repo, fake_remote):
    io_layer = IOLayer(mock_repo)
    execute_tagging(DECLARATIONS[:1], FEATURE, io_layer, today=TODAY)
    result = execute_tagging(DECLARATIONS[:1], FEATURE, io_layer, today=TODAY)

    assert result.created_tags == ["v1.2.3-feature-login-fix.2"]


def test_existing_release_is_skipped(mock_repo, fake_remote):
    fake_remote.tags.add("v1.2.3")

    result = execute_tagging(DECLARATIONS[:1], DEFAULT, IOLayer(mock_repo), today=TODAY)

    assert result.created_tags == []
    assert result.skipped_tags == ["v1.2.3"]
    mock_repo.create_tag.assert_not_called()
    mock_repo.git.push.assert_not_called()


def test_same_day_release_gets_counter(mock_repo, fake_remote):
    fake_remote.tags.update({"service1/v2025.10.7", "service1/v2025.10.7.1"})

    result = execute_tagging(DECLARATIONS[1:], DEFAULT, IOLayer(mock_repo), today=TODAY)

    assert result.created_tags == ["service1/v2025.10.7.2"]


def test_dry_run_makes_identical_decisions(mock_repo, fake_remote):
    """Test that dry run picks the same tags as a live run without mutating the remote."""
    fake_remote.tags.update({"v1.2.3-feature-login-fix.1", "v1.2.3-feature-login-fix.2"})

    dry = execute_tagging(DECLARATIONS, FEATURE, DryRunIOLayer(mock_repo), today=TODAY)
    dry_lookups = list(fake_remote.lookups)

    assert dry.dry_run
    assert fake_remote.pushed == []
    mock_repo.create_tag.assert_not_called()

    fake_remote.lookups.clear()
    live = execute_tagging(DECLARATIONS, FEATURE, IOLayer(mock_repo), today=TODAY)

    assert live.created_tags == dry.created_tags
    assert fake_remote.lookups == dry_lookups
    assert fake_remote.pushed == dry.created_tags


def test_first_failure_aborts_run(mock_repo, fake_remote):
    fake_remote.tags.update({"v1.2.3-feature-login-fix.1", "v1.2.3-feature-login-fix.2"})

    with pytest.raises(SuffixExhaustedError):
        execute_tagging(DECLARATIONS, FEATURE, IOLayer(mock_repo), max_attempts=3, today=TODAY)

    assert not any(tag.startswith("service1/") for tag in fake_remote.lookups)
    assert fake_remote.pushed == []


def test_publishes_created_tags(mock_repo, tmp_path):
    output = tmp_path / "github_output"

    execute_tagging(DECLARATIONS, DEFAULT, IOLayer(mock_repo, github_output=str(output)), today=TODAY)

    assert output.read_text() == "tag=v1.2.3\ntag=service1/v2025.10.7\n"


def test_dry_run_does_not_publish(mock_repo, tmp_path):
    output = tmp_path / "github_output"

    execute_tagging(DECLARATIONS, DEFAULT, DryRunIOLayer(mock_repo, github_output=str(output)), today=TODAY)

    assert not output.exists()


def test_check_passes_for_new_versions(mock_repo):
    result = execute_check(DECLARATIONS, FEATURE, IOLayer(mock_repo), today=TODAY)

    assert [c.status for c in result.checked] == [CheckStatus.NOT_TAGGED, CheckStatus.SKIPPED_DATE]


def test_check_tolerates_existing_tag_on_default_branch(mock_repo, fake_remote, caplog):
    fake_remote.tags.add("v1.2.3")

    result = execute_check(DECLARATIONS, DEFAULT, IOLayer(mock_repo), today=TODAY)

    assert result.checked[0].status == CheckStatus.ALREADY_TAGGED
    assert "Version v1.2.3 already exists as a tag on origin." in caplog.text


def test_check_fails_for_existing_tag_on_feature_branch(mock_repo, fake_remote):
    fake_remote.tags.add("v1.2.3")
    declarations = [VersionDeclaration("", "1.2.3"), VersionDeclaration("service2", "2.0.0")]

    with pytest.raises(VersionAlreadyTaggedError) as exc_info:
        execute_check(declarations, FEATURE, IOLayer(mock_repo), today=TODAY)

    assert exc_info.value.version_file == "Version"
    assert exc_info.value.tag == "v1.2.3"
    assert "service2/v2.0.0" not in fake_remote.lookups


def test_run_result_only_reports_tags_and_checks(mock_repo, fake_remote):
    """Test that a run result holds the tag lists, checks and dry-run flag only."""
    fake_remote.tags.add("v1.2.3")

    result = execute_tagging(DECLARATIONS, DEFAULT, IOLayer(mock_repo), today=TODAY)

    assert [f.name for f in fields(ExecutionResult)] == ["created_tags", "skipped_tags", "checked", "dry_run"]
    assert result.created_tags == ["service1/v2025.10.7"]
    assert result.skipped_tags == ["v1.2.3"]
    assert not result.dry_run
