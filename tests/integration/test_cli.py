"""Tests for the command-line entry point and its exit codes."""

from __future__ import annotations

import pytest
from conftest import BASE_SHA, FakeRefBackend
from typer.testing import CliRunner

from gh_branch_creator.cli import app
from gh_branch_creator.errors import ToolingError
from gh_branch_creator.models import CreateRefResponse

runner = CliRunner()

ARGS = ["--token", "tok", "--owner", "acme", "--repo", "infra", "--base", "main", "--new", "feature/x"]


@pytest.fixture
def patched_backend(mocker, fake_backend):
    mocker.patch("gh_branch_creator.workflow.select_backend", return_value=fake_backend)
    return fake_backend


def test_created_exit_zero(patched_backend) -> None:
    result = runner.invoke(app, ARGS)

    assert result.exit_code == 0
    assert "Created branch 'feature/x'" in result.output
    assert BASE_SHA[:8] in result.output


def test_rerun_reports_already_exists(patched_backend) -> None:
    runner.invoke(app, ARGS)
    result = runner.invoke(app, ARGS)

    assert result.exit_code == 0
    assert "already exists" in result.output


def test_values_from_environment(monkeypatch, patched_backend) -> None:
    monkeypatch.setenv("GH_TOKEN", "tok")
    monkeypatch.setenv("GH_OWNER", "acme")
    monkeypatch.setenv("GH_REPO", "infra")
    monkeypatch.setenv("BASE_BRANCH", "main")
    monkeypatch.setenv("NEW_BRANCH", "feature/env")

    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "refs/heads/feature/env" in patched_backend.refs


def test_missing_config_exit_two(mocker) -> None:
    select = mocker.patch("gh_branch_creator.workflow.select_backend")

    result = runner.invoke(app, ["--owner", "acme"])

    assert result.exit_code == 2
    assert "GITHUB_TOKEN" in result.output
    assert "NEW_BRANCH" in result.output
    assert "Quick start" in result.output
    select.assert_not_called()


def test_no_tooling_exit_three(mocker) -> None:
    mocker.patch("gh_branch_creator.workflow.select_backend", side_effect=ToolingError("GitHub CLI ('gh') was requested but is not installed."))

    result = runner.invoke(app, ARGS + ["--strategy", "gh"])

    assert result.exit_code == 3
    assert "not installed" in result.output


def test_base_missing_exit_four(mocker) -> None:
    mocker.patch("gh_branch_creator.workflow.select_backend", return_value=FakeRefBackend(refs={}))

    result = runner.invoke(app, ARGS)

    assert result.exit_code == 4
    assert "Could not read base branch 'main'" in result.output


def test_forbidden_exit_five(mocker) -> None:
    backend = FakeRefBackend(
        refs={"refs/heads/main": BASE_SHA},
        create_response=CreateRefResponse(403, '{"message":"Resource not accessible by integration"}'),
    )
    mocker.patch("gh_branch_creator.workflow.select_backend", return_value=backend)

    result = runner.invoke(app, ARGS)

    assert result.exit_code == 5
    assert "HTTP 403" in result.output


def test_strategy_passed_through(mocker, fake_backend) -> None:
    select = mocker.patch("gh_branch_creator.workflow.select_backend", return_value=fake_backend)

    runner.invoke(app, ARGS + ["--strategy", "http"])

    assert select.call_args[0][1] == "http"


def test_env_file_supplies_settings_and_strategy(dotenv_dir, mocker, fake_backend) -> None:
    dotenv_dir(
        GH_TOKEN="tok",
        GH_OWNER="acme",
        GH_REPO="infra",
        BASE_BRANCH="main",
        NEW_BRANCH="feature/dotenv",
        BRANCH_STRATEGY="gh",
    )
    select = mocker.patch("gh_branch_creator.workflow.select_backend", return_value=fake_backend)

    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert select.call_args[0][1] == "gh"
    assert "refs/heads/feature/dotenv" in fake_backend.refs


def test_strategy_flag_beats_env_file(dotenv_dir, mocker, fake_backend) -> None:
    dotenv_dir(BRANCH_STRATEGY="gh")
    select = mocker.patch("gh_branch_creator.workflow.select_backend", return_value=fake_backend)

    runner.invoke(app, ARGS + ["--strategy", "http"])

    assert select.call_args[0][1] == "http"


def test_unknown_log_level_still_runs(patched_backend) -> None:
    result = runner.invoke(app, ARGS + ["--log-level", "basic_format"])

    assert result.exit_code == 0
