"""Contains unit tests for the git and make tooling."""

import subprocess
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock, call, patch

import pytest

from quarkus_platform_updater.tooling.commands import run_command
from quarkus_platform_updater.tooling.exceptions import ExternalCommandError
from quarkus_platform_updater.tooling.git import GitCLI
from quarkus_platform_updater.tooling.make import MakeBuildTool


def completed(returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode)


@pytest.fixture
def subprocess_run() -> Generator[MagicMock, None, None]:
    """Patch subprocess.run so no command is actually executed."""
    with patch("quarkus_platform_updater.tooling.commands.subprocess.run", return_value=completed()) as mock_run:
        yield mock_run


def test_run_command_inherits_standard_streams(subprocess_run: MagicMock) -> None:
    """Test that output is not captured and the exit code is checked by us."""
    run_command("stage", ["git", "status"], cwd=Path("/work"))
    subprocess_run.assert_called_once_with(["git", "status"], cwd=Path("/work"), check=False)


def test_run_command_raises_on_non_zero_exit(subprocess_run: MagicMock) -> None:
    """Test that a non-zero exit code raises ExternalCommandError naming the step."""
    subprocess_run.return_value = completed(returncode=128)

    with pytest.raises(ExternalCommandError) as exc_info:
        run_command("push", ["git", "push", "origin", "main"])

    assert exc_info.value.step == "push"
    assert exc_info.value.returncode == 128
    assert "git push origin main" in str(exc_info.value)


def test_git_operations(subprocess_run: MagicMock) -> None:
    """Test the git command lines for every operation."""
    repo_path = Path("/work")
    git = GitCLI(repo_path)

    git.configure_identity("Knative Automation", "automation@knative.team")
    git.create_branch("update-quarkus-platform-3.15.1")
    git.add(["templates/quarkus/http/pom.xml", "zz_filesystem_generated.go"])
    git.commit("chore: update Quarkus platform version to 3.15.1")
    git.push("update-quarkus-platform-3.15.1")

    assert subprocess_run.call_args_list == [
        call(["git", "config", "user.email", "automation@knative.team"], cwd=repo_path, check=False),
        call(["git", "config", "user.name", "Knative Automation"], cwd=repo_path, check=False),
        call(["git", "checkout", "-b", "update-quarkus-platform-3.15.1"], cwd=repo_path, check=False),
        call(["git", "add", "--", "templates/quarkus/http/pom.xml", "zz_filesystem_generated.go"], cwd=repo_path, check=False),
        call(["git", "commit", "-m", "chore: update Quarkus platform version to 3.15.1"], cwd=repo_path, check=False),
        call(["git", "push", "--set-upstream", "origin", "update-quarkus-platform-3.15.1"], cwd=repo_path, check=False),
    ]


def test_git_push_without_upstream(subprocess_run: MagicMock) -> None:
    """Test pushing to another remote without recording the upstream."""
    GitCLI(Path("/work")).push("feature", remote="fork", set_upstream=False)
    subprocess_run.assert_called_once_with(["git", "push", "fork", "feature"], cwd=Path("/work"), check=False)


def test_git_failure_names_the_step(subprocess_run: MagicMock) -> None:
    """Test that a failing checkout is attributed to branch creation."""
    subprocess_run.return_value = completed(returncode=1)

    with pytest.raises(ExternalCommandError) as exc_info:
        GitCLI().create_branch("update-quarkus-platform-3.15.1")

    assert exc_info.value.step == "create-branch"


def test_make_generate(subprocess_run: MagicMock) -> None:
    """Test that the derived file is regenerated through make."""
    MakeBuildTool(Path("/work")).generate("zz_filesystem_generated.go")
    subprocess_run.assert_called_once_with(["make", "zz_filesystem_generated.go"], cwd=Path("/work"), check=False)
