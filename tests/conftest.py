"""Pytest configuration and fixtures for gitgate tests."""

import io
import os
import shutil
import subprocess
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from gitgate.config import GitGateConfig
from gitgate.dispatcher import Dispatcher
from tests.mocks import FakeRunner


def _run_git(*args: str, cwd: Path | None = None) -> None:
    """Run git command safely without shell=True."""
    subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        check=True,
    )


@pytest.fixture
def tmp_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary git repository on branch main and chdir into it.

    Yields:
        Path to the temporary repository
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    orig_dir = os.getcwd()
    os.chdir(repo)

    _run_git("init", "-q", "-b", "main", cwd=repo)
    _run_git("config", "user.email", "test@test.com", cwd=repo)
    _run_git("config", "user.name", "Test", cwd=repo)
    _run_git("config", "commit.gpgsign", "false", cwd=repo)

    (repo / "README.md").write_text("# Test Repo\n")
    _run_git("add", "-A", cwd=repo)
    _run_git("commit", "-q", "-m", "Initial commit", cwd=repo)

    yield repo

    os.chdir(orig_dir)


@pytest.fixture
def git_on_path() -> Generator[None, None, None]:
    """Pretend git is installed, without touching PATH."""
    with patch("gitgate.dispatcher.locate_executable", return_value="/usr/bin/git"):
        yield


@pytest.fixture
def fake_runner() -> FakeRunner:
    """FakeRunner inside a repository on a feature branch."""
    return FakeRunner.in_repository(branch="feature/x", root="/work/repo")


@pytest.fixture
def streams() -> tuple[io.StringIO, io.StringIO]:
    """Captured (stdout, stderr) pair for a Dispatcher."""
    return io.StringIO(), io.StringIO()


@pytest.fixture
def make_dispatcher(streams: tuple[io.StringIO, io.StringIO], git_on_path: None):
    """Factory building a Dispatcher wired to captured streams."""
    stdout, stderr = streams

    def _make(runner: FakeRunner, config: GitGateConfig | None = None) -> Dispatcher:
        return Dispatcher(runner=runner, config=config, stdout=stdout, stderr=stderr)

    return _make


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point GITGATE_CONFIG at a file under tmp_path (not created)."""
    config_path = tmp_path / "gitgate-config" / "config.yaml"
    monkeypatch.setenv("GITGATE_CONFIG", str(config_path))
    monkeypatch.delenv("GITGATE_LOG_LEVEL", raising=False)
    return config_path
