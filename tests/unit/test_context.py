"""Tests for gitgate.context repository resolution."""

import dataclasses

import pytest

from gitgate.constants import BRANCH_QUERY, TOPLEVEL_QUERY
from gitgate.context import (
    RepositoryContext,
    resolve_context,
    resolve_current_branch,
    resolve_top_level_directory,
)
from gitgate.exceptions import ContextError
from tests.mocks import FakeRunner
from tests.mocks.mock_runner import DETACHED_HEAD, NOT_A_REPOSITORY


class TestRepositoryContext:
    """Tests for the RepositoryContext value."""

    def test_defaults_are_empty(self) -> None:
        """Test a default context has empty fields."""
        context = RepositoryContext()
        assert context.root_path == ""
        assert context.current_branch == ""
        assert context.inside_repository is False

    def test_inside_repository(self) -> None:
        """Test inside_repository reflects either field."""
        assert RepositoryContext("/repo", "main").inside_repository is True
        assert RepositoryContext("/repo", "").inside_repository is True

    def test_frozen(self) -> None:
        """Test the context cannot be modified."""
        context = RepositoryContext("/repo", "main")
        with pytest.raises(dataclasses.FrozenInstanceError):
            context.current_branch = "dev"  # type: ignore[misc]


class TestQueries:
    """Tests for the two single-value queries."""

    def test_top_level_directory_trims_output(self) -> None:
        """Test the top-level directory is trimmed."""
        runner = FakeRunner().respond(TOPLEVEL_QUERY, output="  /work/repo\n")
        assert resolve_top_level_directory(runner) == "/work/repo"
        assert runner.calls == [("git", ["rev-parse", "--show-toplevel"])]

    def test_current_branch_trims_output(self) -> None:
        """Test the branch name is trimmed."""
        runner = FakeRunner().respond(BRANCH_QUERY, output="feature/x\n")
        assert resolve_current_branch(runner) == "feature/x"
        assert runner.calls == [("git", ["symbolic-ref", "--short", "HEAD"])]

    def test_custom_executable(self) -> None:
        """Test queries use the given executable."""
        runner = FakeRunner().respond(BRANCH_QUERY, output="dev\n")
        resolve_current_branch(runner, "/opt/git/bin/git")
        assert runner.calls[0][0] == "/opt/git/bin/git"

    def test_top_level_outside_repository(self) -> None:
        """Test the top-level query fails outside a repository."""
        runner = FakeRunner().respond(TOPLEVEL_QUERY, output=NOT_A_REPOSITORY, exit_code=128)
        with pytest.raises(ContextError) as exc_info:
            resolve_top_level_directory(runner)
        assert "top-level directory" in exc_info.value.message
        assert exc_info.value.output == NOT_A_REPOSITORY
        assert exc_info.value.query == "rev-parse --show-toplevel"

    def test_detached_head(self) -> None:
        """Test the branch query fails on a detached HEAD."""
        runner = FakeRunner().respond(BRANCH_QUERY, output=DETACHED_HEAD, exit_code=128)
        with pytest.raises(ContextError) as exc_info:
            resolve_current_branch(runner)
        assert "current branch" in exc_info.value.message


class TestResolveContext:
    """Tests for resolve_context."""

    def test_resolves_both_fields(self) -> None:
        """Test both fields are resolved."""
        runner = FakeRunner.in_repository(branch="dev", root="/r")
        assert resolve_context(runner) == RepositoryContext("/r", "dev")

    def test_root_queried_before_branch(self) -> None:
        """Test the root is queried before the branch."""
        runner = FakeRunner.in_repository()
        resolve_context(runner)
        assert [tuple(args) for _, args in runner.calls] == [TOPLEVEL_QUERY, BRANCH_QUERY]

    def test_failure_is_fatal_by_default(self) -> None:
        """Test a failed query raises by default."""
        with pytest.raises(ContextError):
            resolve_context(FakeRunner.outside_repository())

    def test_detached_head_is_fatal_by_default(self) -> None:
        """Test a detached HEAD raises by default."""
        runner = FakeRunner.in_repository()
        runner.respond(BRANCH_QUERY, output=DETACHED_HEAD, exit_code=128)
        with pytest.raises(ContextError):
            resolve_context(runner)

    def test_allow_missing_outside_repository(self) -> None:
        """Test allow_missing yields an empty context."""
        context = resolve_context(FakeRunner.outside_repository(), allow_missing=True)
        assert context == RepositoryContext("", "")
        assert context.inside_repository is False

    def test_allow_missing_keeps_resolved_fields(self) -> None:
        """Test allow_missing keeps the fields that resolved."""
        runner = FakeRunner.in_repository(root="/r")
        runner.respond(BRANCH_QUERY, output=DETACHED_HEAD, exit_code=128)
        context = resolve_context(runner, allow_missing=True)
        assert context == RepositoryContext("/r", "")
