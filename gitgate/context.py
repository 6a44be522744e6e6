"""Repository context discovery through the version-control executable."""

from dataclasses import dataclass

from gitgate.constants import BRANCH_QUERY, DEFAULT_EXECUTABLE, TOPLEVEL_QUERY
from gitgate.exceptions import ContextError
from gitgate.logging import get_logger
from gitgate.runner import ProcessRunner

logger = get_logger("context")


@dataclass(frozen=True)
class RepositoryContext:
    """Where we are: repository root and checked-out branch.

    Empty strings mean the value could not be resolved, which is only
    tolerated when cloning.
    """

    root_path: str = ""
    current_branch: str = ""

    @property
    def inside_repository(self) -> bool:
        return bool(self.root_path or self.current_branch)


def _query(runner: ProcessRunner, executable: str, args: tuple[str, ...], what: str) -> str:
    result = runner.run(executable, args)
    if not result.success:
        raise ContextError(
            f"failed to get {what}: {result.combined_output.strip() or result.error}",
            query=" ".join(args),
            output=result.combined_output,
        )
    return result.combined_output.strip()


def resolve_top_level_directory(
    runner: ProcessRunner, executable: str = DEFAULT_EXECUTABLE
) -> str:
    """Return the absolute path of the repository root.

    Raises:
        ContextError: If the working directory is not inside a repository
    """
    return _query(runner, executable, TOPLEVEL_QUERY, "top-level directory")


def resolve_current_branch(runner: ProcessRunner, executable: str = DEFAULT_EXECUTABLE) -> str:
    """Return the short name of the checked-out branch.

    Raises:
        ContextError: On detached HEAD or outside a repository
    """
    return _query(runner, executable, BRANCH_QUERY, "current branch")


def resolve_context(
    runner: ProcessRunner,
    executable: str = DEFAULT_EXECUTABLE,
    allow_missing: bool = False,
) -> RepositoryContext:
    """Resolve the repository root, then the current branch.

    Args:
        runner: Process runner used for both queries
        executable: Version-control executable to query
        allow_missing: Turn resolution failures into empty fields instead of
            raising

    Returns:
        RepositoryContext

    Raises:
        ContextError: If a query fails and ``allow_missing`` is False
    """
    try:
        root = resolve_top_level_directory(runner, executable)
    except ContextError as e:
        if not allow_missing:
            raise
        logger.debug(f"No repository root: {e.message}")
        root = ""

    try:
        branch = resolve_current_branch(runner, executable)
    except ContextError as e:
        if not allow_missing:
            raise
        logger.debug(f"No current branch: {e.message}")
        branch = ""

    context = RepositoryContext(root_path=root, current_branch=branch)
    logger.debug(f"Resolved context: branch={branch!r} root={root!r}")
    return context
