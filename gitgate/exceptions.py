"""gitgate exception hierarchy."""

from typing import Any


class GitGateError(Exception):
    """Base exception for all gitgate errors."""

    exit_code: int = 1

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class UsageError(GitGateError):
    """No command was given on the command line."""

    exit_code = 2


class ConfigurationError(GitGateError):
    """Error in gitgate configuration."""

    pass


class ToolNotFoundError(GitGateError):
    """The version-control executable is not on the search path."""

    exit_code = 127

    def __init__(self, message: str, executable: str) -> None:
        super().__init__(message, {"executable": executable})
        self.executable = executable


class ContextError(GitGateError):
    """Repository root or current branch could not be resolved."""

    def __init__(self, message: str, query: str, output: str = "") -> None:
        super().__init__(message, {"query": query})
        self.query = query
        self.output = output


class PolicyError(GitGateError):
    """A mutating command was attempted on a protected branch."""

    def __init__(self, message: str, branch: str, alias: str) -> None:
        super().__init__(message)
        self.branch = branch
        self.alias = alias


class CloneRefusedError(PolicyError):
    """Clone was requested from inside an existing repository."""

    def __init__(self, branch: str = "", root: str = "") -> None:
        super().__init__("No!", branch=branch, alias="clone")
        self.root = root


class ExecutionError(GitGateError):
    """The child process failed to start or exited nonzero."""

    def __init__(
        self,
        message: str,
        command: list[str],
        returncode: int,
        output: str = "",
    ) -> None:
        super().__init__(message, {"command": " ".join(command), "returncode": returncode})
        self.command = command
        self.returncode = returncode
        self.output = output
        if returncode > 0:
            self.exit_code = returncode
