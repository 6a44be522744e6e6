"""Process execution for the wrapped version-control executable."""

import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from gitgate.exceptions import ToolNotFoundError
from gitgate.logging import get_logger

logger = get_logger("runner")


@dataclass(frozen=True)
class InvocationResult:
    """Result of one external execution."""

    command: list[str]
    combined_output: str
    exit_code: int
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


class ProcessRunner(Protocol):
    """Anything that can run a program and hand back its combined output."""

    def run(self, program: str, args: Sequence[str]) -> InvocationResult: ...


class SubprocessRunner:
    """Runs programs as child processes and waits for them.

    stderr is merged into stdout and stdin is detached, so the child never
    blocks on interactive input. There is no timeout.
    """

    def run(self, program: str, args: Sequence[str]) -> InvocationResult:
        """Run a program.

        Args:
            program: Executable name or path
            args: Argument tokens, passed without a shell

        Returns:
            InvocationResult; ``error`` is set if the process could not be
            started or exited nonzero
        """
        cmd = [program, *args]
        logger.debug(f"Running: {' '.join(cmd)}", extra={"command": cmd})

        try:
            proc = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except OSError as e:
            logger.debug(f"Failed to start {program}: {e}")
            return InvocationResult(command=cmd, combined_output="", exit_code=-1, error=str(e))

        output = proc.stdout.decode("utf-8", errors="replace") if proc.stdout else ""
        if proc.returncode != 0:
            logger.debug(
                f"{program} exited with status {proc.returncode}",
                extra={"returncode": proc.returncode},
            )
            return InvocationResult(
                command=cmd,
                combined_output=output,
                exit_code=proc.returncode,
                error=f"exit status {proc.returncode}",
            )

        return InvocationResult(command=cmd, combined_output=output, exit_code=0)


def locate_executable(name: str) -> str:
    """Find an executable on the search path.

    Raises:
        ToolNotFoundError: If ``name`` cannot be found
    """
    path = shutil.which(name)
    if path is None:
        raise ToolNotFoundError(f"{name} is not installed", executable=name)
    return path
