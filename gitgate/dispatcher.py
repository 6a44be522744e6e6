"""Dispatcher - resolve context, translate, gate, execute, relay output."""

from collections.abc import Sequence
from typing import TextIO

import click
from rich.console import Console
from rich.markup import escape

from gitgate.config import GitGateConfig
from gitgate.constants import CommandKind
from gitgate.context import RepositoryContext, resolve_context
from gitgate.exceptions import ExecutionError, GitGateError, UsageError
from gitgate.logging import get_logger
from gitgate.policy import PolicyGate
from gitgate.runner import ProcessRunner, SubprocessRunner, locate_executable
from gitgate.translator import TranslatedCommand, lookup, translate

logger = get_logger("dispatcher")

USAGE = "usage: gitgate <command> [args]"


class Dispatcher:
    """Runs one user invocation from argv to exit status.

    The runner is injectable so tests can script git's responses.
    """

    def __init__(
        self,
        runner: ProcessRunner | None = None,
        config: GitGateConfig | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.runner = runner or SubprocessRunner()
        self.config = config or GitGateConfig()
        self.gate = PolicyGate(self.config.policy.protected_branches)
        self.stdout = stdout
        self.stderr = stderr
        self.console = Console(file=stderr, stderr=stderr is None, highlight=False, soft_wrap=True)

    def dispatch(self, argv: Sequence[str]) -> int:
        """Run the command described by ``argv``.

        Args:
            argv: Alias followed by its trailing arguments

        Returns:
            Process exit status
        """
        try:
            self._dispatch(list(argv))
        except GitGateError as e:
            logger.debug(f"{type(e).__name__}: {e}")
            self.console.print(f"[red]Error:[/red] {escape(e.message)}")
            return e.exit_code
        return 0

    def _dispatch(self, argv: list[str]) -> None:
        if not argv:
            raise UsageError(USAGE)

        alias, trailing = argv[0], argv[1:]
        executable = self.config.executable
        locate_executable(executable)

        clone = lookup(alias).kind is CommandKind.CLONE
        context = resolve_context(self.runner, executable, allow_missing=clone)

        command = translate(alias, trailing, context)
        if command.requires_policy_check:
            self.gate.enforce(alias, context.current_branch)

        self.execute(command, context)

    def execute(self, command: TranslatedCommand, context: RepositoryContext) -> None:
        """Run each step of ``command``, stopping at the first failure.

        Raises:
            ExecutionError: If a step fails; its output has already been
                written to stderr
        """
        if command.show_context:
            click.echo(f"{context.current_branch} in {context.root_path}", file=self.stdout)

        for argv in command.steps:
            result = self.runner.run(self.config.executable, argv)
            if not result.success:
                self._write_failure(result.combined_output)
                raise ExecutionError(
                    f"failed to run {' '.join(argv)}: {result.error}",
                    command=result.command,
                    returncode=result.exit_code,
                    output=result.combined_output,
                )
            self._write_output(result.combined_output)

    def _write_output(self, output: str) -> None:
        # color=True keeps git's escape sequences when stdout is not a TTY
        for line in output.splitlines():
            click.echo(line, file=self.stdout, color=True)

    def _write_failure(self, output: str) -> None:
        if output:
            click.echo(output, file=self.stderr, err=True, nl=False, color=True)
