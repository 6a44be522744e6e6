"""gitgate command-line interface."""

import os

import click
from rich.console import Console
from rich.markup import escape

from gitgate.config import GitGateConfig
from gitgate.constants import LOG_LEVEL_ENV
from gitgate.dispatcher import Dispatcher
from gitgate.exceptions import ConfigurationError
from gitgate.logging import setup_logging

console = Console(stderr=True, highlight=False, soft_wrap=True)


class PassthroughCommand(click.Command):
    """click command that keeps the argument vector exactly as typed.

    click's parser consumes a leading ``--`` even for ``UNPROCESSED``
    arguments, so the untouched tokens are saved on the context before
    parsing and those are what get dispatched.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta["gitgate.argv"] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=PassthroughCommand,
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    }
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    """gitgate - git aliases with a protected-branch policy.

    Every token, flags included, is handed to git. Mutating aliases
    (add, commit, push, originpush) are refused on protected branches.

    Examples:

        gitgate log -5

        gitgate c -m "fix parser"

        gitgate status -s
    """
    try:
        config = GitGateConfig.load()
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(e.exit_code) from None

    setup_logging(
        level=os.environ.get(LOG_LEVEL_ENV, config.logging.level),
        log_dir=config.logging.directory,
    )

    raise SystemExit(Dispatcher(config=config).dispatch(ctx.meta["gitgate.argv"]))


if __name__ == "__main__":
    cli()
