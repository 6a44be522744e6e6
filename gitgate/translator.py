"""Alias table and translation of aliases into git argument vectors."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from gitgate.constants import BRANCH_PLACEHOLDER, CommandKind
from gitgate.context import RepositoryContext
from gitgate.exceptions import CloneRefusedError
from gitgate.logging import get_logger

logger = get_logger("translator")


@dataclass(frozen=True)
class CommandSpec:
    """One row of the alias table.

    ``template`` is the base argument vector. COMPOUND rows leave it empty
    and list their commands in ``steps`` instead.
    """

    aliases: tuple[str, ...]
    kind: CommandKind
    template: tuple[str, ...] = ()
    steps: tuple[tuple[str, ...], ...] = ()
    show_context: bool = False


@dataclass(frozen=True)
class TranslatedCommand:
    """Argument vectors ready for the runner, in execution order."""

    alias: str
    kind: CommandKind
    steps: tuple[list[str], ...] = field(default_factory=tuple)
    show_context: bool = False

    @property
    def argv(self) -> list[str]:
        """The argument vector of a single-step command."""
        if len(self.steps) != 1:
            raise ValueError(f"{self.alias} has {len(self.steps)} steps")
        return self.steps[0]

    @property
    def requires_policy_check(self) -> bool:
        return self.kind is CommandKind.GATED


COMMAND_TABLE: tuple[CommandSpec, ...] = (
    CommandSpec(("check",), CommandKind.READ_ONLY, ("rev-parse", "HEAD"), show_context=True),
    CommandSpec(("checkout", "co"), CommandKind.READ_ONLY, ("checkout",)),
    CommandSpec(
        ("update", "u"),
        CommandKind.COMPOUND,
        steps=(("fetch", "--all", "-p", "-t"), ("pull",)),
    ),
    CommandSpec(("log", "l"), CommandKind.READ_ONLY, ("log", "--oneline", "--graph")),
    CommandSpec(("add", "a"), CommandKind.GATED, ("add",)),
    CommandSpec(("commit", "c"), CommandKind.GATED, ("commit",)),
    CommandSpec(("push", "p"), CommandKind.GATED, ("push",)),
    CommandSpec(
        ("originpush", "op", "og"),
        CommandKind.GATED,
        ("push", "-u", "origin", BRANCH_PLACEHOLDER),
    ),
    CommandSpec(("current_hash", "hash"), CommandKind.READ_ONLY, ("rev-parse", "HEAD")),
    CommandSpec(("grep", "gg"), CommandKind.READ_ONLY, ("grep", "-n")),
    CommandSpec(("clone",), CommandKind.CLONE, ("clone",)),
)

_ALIASES: dict[str, CommandSpec] = {
    alias: spec for spec in COMMAND_TABLE for alias in spec.aliases
}


def aliases() -> list[str]:
    """Return every alias with a built-in translation."""
    return list(_ALIASES)


def lookup(alias: str) -> CommandSpec:
    """Return the table row for ``alias``, or a passthrough row for unknown tokens."""
    spec = _ALIASES.get(alias)
    if spec is None:
        return CommandSpec((alias,), CommandKind.PASSTHROUGH, (alias,))
    return spec


def _expand(template: Sequence[str], context: RepositoryContext) -> list[str]:
    return [context.current_branch if tok == BRANCH_PLACEHOLDER else tok for tok in template]


def translate(
    alias: str,
    trailing_args: Sequence[str],
    context: RepositoryContext | None = None,
) -> TranslatedCommand:
    """Translate an alias and its trailing arguments.

    Args:
        alias: The token the user typed
        trailing_args: Arguments after the alias, appended verbatim
        context: Resolved repository context; defaults to an empty one

    Returns:
        TranslatedCommand

    Raises:
        CloneRefusedError: If ``clone`` is requested inside a repository
    """
    context = context or RepositoryContext()
    spec = lookup(alias)

    if spec.kind is CommandKind.COMPOUND:
        steps = tuple(_expand(step, context) for step in spec.steps)
    else:
        if spec.kind is CommandKind.CLONE and context.inside_repository:
            raise CloneRefusedError(branch=context.current_branch, root=context.root_path)
        steps = (_expand(spec.template, context) + list(trailing_args),)

    translated = TranslatedCommand(
        alias=alias, kind=spec.kind, steps=steps, show_context=spec.show_context
    )
    logger.debug(f"Translated {alias} -> {list(steps)}", extra={"alias": alias})
    return translated
