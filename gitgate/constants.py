"""gitgate constants and enumerations."""

from enum import Enum

DEFAULT_EXECUTABLE = "git"

# Canonical primary branches; mutating aliases are refused on these.
DEFAULT_PROTECTED_BRANCHES: tuple[str, ...] = ("trunk", "main", "master")

DEFAULT_CONFIG_PATH = "~/.gitgate/config.yaml"
CONFIG_PATH_ENV = "GITGATE_CONFIG"
LOG_LEVEL_ENV = "GITGATE_LOG_LEVEL"

# Template token replaced by the resolved current branch.
BRANCH_PLACEHOLDER = "{branch}"

TOPLEVEL_QUERY: tuple[str, ...] = ("rev-parse", "--show-toplevel")
BRANCH_QUERY: tuple[str, ...] = ("symbolic-ref", "--short", "HEAD")


class CommandKind(Enum):
    """How a translated alias is gated and executed."""

    READ_ONLY = "read_only"
    GATED = "gated"
    COMPOUND = "compound"
    PASSTHROUGH = "passthrough"
    CLONE = "clone"
