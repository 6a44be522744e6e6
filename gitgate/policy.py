"""Branch policy for mutating commands."""

from collections.abc import Iterable

from gitgate.constants import DEFAULT_PROTECTED_BRANCHES
from gitgate.exceptions import PolicyError
from gitgate.logging import get_logger

logger = get_logger("policy")


class PolicyGate:
    """Refuses mutating commands on protected branches.

    Matching is exact and case-sensitive; there are no patterns.
    """

    def __init__(self, protected_branches: Iterable[str] = DEFAULT_PROTECTED_BRANCHES) -> None:
        self.protected_branches = frozenset(protected_branches)

    def is_allowed(self, branch: str) -> bool:
        """Return False when ``branch`` is protected."""
        return branch not in self.protected_branches

    def enforce(self, alias: str, branch: str) -> None:
        """Raise if ``alias`` may not run on ``branch``.

        Raises:
            PolicyError: If the branch is protected
        """
        if not self.is_allowed(branch):
            logger.info(f"Refused {alias} on {branch}", extra={"alias": alias, "branch": branch})
            raise PolicyError(f"command not allowed in {branch}", branch=branch, alias=alias)
