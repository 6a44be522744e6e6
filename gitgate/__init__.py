"""gitgate - git aliases with a protected-branch policy.

Forwards a small alias vocabulary to git and refuses mutating commands on
trunk, main and master.
"""

__version__ = "0.1.0"

from gitgate.context import RepositoryContext
from gitgate.dispatcher import Dispatcher
from gitgate.exceptions import GitGateError
from gitgate.policy import PolicyGate
from gitgate.translator import translate

__all__ = [
    "__version__",
    "Dispatcher",
    "GitGateError",
    "PolicyGate",
    "RepositoryContext",
    "translate",
]
