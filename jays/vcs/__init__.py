"""External tool layer for jays.

This package wraps the command surface jays consumes:
- exceptions: JaysError, CommandError, MissingDependencyError, NotAuthenticatedError
- runner: _run_command, _run_passthrough, _command_succeeds
- models: ListStatus, ListResult
- jj: Jujutsu operations
- git: Git compatibility operations
- gh: GitHub CLI operations
"""

from jays.vcs.exceptions import (
    CommandError,
    JaysError,
    MissingDependencyError,
    NotAuthenticatedError,
)
from jays.vcs.models import ListResult, ListStatus
from jays.vcs import gh, git, jj

__all__ = [
    # Exceptions
    "JaysError",
    "CommandError",
    "MissingDependencyError",
    "NotAuthenticatedError",
    # Models
    "ListResult",
    "ListStatus",
    # Tool modules
    "jj",
    "git",
    "gh",
]
