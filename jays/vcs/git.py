"""Git compatibility layer commands.

Contains:
- init: Initialize a Git repository
- current_branch: Get the checked-out branch name
- switch: Switch to a branch
"""

from jays.vcs.exceptions import CommandError
from jays.vcs.runner import _run_command, _run_passthrough


def init() -> None:
    """Initialize a Git repository in the current directory."""
    _run_passthrough(["git", "init"])


def current_branch() -> str:
    """Get the current branch name.

    Returns:
        The branch name, or an empty string when HEAD is detached or
        the branch cannot be determined.
    """
    try:
        return _run_command(["git", "branch", "--show-current"])
    except CommandError:
        return ""


def switch(branch: str) -> None:
    """Switch the Git working tree to branch."""
    _run_passthrough(["git", "switch", branch])
