"""Dependency checks run before any interactive flow starts."""

import shutil

from jays.vcs import gh
from jays.vcs.exceptions import MissingDependencyError, NotAuthenticatedError

# jj: version control, gum: prompts, git: colocation, gh: hosting
REQUIRED_COMMANDS = ["jj", "gum", "git", "gh"]


def find_missing_commands() -> list[str]:
    """Get the required executables that are not on PATH."""
    # noinspection PyArgumentList
    return [cmd for cmd in REQUIRED_COMMANDS if shutil.which(cmd) is None]


def check_dependencies() -> None:
    """Verify required tools are installed and gh is logged in.

    Raises:
        MissingDependencyError: If an executable is missing.
        NotAuthenticatedError: If gh has no authenticated session.
    """
    missing = find_missing_commands()
    if missing:
        raise MissingDependencyError(
            f"Required command '{missing[0]}' not found. Please install it first."
        )

    if not gh.is_authenticated():
        raise NotAuthenticatedError(
            "GitHub CLI is not authenticated. Run 'gh auth login' first."
        )
