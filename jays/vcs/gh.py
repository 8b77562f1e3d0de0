"""GitHub CLI commands.

Contains:
- is_authenticated: Check for a logged-in gh session
- current_user: Get the login of the authenticated user
- create_repo: Create a hosted repository
"""

from jays.vcs.runner import _command_succeeds, _run_command, _run_passthrough

VISIBILITIES = ["private", "public"]


def is_authenticated() -> bool:
    """Check whether gh has an authenticated session."""
    return _command_succeeds(["gh", "auth", "status"])


def current_user() -> str:
    """Get the GitHub login of the authenticated user.

    Raises:
        CommandError: If the API call fails.
    """
    return _run_command(["gh", "api", "user", "--jq", ".login"])


def create_repo(name: str, visibility: str) -> None:
    """Create a GitHub repository.

    Args:
        name: Repository name.
        visibility: One of VISIBILITIES.
    """
    if visibility not in VISIBILITIES:
        raise ValueError(f"Invalid visibility: {visibility}")
    _run_passthrough(["gh", "repo", "create", name, f"--{visibility}"])
