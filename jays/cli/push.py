"""Offer to push a bookmark after it has moved."""

from jays.cli.utils import remote_names
from jays.prompts import choose, confirm, report_error, report_success
from jays.vcs import jj
from jays.vcs.exceptions import CommandError


def try_push_bookmark(bookmark: str) -> bool:
    """Ask whether to push a bookmark and push it if confirmed.

    Nothing is asked when no remote is configured. With more than one
    remote the user picks which one to push to.

    Args:
        bookmark: Bookmark to push.

    Returns:
        True if the bookmark was pushed.
    """
    remotes = remote_names()
    if not remotes:
        return False

    if not confirm(f"Push '{bookmark}' to remote?"):
        return False

    remote = None
    if len(remotes) > 1:
        remote = choose(remotes, "Choose remote to push to:")
        if not remote:
            report_error("No remote selected.")
            return False

    try:
        jj.push_bookmark(bookmark, remote)
    except CommandError:
        report_error(f"Failed to push '{bookmark}'.")
        return False

    report_success(f"Pushed '{bookmark}' to remote")
    return True
