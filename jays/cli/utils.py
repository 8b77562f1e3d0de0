"""Shared helpers for action handlers."""

from typing import Callable

from jays.prompts import report_error
from jays.session import Session
from jays.vcs import jj
from jays.vcs.exceptions import CommandError, JaysError

# Revisions offered alongside bookmarks when picking a target
WORKING_COPY = "@"
PARENT = "@-"


def run_handler(handler: Callable[..., None], *args) -> None:
    """Run a handler, reporting a failed external command in one line.

    Nothing is retried or rolled back; the user goes back to the menu.
    """
    try:
        handler(*args)
    except CommandError as e:
        report_error(f"Command failed: {' '.join(e.command)}")
    except JaysError as e:
        report_error(str(e))


def bookmark_names() -> list[str]:
    """Get local bookmark names; an unreadable listing counts as none."""
    return jj.list_bookmarks().items


def remote_names() -> list[str]:
    """Get remote names; an unreadable listing counts as none."""
    return jj.list_remotes().items


def show_log(session: Session) -> None:
    jj.log(limit=session.settings.log_limit)
