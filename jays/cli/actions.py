"""Main menu action handlers: commit, squash, abandon, new, undo."""

import typer

from jays.cli.push import try_push_bookmark
from jays.cli.utils import PARENT, WORKING_COPY, bookmark_names, show_log
from jays.message import acquire_commit_message, get_generator
from jays.prompts import choose, confirm, report_error, report_success
from jays.session import Session
from jays.vcs import git, jj


def action_commit(session: Session) -> None:
    """Commit the working copy and advance a bookmark to the new commit."""
    message = acquire_commit_message(get_generator(session.settings))
    if not message:
        return

    if session.is_colocated:
        branch = git.current_branch()
        jj.commit(message)
        typer.echo()
        jj.move_nearest_bookmark()
        typer.echo()
        # Detached HEAD: nothing to switch back to
        if branch:
            git.switch(branch)
            typer.echo()
        show_log(session)
        report_success(f"Created a new commit on {branch or 'current revision'}")

        if branch:
            try_push_bookmark(branch)
        return

    target = choose(bookmark_names(), "Choose a branch to commit to")
    if not target:
        report_error("Commit canceled - no branch selected.")
        return

    jj.commit(message)
    typer.echo()
    jj.move_bookmark_to_parent(target)
    typer.echo()
    report_success(f"Committed to {target}")
    show_log(session)
    try_push_bookmark(target)


def action_squash(session: Session) -> None:
    """Squash the working copy into its parent."""
    if not confirm("Do you want to squash the current work into the parent commit"):
        return

    if session.is_colocated:
        branch = git.current_branch()
        jj.squash()
        if branch:
            typer.echo()
            git.switch(branch)
    else:
        jj.squash()
    typer.echo()
    show_log(session)
    report_success("Squashed work to parent")


def action_abandon(session: Session) -> None:
    """Discard the working copy change, keeping bookmarks."""
    if not confirm("Do you want to abandon the current work"):
        return

    jj.abandon()
    typer.echo()
    show_log(session)
    report_success("Abandoned current work")


def new_revision_bases(session: Session) -> list[str]:
    """Get the revisions offered as the base of a new revision.

    In colocated mode the current Git branch comes first and is not
    repeated among the bookmarks.
    """
    bookmarks = bookmark_names()
    if session.is_colocated:
        branch = git.current_branch()
        head = [branch] if branch else []
        return head + [WORKING_COPY, PARENT] + [b for b in bookmarks if b != branch]
    return [WORKING_COPY, PARENT] + bookmarks


def action_new_revision(session: Session) -> None:
    """Create a new empty revision on a chosen base."""
    if not confirm("Do you want to create a new revision"):
        return

    base = choose(new_revision_bases(session), "Choose base for new revision")
    if not base:
        report_error("No base selected.")
        return

    jj.new_revision(base)
    typer.echo()
    report_success(f"Created new revision from {base}")


def action_undo(session: Session) -> None:
    """Undo the last operation and reattach Git if it was left detached."""
    if not confirm("Undo the last operation?"):
        return

    jj.undo()
    typer.echo()
    if session.is_colocated and not git.current_branch():
        bookmarks = bookmark_names()
        if bookmarks:
            git.switch(bookmarks[0])
            typer.echo()
    show_log(session)
    report_success("Undid last operation")
