"""Bookmark submenu."""

import typer

from jays.cli.menu import BOOKMARK_MENU, choose_entry
from jays.cli.utils import PARENT, WORKING_COPY, bookmark_names, run_handler, show_log
from jays.prompts import choose, confirm, input_text, report_error, report_info, report_success
from jays.session import Session
from jays.vcs import jj


def bookmark_new(session: Session) -> None:
    """Start a new line of work: a fresh revision plus a bookmark on its parent."""
    if not confirm("Create a new branch/bookmark?"):
        return

    name = input_text("Name your branch/bookmark")
    if not name:
        report_error("No name provided.")
        return

    jj.new_revision(PARENT)
    typer.echo()
    jj.create_bookmark(name, PARENT)
    typer.echo()
    show_log(session)
    report_success(f"Created and switched to '{name}'")


def bookmark_switch(session: Session) -> None:
    target = choose(bookmark_names(), "Switch to branch/bookmark:")
    if not target:
        report_error("No branch selected.")
        return

    jj.new_revision(target)
    typer.echo()
    show_log(session)
    report_success(f"Switched to '{target}'")


def bookmark_move(session: Session) -> None:
    bookmarks = bookmark_names()
    source = choose(bookmarks, "Choose a bookmark to move")
    if not source:
        report_error("No bookmark selected.")
        return

    typer.echo(f"Moving bookmark {source}")
    destination = choose(bookmarks + [WORKING_COPY, PARENT], "Choose where to move the bookmark")
    if not destination:
        report_error("No destination selected.")
        return

    jj.move_bookmark(source, destination)
    typer.echo()
    show_log(session)
    report_success("Moved bookmark")


def bookmark_create(session: Session) -> None:
    name = input_text("Enter bookmark name", header="Create new bookmark")
    if not name:
        report_error("No name provided.")
        return

    location = choose([WORKING_COPY, PARENT] + bookmark_names(), "Choose location for new bookmark")
    if not location:
        report_error("No location selected.")
        return

    jj.create_bookmark(name, location)
    typer.echo()
    show_log(session)
    report_success(f"Created bookmark {name}")


def bookmark_delete(session: Session) -> None:
    target = choose(bookmark_names(), "Choose bookmark to delete")
    if not target:
        report_error("No bookmark selected.")
        return

    if not confirm(f"Delete bookmark '{target}'?"):
        return

    jj.delete_bookmark(target)
    typer.echo()
    show_log(session)
    report_success(f"Deleted bookmark {target}")


def bookmark_list(session: Session) -> None:
    typer.echo("Current bookmarks:")
    jj.print_bookmarks()
    report_info("Listed all bookmarks")


BOOKMARK_HANDLERS = {
    "new": bookmark_new,
    "switch": bookmark_switch,
    "move": bookmark_move,
    "create": bookmark_create,
    "delete": bookmark_delete,
    "list": bookmark_list,
}


def action_bookmarks(session: Session) -> None:
    """Run the bookmark submenu until the user goes back."""
    while True:
        tag = choose_entry(BOOKMARK_MENU, "Bookmarks & Branches:")
        if tag == "back":
            return
        handler = BOOKMARK_HANDLERS.get(tag)
        if handler is None:
            report_error("Canceled action")
            continue
        run_handler(handler, session)
