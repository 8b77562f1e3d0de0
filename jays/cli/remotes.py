"""Remote submenu."""

from typing import Optional

import typer

from jays.cli.menu import choose_entry, remote_menu
from jays.cli.push import try_push_bookmark
from jays.cli.utils import bookmark_names, remote_names, run_handler, show_log
from jays.prompts import choose, confirm, input_text, report_error, report_info, report_success
from jays.session import Session
from jays.vcs import gh, git, jj
from jays.vcs.exceptions import CommandError

# Destination that pushes without scoping to a remote
NEW_BRANCH = "new branch"


def push_source(session: Session, header: str) -> Optional[str]:
    """Get the bookmark to push: the Git branch when colocated, else a choice."""
    if session.is_colocated:
        return git.current_branch() or None
    return choose(bookmark_names(), header)


def remote_push(session: Session) -> None:
    source = push_source(session, "Choose a bookmark to push")
    if not source:
        report_error("No bookmark selected.")
        return

    destination = choose(remote_names() + [NEW_BRANCH], "Choose a remote branch")
    if not destination:
        report_error("No destination selected.")
        return

    try:
        if destination == NEW_BRANCH:
            jj.push_bookmark(source)
        else:
            jj.push_bookmark(source, destination)
    except CommandError:
        report_error(f"Failed to push '{source}'.")
        return
    report_success(f"Pushed '{source}' to remote")


def remote_pull(session: Session) -> None:
    jj.fetch()
    typer.echo()
    show_log(session)
    report_success("Pulled from remote")


def remote_add(session: Session) -> None:
    name = input_text("Choose remote name", header="Add a new remote")
    url = input_text("git@github.com:<USER>/<REPO>.git", header="Input remote SSH URL")
    if not name or not url:
        report_error("Invalid input.")
        return

    jj.add_remote(name, url)
    typer.echo()
    jj.print_remotes()
    report_success(f"Added remote {name}")


def remote_remove(session: Session) -> None:
    target = choose(remote_names(), "Choose a remote to remove")
    if not target:
        report_error("No remote selected.")
        return
    if not confirm(f"Remove remote '{target}'?"):
        return

    jj.remove_remote(target)
    report_success(f"Removed remote {target}")


def remote_create(session: Session) -> None:
    """Create a GitHub repository, add it as origin and offer a push."""
    try:
        user = gh.current_user()
    except CommandError:
        report_error("Could not get GitHub username.")
        return

    repo = input_text("Enter repository name", header="Create GitHub repository")
    if not repo:
        return

    visibility = choose(gh.VISIBILITIES, "Repository visibility:")
    if not visibility:
        return

    typer.echo(f"Creating repository {user}/{repo}...")
    try:
        gh.create_repo(repo, visibility)
    except CommandError:
        report_error("Failed to create repository.")
        return
    typer.echo()

    jj.add_remote("origin", session.settings.remote_url(user, repo))

    source = push_source(session, "Choose bookmark to push")
    if source and try_push_bookmark(source):
        report_success(f"Created repo and pushed {source}")


def remote_list(session: Session) -> None:
    typer.echo("Current remotes:")
    remotes = jj.list_remotes()
    if remotes.is_error or not remotes:
        typer.echo("No remotes configured.")
    else:
        jj.print_remotes()
    report_info("Listed all remotes")


REMOTE_HANDLERS = {
    "push": remote_push,
    "pull": remote_pull,
    "list": remote_list,
    "add": remote_add,
    "remove": remote_remove,
    "create": remote_create,
}


def action_remotes(session: Session) -> None:
    """Run the remote submenu until the user goes back."""
    while True:
        entries = remote_menu(bool(remote_names()))
        tag = choose_entry(entries, "Choose a remote action:")
        if tag == "back":
            return
        handler = REMOTE_HANDLERS.get(tag)
        if handler is None:
            report_error("Canceled")
            continue
        run_handler(handler, session)
