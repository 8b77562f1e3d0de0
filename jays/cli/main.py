"""Main CLI command: preflight, repository detection and the action loop."""

import typer

from jays.cli.actions import (
    action_abandon,
    action_commit,
    action_new_revision,
    action_squash,
    action_undo,
)
from jays.cli.bookmarks import action_bookmarks
from jays.cli.init import resolve_mode
from jays.cli.menu import MAIN_MENU, choose_entry
from jays.cli.remotes import action_remotes
from jays.cli.utils import run_handler
from jays.config import Settings, load_config
from jays.global_config import GlobalConfigError
from jays.preflight import check_dependencies
from jays.prompts import report_error, show_header
from jays.session import Session
from jays.vcs import jj
from jays.vcs.exceptions import MissingDependencyError, NotAuthenticatedError

ACTION_HANDLERS = {
    "commit": action_commit,
    "squash": action_squash,
    "abandon": action_abandon,
    "new": action_new_revision,
    "undo": action_undo,
    "bookmark": action_bookmarks,
    "remote": action_remotes,
}


def load_settings() -> Settings:
    """Load settings, falling back to defaults if the config is broken."""
    try:
        return load_config()
    except GlobalConfigError as e:
        report_error(f"{e}. Using default settings.")
        return Settings()


def run_main_loop(session: Session) -> None:
    """Show status and the action menu until the user chooses exit."""
    while True:
        typer.echo()
        run_handler(jj.status)
        typer.echo()

        action = choose_entry(MAIN_MENU, "Choose your action:")
        if action == "exit":
            break

        handler = ACTION_HANDLERS.get(action)
        if handler is None:
            report_error("Unknown action")
            continue
        run_handler(handler, session)


def main_command() -> None:
    """Interactive Jujutsu helper: commit, squash, bookmarks and remotes."""
    try:
        check_dependencies()
    except (MissingDependencyError, NotAuthenticatedError) as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(1)

    settings = load_settings()
    show_header()

    mode = resolve_mode(settings)
    run_main_loop(Session(mode=mode, settings=settings))
