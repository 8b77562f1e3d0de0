"""Repository initialization wizard.

Runs when the working directory is not yet a Jujutsu repository. Every
path through this module ends the process; only an existing Jujutsu
repository (colocated or standalone) continues to the main menu.
"""

from pathlib import Path
from typing import Callable, Optional

import typer

from jays.cli.menu import INIT_MENU, choose_entry
from jays.config import Settings
from jays.prompts import confirm, input_text, report_error, show_panel
from jays.repo_mode import GIT_DIR, JJ_DIR, RepoMode, classify, probe_repository
from jays.vcs import git, jj
from jays.vcs.exceptions import CommandError


class InitTracker:
    """Runs wizard steps in order and remembers what already happened.

    A failing step stops the wizard. Nothing is undone automatically;
    the user is told which steps completed and what to remove to start
    over.
    """

    def __init__(self):
        self.completed: list[str] = []
        self.created: list[str] = []

    def run(self, description: str, func: Callable[..., None], *args, creates: Optional[str] = None) -> None:
        try:
            func(*args)
        except CommandError:
            self.fail(description)
        self.completed.append(description)
        if creates:
            self.created.append(creates)
        typer.echo()

    def fail(self, description: str) -> None:
        report_error(f"Initialization failed: {description}")
        for line in self.recovery_lines():
            typer.echo(line, err=True)
        raise typer.Exit(1)

    def recovery_lines(self) -> list[str]:
        if not self.completed:
            return []
        lines = ["", "MANUAL RECOVERY (if needed):", "  Completed steps:"]
        lines += [f"    - {step}" for step in self.completed]
        if self.created:
            lines.append("  To start over, remove what was created:")
            lines.append(f"    rm -rf {' '.join(self.created)}")
        return lines


def _cancel(message: str = "Initialization canceled.") -> None:
    report_error(message)
    raise typer.Exit(0)


def init_colocated(settings: Settings) -> None:
    """Set up Git and Jujutsu side by side with a shared first bookmark."""
    show_panel([
        "Colocated setup will create:",
        "",
        "• Git repository (.git)",
        "• Jujutsu with Git integration (.jj)",
        "• Initial commit in both systems",
        "• Branch synchronization between Git and Jujutsu",
        "",
        f"Location: {Path.cwd()}",
    ])
    if not confirm("Proceed with colocated initialization?"):
        _cancel()

    tracker = InitTracker()
    tracker.run("git init", git.init, creates=GIT_DIR)
    branch = git.current_branch()
    if not branch:
        tracker.fail("read the current Git branch")
    tracker.run("jj git init --colocate", jj.init_repo, True, creates=JJ_DIR)
    tracker.run(f"create bookmark '{branch}'", jj.create_bookmark, branch, "@")
    tracker.run("initial commit", jj.commit, settings.initial_commit_message)
    tracker.run(f"git switch {branch}", git.switch, branch)


def init_standalone(settings: Settings) -> None:
    """Set up a Jujutsu-only repository with a user-named first bookmark."""
    show_panel([
        "Standalone setup will create:",
        "",
        "• Pure Jujutsu repository (.jj)",
        "• First bookmark (you will name it)",
        "• Initial commit",
        "• No Git integration",
        "",
        f"Location: {Path.cwd()}",
    ])
    if not confirm("Proceed with standalone initialization?"):
        _cancel()

    tracker = InitTracker()
    tracker.run("jj git init", jj.init_repo, creates=JJ_DIR)
    typer.echo("Create the first bookmark")
    bookmark = input_text("name your bookmark")
    if not bookmark:
        _cancel("No bookmark name provided. Initialization canceled.")
    tracker.run(f"create bookmark '{bookmark}'", jj.create_bookmark, bookmark, "@")
    tracker.run("initial commit", jj.commit, settings.initial_commit_message)


def run_init_wizard(settings: Settings) -> None:
    """Ask how to initialize an empty directory, do it, and exit."""
    choice = choose_entry(INIT_MENU, "No .git or .jj found. How do you want to initialize JJ?")
    if choice == "colocate":
        init_colocated(settings)
    elif choice == "standalone":
        init_standalone(settings)
    else:
        _cancel()
    raise typer.Exit(0)


def link_existing_git() -> None:
    """Offer to add Jujutsu on top of an existing Git repository, then exit."""
    typer.echo("Found Git repo but no JJ repo.")
    if confirm("Do you want to initialize JJ and link it to the existing Git repo?"):
        try:
            jj.init_repo(git_repo=".")
        except CommandError:
            report_error("JJ initialization failed.")
            raise typer.Exit(1)
        typer.echo("JJ initialized and linked to Git repo.")
    else:
        report_error("JJ initialization canceled.")
    raise typer.Exit(0)


def resolve_mode(settings: Settings, path: Optional[Path] = None) -> RepoMode:
    """Detect the repository mode, running setup flows when needed.

    Returns:
        COLOCATED or STANDALONE. Every other case exits the process.
    """
    mode = classify(probe_repository(path))
    if mode is None:
        run_init_wizard(settings)
    if mode is RepoMode.PLAIN_GIT:
        link_existing_git()
    return mode
