"""Prompt and style facade over gum.

Every call blocks until the user answers. gum draws its interface on
the terminal (stdin/stderr stay attached) and writes the answer to
stdout, which is captured here.
"""

import subprocess
from typing import Optional, Sequence

import typer

from jays.vcs.exceptions import MissingDependencyError


# gum style option sets
HEADER_STYLE = [
    "--foreground", "212", "--border-foreground", "62", "--border", "rounded",
    "--align", "center", "--width", "30", "--margin", "1 2", "--padding", "0 2",
]
SUCCESS_STYLE = ["--foreground", "121", "--align", "left", "--width", "40", "--margin", "1 2"]
INFO_STYLE = ["--foreground", "121", "--align", "left", "--width", "40", "--margin", "1 2"]
COMMIT_STYLE = [
    "--border", "rounded", "--padding", "1 2", "--margin", "1 0",
    "--foreground", "226", "--border-foreground", "240",
]
PANEL_STYLE = [
    "--foreground", "212", "--border-foreground", "62", "--border", "rounded",
    "--align", "left", "--padding", "1 2", "--margin", "0 2",
]


def _gum(args: list[str], capture: bool = True) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            ["gum"] + args,
            stdout=subprocess.PIPE if capture else None,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise MissingDependencyError("gum is not installed or not in PATH.")


def confirm(prompt: str) -> bool:
    """Ask a yes/no question."""
    return _gum(["confirm", prompt], capture=False).returncode == 0


def choose(options: Sequence[str], header: str) -> Optional[str]:
    """Let the user pick exactly one option.

    Args:
        options: Options in display order.
        header: Text shown above the list.

    Returns:
        The selected option, or None if there was nothing to choose
        from or the user cancelled.
    """
    if not options:
        return None
    result = _gum(["choose", "--header", header, "--", *options])
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def input_text(
    placeholder: str,
    value: Optional[str] = None,
    header: Optional[str] = None,
) -> Optional[str]:
    """Read one line of text.

    Returns:
        The entered text, or None if cancelled or left blank.
    """
    args = ["input", "--placeholder", placeholder]
    if value is not None:
        args += ["--value", value]
    if header:
        args += ["--header", header]
    result = _gum(args)
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def spin_with_output(title: str, command: Sequence[str]) -> str:
    """Run a command behind a spinner and return its stdout.

    Returns:
        The stripped stdout, or an empty string if the command failed.
    """
    result = _gum(["spin", "--spinner", "dot", "--title", title, "--show-output", "--", *command])
    if result.returncode != 0:
        return ""
    return (result.stdout or "").strip()


def style(lines: Sequence[str], options: Sequence[str]) -> None:
    """Print lines through gum style."""
    _gum(["style", *options, "--", *lines], capture=False)


def show_header() -> None:
    style(["Jays", "Jujutsu Git helper"], HEADER_STYLE)


def show_panel(lines: Sequence[str]) -> None:
    typer.echo()
    style(lines, PANEL_STYLE)
    typer.echo()


def show_commit_message(message: str) -> None:
    """Display a generated commit message in a bordered box."""
    typer.echo(err=True)
    typer.echo("Generated commit message:", err=True)
    style([message], COMMIT_STYLE)
    typer.echo(err=True)


def report_success(message: str) -> None:
    style([message], SUCCESS_STYLE)


def report_info(message: str) -> None:
    style([message], INFO_STYLE)


def report_error(message: str) -> None:
    typer.echo(f"❌ {message}", err=True)
