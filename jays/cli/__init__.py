"""CLI entry point for jays.

jays has no options or subcommands; everything happens in menus.
"""

import typer

from jays.cli.main import main_command

app = typer.Typer(
    name="jays",
    help="jays: interactive Jujutsu helper",
    add_completion=False,
)

app.command()(main_command)


__all__ = [
    "app",
    "main_command",
]
