"""Commit message acquisition.

Contains:
- MessageGenerator: Base class for commit message generators
- CommandGenerator: Generator backed by an external command
- get_generator: Build the configured generator
- ReviewChoice: Options offered for a generated message
- acquire_commit_message: Obtain a commit message from the user
"""

import shlex
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Sequence

import typer

from jays.config import Settings
from jays.prompts import (
    choose,
    confirm,
    input_text,
    report_error,
    show_commit_message,
    spin_with_output,
)

GENERATING_TITLE = "Generating commit message..."
REGENERATING_TITLE = "Regenerating commit message..."


class MessageGenerator(ABC):
    """Something that can suggest a commit message for the working copy."""

    @abstractmethod
    def generate(self, title: str = GENERATING_TITLE) -> Optional[str]:
        """Suggest a commit message.

        Args:
            title: Progress text shown while generating.

        Returns:
            The suggested message, or None if nothing was produced.
        """
        pass


class CommandGenerator(MessageGenerator):
    """Runs an external command and uses its stdout as the message."""

    def __init__(self, command: Sequence[str]):
        self.command = list(command)

    def shell_command(self) -> list[str]:
        # stderr is dropped so tool diagnostics don't end up in the message
        return ["sh", "-c", f"{shlex.join(self.command)} 2>/dev/null"]

    def generate(self, title: str = GENERATING_TITLE) -> Optional[str]:
        return spin_with_output(title, self.shell_command()) or None


def get_generator(settings: Settings) -> Optional[MessageGenerator]:
    """Get the configured generator, or None if generation is disabled."""
    if not settings.generator.enabled:
        return None
    return CommandGenerator(settings.generator.command)


class ReviewChoice(Enum):
    """What to do with a generated message."""

    ACCEPT = "accept"
    EDIT = "edit"
    REGENERATE = "regenerate"
    CANCEL = "cancel"


def _manual_entry() -> Optional[str]:
    message = input_text("Final commit message")
    if not message:
        typer.echo("No message entered.", err=True)
        return None
    return message


def _review_loop(generator: MessageGenerator, generated: str) -> Optional[str]:
    show_commit_message(generated)

    while True:
        selected = choose([c.value for c in ReviewChoice], "What would you like to do?")
        choice = ReviewChoice(selected) if selected else ReviewChoice.CANCEL

        if choice is ReviewChoice.ACCEPT:
            return generated

        if choice is ReviewChoice.EDIT:
            edited = input_text("Final commit message", value=generated)
            if edited:
                return edited
            report_error("No message provided.")

        elif choice is ReviewChoice.REGENERATE:
            regenerated = generator.generate(REGENERATING_TITLE)
            if regenerated:
                generated = regenerated
                show_commit_message(generated)
            else:
                report_error("Failed to generate message")

        else:
            report_error("Commit canceled.")
            return None


def acquire_commit_message(generator: Optional[MessageGenerator]) -> Optional[str]:
    """Get a commit message, optionally starting from a generated one.

    Generation is offered only when a generator is available. A generator
    that returns nothing falls back to manual entry without review.

    Args:
        generator: Message generator, or None to skip the AI offer.

    Returns:
        The commit message, or None if the user cancelled or entered
        nothing.
    """
    if generator is not None and confirm("Generate commit message with AI?"):
        generated = generator.generate(GENERATING_TITLE)
        if generated:
            return _review_loop(generator, generated)
    return _manual_entry()
