"""External command runner.

Contains:
- _run_command: Run a command and return its captured stdout
- _run_passthrough: Run a command with output going straight to the terminal
- _command_succeeds: Run a command quietly and report whether it exited 0
"""

import subprocess

from jays.vcs.exceptions import CommandError, MissingDependencyError


def _run_command(args: list[str]) -> str:
    """Run a command and return its output.

    Args:
        args: Full command line, executable first.

    Returns:
        The stripped stdout of the command.

    Raises:
        CommandError: If the command exits non-zero.
        MissingDependencyError: If the executable is not installed.
    """
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise CommandError(args, (e.stderr or "").strip(), e.returncode)
    except FileNotFoundError:
        raise MissingDependencyError(f"{args[0]} is not installed or not in PATH.")


def _run_passthrough(args: list[str]) -> None:
    """Run a command whose output the user should see.

    Args:
        args: Full command line, executable first.

    Raises:
        CommandError: If the command exits non-zero.
        MissingDependencyError: If the executable is not installed.
    """
    try:
        result = subprocess.run(args, check=False)
    except FileNotFoundError:
        raise MissingDependencyError(f"{args[0]} is not installed or not in PATH.")
    if result.returncode != 0:
        raise CommandError(args, returncode=result.returncode)


def _command_succeeds(args: list[str]) -> bool:
    """Run a command with all output discarded.

    Returns:
        True if the command exited 0.
    """
    try:
        result = subprocess.run(
            args,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except FileNotFoundError:
        return False
    return result.returncode == 0
