"""Exception classes for external tool operations.

Contains:
- JaysError: Base exception for jays
- CommandError: Raised when an external command exits non-zero
- MissingDependencyError: Raised when a required executable is not on PATH
- NotAuthenticatedError: Raised when gh is not logged in
"""

from typing import Optional


class JaysError(Exception):
    """Base exception for jays errors."""

    pass


class CommandError(JaysError):
    """Raised when an external command fails."""

    def __init__(self, args: list[str], stderr: str = "", returncode: Optional[int] = None):
        self.command = list(args)
        self.stderr = stderr
        self.returncode = returncode
        message = f"Command failed: {' '.join(self.command)}"
        if stderr:
            message += f"\n{stderr}"
        super().__init__(message)


class MissingDependencyError(JaysError):
    """Raised when a required executable cannot be found."""

    pass


class NotAuthenticatedError(JaysError):
    """Raised when the GitHub CLI has no authenticated session."""

    pass
