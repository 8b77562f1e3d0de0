"""Jujutsu command wrappers.

Contains:
- Working copy operations: status, log, commit, squash, abandon, undo, new_revision
- Bookmark operations: list_bookmarks, print_bookmarks, create_bookmark,
  move_bookmark, move_bookmark_to_parent, move_nearest_bookmark, delete_bookmark
- Remote operations: list_remotes, print_remotes, add_remote, remove_remote,
  push_bookmark, fetch
- Repository setup: init_repo
"""

from typing import Optional

from jays.vcs.exceptions import CommandError
from jays.vcs.models import ListResult
from jays.vcs.runner import _run_command, _run_passthrough

# Closest bookmarked ancestor of the new parent revision
NEAREST_BOOKMARK_REVSET = "heads(::@- & bookmarks())"


def _jj(args: list[str]) -> None:
    _run_passthrough(["jj"] + args)


def status() -> None:
    """Show the working copy status."""
    _jj(["st"])


def log(limit: int = 3) -> None:
    """Show the most recent revisions."""
    _jj(["log", "--limit", str(limit)])


def commit(message: str) -> None:
    """Commit the working copy change with the given message."""
    _jj(["commit", f"--message={message}"])


def squash() -> None:
    """Squash the working copy change into its parent."""
    _jj(["squash"])


def abandon() -> None:
    """Abandon the working copy change, leaving bookmarks in place."""
    _jj(["abandon", "--retain-bookmarks"])


def undo() -> None:
    """Undo the last operation."""
    _jj(["undo"])


def new_revision(base: str) -> None:
    """Create a new empty revision on top of base."""
    _jj(["new", base])


def _parse_bookmark_names(output: str) -> list[str]:
    """Extract bookmark names from `jj bookmark list` output.

    Indented lines describe remote tracking state and are skipped.
    Suffixes such as "(conflicted)" are dropped.

    Args:
        output: Raw listing output.

    Returns:
        Bookmark names in listing order, without duplicates.
    """
    names: list[str] = []
    for line in output.splitlines():
        if not line.strip() or line[0].isspace():
            continue
        name = line.split(":", 1)[0].split()[0]
        if name and name not in names:
            names.append(name)
    return names


def list_bookmarks() -> ListResult:
    """List local bookmark names."""
    try:
        output = _run_command(["jj", "bookmark", "list"])
    except CommandError as e:
        return ListResult.error(str(e))
    return ListResult.ok(_parse_bookmark_names(output))


def print_bookmarks() -> None:
    """Print the full bookmark listing."""
    _jj(["bookmark", "list"])


def create_bookmark(name: str, revision: str = "@") -> None:
    """Create a bookmark at revision."""
    _jj(["bookmark", "create", name, "-r", revision])


def move_bookmark(source: str, destination: str) -> None:
    """Move the bookmark(s) at source to destination."""
    _jj(["bookmark", "move", "-f", source, "-t", destination])


def move_bookmark_to_parent(name: str) -> None:
    """Move a bookmark forward to the parent of the working copy."""
    _jj(["bookmark", "move", name, "--from", name, "--to", "@-"])


def move_nearest_bookmark() -> None:
    """Move the nearest bookmark behind the new commit forward to it."""
    _jj(["bookmark", "move", "--from", NEAREST_BOOKMARK_REVSET, "--to", "@-"])


def delete_bookmark(name: str) -> None:
    """Delete a bookmark."""
    _jj(["bookmark", "delete", name])


def _parse_remote_names(output: str) -> list[str]:
    names = []
    for line in output.splitlines():
        if line.strip():
            names.append(line.split()[0])
    return names


def list_remotes() -> ListResult:
    """List configured Git remote names."""
    try:
        output = _run_command(["jj", "git", "remote", "list"])
    except CommandError as e:
        return ListResult.error(str(e))
    return ListResult.ok(_parse_remote_names(output))


def print_remotes() -> None:
    """Print the configured remotes with their URLs."""
    _jj(["git", "remote", "list"])


def add_remote(name: str, url: str) -> None:
    """Add a Git remote."""
    _jj(["git", "remote", "add", name, url])


def remove_remote(name: str) -> None:
    """Remove a Git remote."""
    _jj(["git", "remote", "remove", name])


def push_bookmark(bookmark: str, remote: Optional[str] = None) -> None:
    """Push a bookmark, optionally to a specific remote."""
    args = ["git", "push", "-b", bookmark]
    if remote:
        args += ["--remote", remote]
    _jj(args)


def fetch() -> None:
    """Fetch changes from the remotes."""
    _jj(["git", "fetch"])


def init_repo(colocate: bool = False, git_repo: Optional[str] = None) -> None:
    """Initialize a Jujutsu repository in the current directory.

    Args:
        colocate: Keep .git next to .jj and sync them.
        git_repo: Path of an existing Git repository to link to.
    """
    args = ["git", "init"]
    if colocate:
        args.append("--colocate")
    if git_repo:
        args += ["--git-repo", git_repo]
    _jj(args)
