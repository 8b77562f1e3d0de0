"""Menu definitions.

A menu is an ordered list of MenuEntry records. Entries are rendered as
"label - description" and the selection is mapped back to the entry's
tag, so dispatch never depends on the rendered text.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from jays.prompts import choose


@dataclass(frozen=True)
class MenuEntry:
    """One selectable menu line."""

    tag: str
    label: str
    description: str

    def render(self) -> str:
        return f"{self.label} - {self.description}"


def entry(tag: str, description: str) -> MenuEntry:
    return MenuEntry(tag=tag, label=tag, description=description)


def choose_entry(entries: Sequence[MenuEntry], header: str) -> Optional[str]:
    """Show a menu and return the tag of the selected entry.

    Returns:
        The selected tag, or None if the user cancelled.
    """
    by_text = {e.render(): e.tag for e in entries}
    selected = choose(list(by_text), header)
    if selected is None:
        return None
    return by_text.get(selected)


INIT_MENU = [
    entry("standalone", "Pure Jujutsu setup for modern version control"),
    entry("colocate", "Initialize with Git integration for existing workflows"),
    entry("cancel", "Exit without initializing"),
]

MAIN_MENU = [
    entry("commit", "Create permanent commits (with AI option)"),
    entry("squash", "Merge current work into parent"),
    entry("abandon", "Discard current changes"),
    entry("new", "Create new empty revision"),
    entry("undo", "Undo the last operation"),
    entry("bookmark", "Manage bookmarks/branches"),
    entry("remote", "Manage remotes (push/pull)"),
    entry("exit", "Exit"),
]

BOOKMARK_MENU = [
    entry("new", "Create new branch/bookmark"),
    entry("switch", "Switch to existing branch/bookmark"),
    entry("move", "Move existing bookmark to different revision"),
    entry("create", "Create new bookmark at specific revision"),
    entry("delete", "Remove an existing bookmark"),
    entry("list", "Display all bookmarks"),
    entry("back", "Return to main menu"),
]

REMOTE_MENU = [
    entry("push", "Push a bookmark to remote"),
    entry("pull", "Fetch changes from remote"),
    entry("list", "Display remotes"),
    entry("add", "Add new remote"),
    entry("remove", "Remove remote"),
    entry("create", "Create & push to new GitHub repo"),
    entry("back", "Return"),
]

# Shown while no remote is configured: nothing to push, pull or remove
REMOTE_MENU_NO_REMOTES = [
    entry("add", "Add new remote"),
    entry("create", "Create & push to new GitHub repo"),
    entry("list", "Display remotes"),
    entry("back", "Return"),
]


def remote_menu(has_remotes: bool) -> list[MenuEntry]:
    return REMOTE_MENU if has_remotes else REMOTE_MENU_NO_REMOTES
