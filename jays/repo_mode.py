"""Repository mode detection.

Contains:
- RepoMode: How the working directory is version-controlled
- RepoLayout: Which metadata directories exist
- probe_repository: Inspect a directory for .jj and .git
- classify: Map a layout to a mode
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

JJ_DIR = ".jj"
GIT_DIR = ".git"


class RepoMode(Enum):
    """Repository mode, decided once per session."""

    COLOCATED = "colocated"
    STANDALONE = "standalone"
    PLAIN_GIT = "plain-git"


@dataclass(frozen=True)
class RepoLayout:
    """Metadata directories present in a working directory."""

    has_jj: bool
    has_git: bool


def probe_repository(path: Optional[Path] = None) -> RepoLayout:
    """Check a directory for Jujutsu and Git metadata.

    Args:
        path: Directory to inspect. Defaults to the current directory.

    Returns:
        The detected layout.
    """
    root = path or Path.cwd()
    return RepoLayout(
        has_jj=(root / JJ_DIR).is_dir(),
        has_git=(root / GIT_DIR).is_dir(),
    )


def classify(layout: RepoLayout) -> Optional[RepoMode]:
    """Classify a layout.

    Returns:
        The repository mode, or None when neither metadata directory
        exists and the repository still has to be initialized.
    """
    if layout.has_jj and layout.has_git:
        return RepoMode.COLOCATED
    if layout.has_jj:
        return RepoMode.STANDALONE
    if layout.has_git:
        return RepoMode.PLAIN_GIT
    return None
