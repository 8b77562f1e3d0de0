"""Per-run session state shared with every action handler."""

from dataclasses import dataclass, field

from jays.config import Settings
from jays.repo_mode import RepoMode


@dataclass(frozen=True)
class Session:
    """Repository mode and settings for one interactive run."""

    mode: RepoMode
    settings: Settings = field(default_factory=Settings)

    @property
    def is_colocated(self) -> bool:
        return self.mode is RepoMode.COLOCATED
