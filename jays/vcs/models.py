"""Data models for external tool results.

Contains:
- ListStatus: Outcome of a listing command
- ListResult: Tri-state result of a listing command
"""

from dataclasses import dataclass, field
from enum import Enum


class ListStatus(Enum):
    """Outcome of a listing command."""

    OK = "ok"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class ListResult:
    """Result of listing bookmarks or remotes.

    Listing commands can legitimately return nothing; that case is kept
    apart from a real failure so callers never have to infer it from an
    exit code.
    """

    status: ListStatus
    items: list[str] = field(default_factory=list)
    reason: str = ""

    @classmethod
    def ok(cls, items: list[str]) -> "ListResult":
        if not items:
            return cls(ListStatus.EMPTY)
        return cls(ListStatus.OK, list(items))

    @classmethod
    def empty(cls) -> "ListResult":
        return cls(ListStatus.EMPTY)

    @classmethod
    def error(cls, reason: str) -> "ListResult":
        return cls(ListStatus.ERROR, reason=reason)

    @property
    def is_error(self) -> bool:
        return self.status is ListStatus.ERROR

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return self.status is ListStatus.OK
