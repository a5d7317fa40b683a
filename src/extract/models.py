"""Data models for snippet extraction."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal


@dataclass
class Identity:
    """A git author identity, keyed by (name, email)."""

    name: str
    email: str
    commit_count: int = 0

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.email)

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass(frozen=True)
class CommitInfo:
    """Author, timestamp and subject of a single commit."""

    name: str
    email: str
    timestamp: datetime  # UTC
    message: str

    @property
    def identity_key(self) -> tuple[str, str]:
        return (self.name, self.email)


@dataclass(frozen=True)
class DiffEvent:
    """One meaningful line of a file section inside a diff.

    - "hunk": a new hunk header was seen
    - "added": an inserted line, leading "+" stripped
    - "break": a context or deleted line
    """

    kind: Literal["hunk", "added", "break"]
    text: str = ""


@dataclass
class FileSection:
    """The events of one retained file within a diff."""

    path: str
    events: list[DiffEvent] = field(default_factory=list)


@dataclass(frozen=True)
class CodeBlock:
    """A maximal run of substantive added code lines."""

    lines: tuple[str, ...]


@dataclass(frozen=True)
class CommentBlock:
    """A run of added comment lines plus the code lines that preceded them."""

    comment_lines: tuple[str, ...]
    context_lines: tuple[str, ...]


@dataclass(frozen=True)
class CodeFragment:
    """A windowed code snippet shown as a quiz question."""

    file_path: str
    lines: tuple[str, ...]
    author: Identity
    change_id: str
    is_self_authored: bool
    fingerprint: str


@dataclass(frozen=True)
class CommentFragment:
    """A comment block shown as a quiz question."""

    file_path: str
    comment_lines: tuple[str, ...]
    context_lines: tuple[str, ...]
    author: Identity
    change_id: str
    is_self_authored: bool
    fingerprint: str


@dataclass(frozen=True)
class DailyStat:
    """Lines added and commits made by the selected identities on one day."""

    day: date
    lines_added: int
    commit_count: int
    avg_lines_per_commit: int
