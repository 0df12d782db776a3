"""Commit hash resolution result models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..constants import UNKNOWN_COMMIT_HASH, MIN_COMMIT_HASH_LENGTH


class CommitHashSource(Enum):
    """Where a resolved commit hash came from."""
    ENVIRONMENT = "environment"
    GIT = "git"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SourceAttempt:
    """A single candidate that was looked at during resolution."""
    source: CommitHashSource
    name: str  # environment variable or git reader name
    raw: Optional[str]
    accepted: bool

    def __str__(self) -> str:
        status = "accepted" if self.accepted else "rejected"
        if self.raw is None:
            return f"{self.source.value}:{self.name} (not set)"
        return f"{self.source.value}:{self.name} ({status})"


@dataclass(frozen=True)
class ResolvedCommitHash:
    """The outcome of commit hash resolution, with its provenance trail."""
    value: str
    source: CommitHashSource
    variable: Optional[str] = None  # winning environment variable, if any
    attempts: List[SourceAttempt] = field(default_factory=list)

    @property
    def is_known(self) -> bool:
        """Whether a real commit hash was found."""
        return self.value != UNKNOWN_COMMIT_HASH

    def short(self) -> str:
        """Get the abbreviated form used in human-facing output."""
        if not self.is_known:
            return self.value
        return self.value[:MIN_COMMIT_HASH_LENGTH]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "commit_hash": self.value,
            "source": self.source.value,
            "variable": self.variable,
        }

    def __str__(self) -> str:
        return self.value
