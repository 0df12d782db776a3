"""Base adapter interface for reading the checked-out git revision."""

from abc import ABC, abstractmethod
from typing import Optional


class GitRevisionReader(ABC):
    """Base adapter for git revision readers.

    Implementations must never raise from ``read_head``: any failure to reach
    git, the repository or a commit is reported as ``None``.
    """

    name = "git"

    @abstractmethod
    def read_head(self) -> Optional[str]:
        """Get the raw full hash of the currently checked-out revision.

        Returns:
            Optional[str]: Raw hash text as reported by git, or None on failure.
        """
        pass

    def __call__(self) -> Optional[str]:
        return self.read_head()
