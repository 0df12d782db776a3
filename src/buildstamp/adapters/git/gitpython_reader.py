"""Git revision reader backed by GitPython."""

from pathlib import Path
from typing import Optional, Union

from .base import GitRevisionReader


class GitPythonReader(GitRevisionReader):
    """Reads HEAD through a GitPython ``Repo``."""

    name = "gitpython"

    def __init__(self, cwd: Union[str, Path] = "."):
        self.cwd = Path(cwd)

    def read_head(self) -> Optional[str]:
        try:
            # GitPython refuses to import when no git binary can be found
            from git import Repo
            from git.exc import GitError
        except ImportError:
            return None

        try:
            repo = Repo(str(self.cwd))
            try:
                return repo.head.commit.hexsha
            finally:
                repo.close()
        except (GitError, ValueError, OSError):
            # ValueError: HEAD points at a branch with no commits yet
            return None
