"""Git revision reader backed by the git command-line tool."""

import subprocess
from pathlib import Path
from typing import Optional, Union

from .base import GitRevisionReader


class SubprocessGitReader(GitRevisionReader):
    """Reads HEAD by running ``git rev-parse HEAD``."""

    name = "subprocess"

    def __init__(self, cwd: Union[str, Path] = ".", git_executable: str = "git",
                 timeout: Optional[float] = None):
        """Initialize the reader.

        Args:
            cwd: Directory to run git in (the project root)
            git_executable: Name or path of the git binary
            timeout: Seconds to wait for git, None to wait indefinitely
        """
        self.cwd = Path(cwd)
        self.git_executable = git_executable
        self.timeout = timeout

    def read_head(self) -> Optional[str]:
        try:
            result = subprocess.run(
                [self.git_executable, "rev-parse", "HEAD"],
                cwd=str(self.cwd),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError, ValueError):
            # Missing binary, bad cwd or timeout
            return None

        if result.returncode != 0:
            return None
        return result.stdout
