"""Helper utility functions for buildstamp."""

import shutil
from pathlib import Path


def is_tool_available(tool_name):
    """Check if a command-line tool is available.

    Args:
        tool_name (str): Name of the tool to check.

    Returns:
        bool: True if the tool is available, False otherwise.
    """
    return shutil.which(tool_name) is not None


def has_git_directory(project_root="."):
    """Check whether a project root is a git checkout.

    A ``.git`` file counts as well as a directory, since worktrees and
    submodules use a file that points at the real git directory.

    Args:
        project_root (str or Path, optional): Directory to inspect.

    Returns:
        bool: True if ``<project_root>/.git`` exists, False otherwise.
    """
    try:
        return (Path(project_root) / ".git").exists()
    except OSError:
        return False
