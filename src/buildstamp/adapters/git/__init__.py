"""Git revision reader adapters."""

from .base import GitRevisionReader
from .subprocess_reader import SubprocessGitReader
from .gitpython_reader import GitPythonReader

__all__ = [
    'GitRevisionReader',
    'SubprocessGitReader',
    'GitPythonReader'
]
