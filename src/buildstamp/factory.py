"""Factory classes for creating adapters."""

from .adapters.git.subprocess_reader import SubprocessGitReader
from .adapters.git.gitpython_reader import GitPythonReader


GIT_BACKENDS = {
    "subprocess": SubprocessGitReader,
    "gitpython": GitPythonReader,
}

DEFAULT_GIT_BACKEND = "subprocess"


class GitReaderFactory:
    """Factory for creating git revision reader adapters."""

    @staticmethod
    def create_reader(backend=DEFAULT_GIT_BACKEND, cwd=".", **kwargs):
        """Create a git revision reader based on the specified backend.

        Args:
            backend (str, optional): Reader backend, "subprocess" or "gitpython".
                Defaults to "subprocess".
            cwd (str or Path, optional): Project root the reader runs in.
            **kwargs: Extra backend options (e.g. ``timeout`` for subprocess).

        Returns:
            GitRevisionReader: An instance of the specified reader.

        Raises:
            ValueError: If the backend is not supported.
        """
        key = (backend or DEFAULT_GIT_BACKEND).lower()
        if key not in GIT_BACKENDS:
            raise ValueError(f"Unsupported git backend: {backend}")

        reader_cls = GIT_BACKENDS[key]
        if reader_cls is SubprocessGitReader:
            return reader_cls(cwd=cwd, **kwargs)
        # GitPython takes no process options
        return reader_cls(cwd=cwd)
