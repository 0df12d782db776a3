"""Commit hash resolution for build stamping.

The resolver picks a single provenance identifier for a build from, in order:

- CI/hosting environment variables (``ENVIRONMENT_CANDIDATES``)
- The checked-out git revision, only when the project root is a git checkout
- The ``unknown`` sentinel

Resolution never fails. Malformed values and git failures fall through to the
next source, so the worst case is a build stamped ``unknown``.
"""

import os
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Tuple, Union

from .normalizer import normalize_commit_hash
from ..constants import UNKNOWN_COMMIT_HASH
from ..models.commit_hash import CommitHashSource, SourceAttempt, ResolvedCommitHash
from ..factory import GitReaderFactory
from ..utils.helpers import has_git_directory


# Priority order: the first variable that normalizes wins
ENVIRONMENT_CANDIDATES: Tuple[str, ...] = (
    'GIT_COMMIT',
    'COMMIT_HASH',
    'SOURCE_VERSION',
    'GITHUB_SHA',
    'CI_COMMIT_SHA',
    'VERCEL_GIT_COMMIT_SHA',
)

GitCommand = Callable[[], Optional[str]]


class CommitHashResolver:
    """Resolves the commit hash a build is stamped with."""

    def __init__(self, candidates: Tuple[str, ...] = ENVIRONMENT_CANDIDATES):
        """Initialize the resolver.

        Args:
            candidates: Environment variable names in priority order
        """
        self.candidates = tuple(candidates)

    def resolve(self, environment: Optional[Mapping[str, str]], has_git_directory: bool,
                run_git_command: Optional[GitCommand]) -> str:
        """Resolve the commit hash.

        Args:
            environment: Environment snapshot; absent and empty values are alike
            has_git_directory: Whether the project root is a git checkout
            run_git_command: Callable returning the raw HEAD hash, or None on failure

        Returns:
            str: Normalized commit hash, or ``UNKNOWN_COMMIT_HASH``
        """
        return self.resolve_detailed(environment, has_git_directory, run_git_command).value

    def resolve_detailed(self, environment: Optional[Mapping[str, str]], has_git_directory: bool,
                         run_git_command: Optional[GitCommand]) -> ResolvedCommitHash:
        """Resolve the commit hash, recording every source that was consulted."""
        attempts: List[SourceAttempt] = []

        variable, commit_hash = self._from_environment(environment, attempts)
        if commit_hash:
            return ResolvedCommitHash(commit_hash, CommitHashSource.ENVIRONMENT, variable, attempts)

        if not has_git_directory or run_git_command is None:
            return ResolvedCommitHash(UNKNOWN_COMMIT_HASH, CommitHashSource.UNKNOWN, None, attempts)

        commit_hash = self._from_git(run_git_command, attempts)
        if commit_hash:
            return ResolvedCommitHash(commit_hash, CommitHashSource.GIT, None, attempts)

        return ResolvedCommitHash(UNKNOWN_COMMIT_HASH, CommitHashSource.UNKNOWN, None, attempts)

    def _from_environment(self, environment: Optional[Mapping[str, str]],
                          attempts: List[SourceAttempt]) -> Tuple[Optional[str], Optional[str]]:
        """Return ``(variable, commit_hash)`` for the first usable candidate."""
        if not isinstance(environment, Mapping):
            return None, None

        for name in self.candidates:
            raw = environment.get(name)
            normalized = normalize_commit_hash(raw)
            attempts.append(SourceAttempt(
                CommitHashSource.ENVIRONMENT, name,
                raw if isinstance(raw, str) else None,
                normalized is not None,
            ))
            if normalized:
                return name, normalized

        return None, None

    def _from_git(self, run_git_command: GitCommand,
                  attempts: List[SourceAttempt]) -> Optional[str]:
        name = getattr(run_git_command, 'name', 'git')
        try:
            raw = run_git_command()
        except Exception:
            # Injected commands may raise; git trouble must never fail a build
            raw = None

        if not isinstance(raw, str):
            raw = None
        normalized = normalize_commit_hash(raw)
        attempts.append(SourceAttempt(CommitHashSource.GIT, name, raw, normalized is not None))
        return normalized


def resolve_commit_hash(project_root: Union[str, Path] = ".",
                        environment: Optional[Mapping[str, str]] = None,
                        reader: Optional[GitCommand] = None) -> ResolvedCommitHash:
    """Resolve the commit hash for a project checkout.

    Args:
        project_root: Directory holding the project (and possibly ``.git``)
        environment: Environment snapshot, defaults to a copy of ``os.environ``
        reader: Git revision reader, defaults to a subprocess reader in project_root

    Returns:
        ResolvedCommitHash: The resolved hash and where it came from
    """
    if environment is None:
        environment = dict(os.environ)

    if reader is None:
        reader = GitReaderFactory.create_reader(cwd=project_root)

    return CommitHashResolver().resolve_detailed(
        environment,
        has_git_directory(project_root),
        reader,
    )
