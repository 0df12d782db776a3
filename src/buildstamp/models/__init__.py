"""Data models for buildstamp."""

from .commit_hash import CommitHashSource, SourceAttempt, ResolvedCommitHash

__all__ = [
    'CommitHashSource',
    'SourceAttempt',
    'ResolvedCommitHash'
]
