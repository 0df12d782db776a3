"""Commit hash normalization and resolution."""

from .normalizer import (
    normalize_commit_hash,
    is_commit_hash,
    UNKNOWN_COMMIT_HASH,
    MIN_COMMIT_HASH_LENGTH,
    MAX_COMMIT_HASH_LENGTH
)
from .resolver import CommitHashResolver, resolve_commit_hash, ENVIRONMENT_CANDIDATES

__all__ = [
    'normalize_commit_hash',
    'is_commit_hash',
    'UNKNOWN_COMMIT_HASH',
    'MIN_COMMIT_HASH_LENGTH',
    'MAX_COMMIT_HASH_LENGTH',
    'CommitHashResolver',
    'resolve_commit_hash',
    'ENVIRONMENT_CANDIDATES'
]
