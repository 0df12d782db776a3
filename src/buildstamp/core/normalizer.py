"""Commit hash normalization and validation."""

import re
from typing import Any, Optional

from ..constants import UNKNOWN_COMMIT_HASH, MIN_COMMIT_HASH_LENGTH, MAX_COMMIT_HASH_LENGTH


# ASCII only; str.isdigit() would accept full-width and other unicode digits
_HEX_PATTERN = re.compile(r'[0-9a-f]+')


def normalize_commit_hash(value: Any) -> Optional[str]:
    """Validate and canonicalize a raw commit hash candidate.

    The value is stripped and lowercased, rejected if it contains anything
    other than hexadecimal digits or is shorter than ``MIN_COMMIT_HASH_LENGTH``,
    and truncated to ``MAX_COMMIT_HASH_LENGTH`` characters.

    Args:
        value: Raw candidate, typically an environment value or git output

    Returns:
        Optional[str]: Normalized commit hash, or None if the candidate is unusable
    """
    if not value or not isinstance(value, str):
        return None

    candidate = value.strip().lower()
    if not _HEX_PATTERN.fullmatch(candidate):
        return None

    if len(candidate) < MIN_COMMIT_HASH_LENGTH:
        return None

    return candidate[:MAX_COMMIT_HASH_LENGTH]


def is_commit_hash(value: Any) -> bool:
    """Check whether a value is already a normalized commit hash."""
    return isinstance(value, str) and normalize_commit_hash(value) == value
