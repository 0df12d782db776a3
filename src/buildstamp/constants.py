"""Shared constants for commit hash resolution and build stamping.

The sentinel is an out-of-band marker: it is never produced by normalization
and stands for "no provenance identifier could be determined".
"""

UNKNOWN_COMMIT_HASH = "unknown"

# Inclusive bounds on a normalized commit hash (abbreviated .. full SHA-1)
MIN_COMMIT_HASH_LENGTH = 7
MAX_COMMIT_HASH_LENGTH = 40

# Placeholder substituted with the commit hash in output path templates
COMMIT_HASH_PLACEHOLDER = "{commit_hash}"
