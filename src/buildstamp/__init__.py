"""buildstamp: resolve the commit hash a build is stamped with."""

from .version import __version__
from .constants import UNKNOWN_COMMIT_HASH
from .core.normalizer import normalize_commit_hash
from .core.resolver import CommitHashResolver, resolve_commit_hash, ENVIRONMENT_CANDIDATES
from .build.stamp import BuildStamp
from .models.commit_hash import CommitHashSource, ResolvedCommitHash

__all__ = [
    '__version__',
    'UNKNOWN_COMMIT_HASH',
    'normalize_commit_hash',
    'CommitHashResolver',
    'resolve_commit_hash',
    'ENVIRONMENT_CANDIDATES',
    'BuildStamp',
    'CommitHashSource',
    'ResolvedCommitHash'
]
