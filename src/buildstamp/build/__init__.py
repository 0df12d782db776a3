"""Build stamping: path templating and compiled-in constants."""

from .stamp import BuildStamp, DEFAULT_PATH_TEMPLATES, UnknownArtifactKindError

__all__ = [
    'BuildStamp',
    'DEFAULT_PATH_TEMPLATES',
    'UnknownArtifactKindError'
]
