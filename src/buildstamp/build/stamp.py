"""Build stamp: the resolved commit hash and the build settings that consume it.

A ``BuildStamp`` is created once per build invocation and handed to whatever
needs the commit hash, so there is no process-wide global to read from.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..constants import COMMIT_HASH_PLACEHOLDER, UNKNOWN_COMMIT_HASH
from ..core.normalizer import is_commit_hash


# Output filename templates per artifact kind. Bracketed tokens are left for
# the bundler to fill in; only the commit hash is substituted here.
DEFAULT_PATH_TEMPLATES: Dict[str, str] = {
    'scripts': f"{COMMIT_HASH_PLACEHOLDER}/scripts/[name].js",
    'styles': f"{COMMIT_HASH_PLACEHOLDER}/styles/[name].css",
    'fonts': f"{COMMIT_HASH_PLACEHOLDER}/fonts/[name][ext][query]",
    'binaries': f"{COMMIT_HASH_PLACEHOLDER}/binaries/[name][ext][query]",
    'images': "images/[name][ext][query]",
}


class UnknownArtifactKindError(KeyError):
    """Raised when asking for a path template that does not exist."""


@dataclass(frozen=True)
class BuildStamp:
    """Commit hash plus the path templates and constants stamped with it."""
    commit_hash: str
    version: Optional[str] = None
    path_templates: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PATH_TEMPLATES))
    extra_constants: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.commit_hash != UNKNOWN_COMMIT_HASH and not is_commit_hash(self.commit_hash):
            raise ValueError(f"Not a normalized commit hash: {self.commit_hash!r}")

    @classmethod
    def from_config(
        cls,
        commit_hash: str,
        project_config: Optional[Mapping[str, Any]] = None,
        fallback_version: Optional[str] = None,
    ) -> "BuildStamp":
        """Create a stamp from a resolved hash and a ``buildstamp.yml`` mapping.

        Args:
            commit_hash: Resolved commit hash or the unknown sentinel
            project_config: Parsed project configuration, may be empty
            fallback_version: Version to use when the configuration sets none,
                typically the one from package.json

        Returns:
            BuildStamp: Stamp with configured templates merged over the defaults
        """
        project_config = project_config or {}

        templates = dict(DEFAULT_PATH_TEMPLATES)
        templates.update(project_config.get('paths') or {})

        version = project_config.get('version')
        if version is None:
            version = fallback_version
        return cls(
            commit_hash=commit_hash,
            version=str(version) if version is not None else None,
            path_templates=templates,
            extra_constants=dict(project_config.get('constants') or {}),
        )

    def output_path(self, kind: str) -> str:
        """Get the output filename template for an artifact kind.

        Args:
            kind: Artifact kind, e.g. "scripts" or "styles"

        Returns:
            str: Template with the commit hash substituted

        Raises:
            UnknownArtifactKindError: If no template exists for the kind
        """
        if kind not in self.path_templates:
            available = ', '.join(sorted(self.path_templates))
            raise UnknownArtifactKindError(f"Unknown artifact kind '{kind}'. Available kinds: {available}")
        return self.path_templates[kind].replace(COMMIT_HASH_PLACEHOLDER, self.commit_hash)

    def output_paths(self) -> Dict[str, str]:
        """Get every output filename template with the commit hash substituted."""
        return {kind: self.output_path(kind) for kind in self.path_templates}

    def constants(self) -> Dict[str, Any]:
        """Get the constants compiled into the built application.

        Configured extras come first so that ``COMMIT_HASH`` and ``VERSION``
        always reflect this build.
        """
        values = dict(self.extra_constants)
        values['VERSION'] = self.version
        values['COMMIT_HASH'] = self.commit_hash
        return values

    def define_constants(self, prefix: str = "process.env.") -> Dict[str, str]:
        """Get the constants as JSON-encoded replacements for a define step."""
        return {f"{prefix}{name}": json.dumps(value) for name, value in self.constants().items()}
