"""Version management for buildstamp."""

import re
import sys
from pathlib import Path

# Build-time version constant (will be injected during build)
# This avoids TOML parsing overhead during runtime
__BUILD_VERSION__ = None


def get_version() -> str:
    """
    Get the current version efficiently.

    First tries build-time constant, then installed package metadata, then
    falls back to pyproject.toml parsing.

    Returns:
        str: Version string
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    try:
        from importlib.metadata import version, PackageNotFoundError
        try:
            return version("buildstamp")
        except PackageNotFoundError:
            pass
    except ImportError:
        pass

    # Development checkout
    try:
        if getattr(sys, 'frozen', False):
            pyproject_path = Path(sys._MEIPASS) / 'pyproject.toml'
        else:
            pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"

        if pyproject_path.exists():
            content = pyproject_path.read_text(encoding='utf-8')

            # Look for version = "x.y.z" pattern (including PEP 440 prereleases)
            match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
            if match:
                version_str = match.group(1)
                if re.match(r'^\d+\.\d+\.\d+(a\d+|b\d+|rc\d+)?$', version_str):
                    return version_str
    except OSError:
        pass

    return "unknown"


__version__ = get_version()
