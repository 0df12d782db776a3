"""Configuration management for buildstamp."""

import os
import json
from pathlib import Path

import yaml

from .factory import GIT_BACKENDS, DEFAULT_GIT_BACKEND


PROJECT_CONFIG_FILE = "buildstamp.yml"
PACKAGE_MANIFEST_FILE = "package.json"

DEFAULT_CONFIG = {
    "git_backend": DEFAULT_GIT_BACKEND,
    "git_timeout": None,
}


def get_config_dir():
    """Get the user configuration directory.

    Returns:
        str: ``$BUILDSTAMP_CONFIG_DIR`` if set, otherwise ``~/.buildstamp``.
    """
    return os.environ.get("BUILDSTAMP_CONFIG_DIR") or os.path.expanduser("~/.buildstamp")


def get_config_file():
    """Get the path to the user configuration file."""
    return os.path.join(get_config_dir(), "config.json")


def ensure_config_exists():
    """Ensure the configuration directory and file exist."""
    config_dir = get_config_dir()
    if not os.path.exists(config_dir):
        os.makedirs(config_dir)

    config_file = get_config_file()
    if not os.path.exists(config_file):
        with open(config_file, "w") as f:
            json.dump(DEFAULT_CONFIG, f)


def get_config():
    """Get the current configuration.

    Returns:
        dict: Current configuration, with defaults for missing keys.
    """
    ensure_config_exists()
    with open(get_config_file(), "r") as f:
        config = json.load(f)

    merged = dict(DEFAULT_CONFIG)
    merged.update(config)
    return merged


def update_config(updates):
    """Update the configuration with new values.

    Args:
        updates (dict): Dictionary of configuration values to update.
    """
    config = get_config()
    config.update(updates)

    with open(get_config_file(), "w") as f:
        json.dump(config, f, indent=2)


def get_git_backend():
    """Get the git backend used to read the checked-out revision.

    Returns:
        str: Git backend name.
    """
    return get_config().get("git_backend") or DEFAULT_GIT_BACKEND


def set_git_backend(backend):
    """Set the git backend.

    Args:
        backend (str): Backend name, "subprocess" or "gitpython".

    Raises:
        ValueError: If the backend is not supported.
    """
    if backend not in GIT_BACKENDS:
        supported = ', '.join(sorted(GIT_BACKENDS))
        raise ValueError(f"Unsupported git backend: {backend} (supported: {supported})")
    update_config({"git_backend": backend})


def read_config():
    """Read the user configuration without creating or failing on it.

    Used on the resolution path, where a missing, unreadable or corrupt
    config file must not stop a build.

    Returns:
        dict: Configuration merged over the defaults, or the defaults alone.
    """
    try:
        with open(get_config_file(), "r") as f:
            config = json.load(f)
    except (OSError, ValueError):
        return dict(DEFAULT_CONFIG)

    merged = dict(DEFAULT_CONFIG)
    if isinstance(config, dict):
        merged.update(config)
    return merged


def get_resolve_settings():
    """Get the git backend and timeout to resolve with, from ``read_config``.

    Unsupported backends and malformed timeouts fall back to the defaults.

    Returns:
        tuple: (backend, timeout) where timeout is seconds or None.
    """
    config = read_config()

    backend = config.get("git_backend")
    if not isinstance(backend, str) or backend not in GIT_BACKENDS:
        backend = DEFAULT_GIT_BACKEND

    try:
        timeout = _parse_timeout(config.get("git_timeout"))
    except (TypeError, ValueError):
        timeout = None

    return backend, timeout


def _parse_timeout(timeout):
    if timeout is None:
        return None
    if isinstance(timeout, bool):
        raise TypeError("git_timeout must be a number")
    return float(timeout)


def get_git_timeout():
    """Get the timeout in seconds for the git subprocess, or None for no timeout."""
    return _parse_timeout(get_config().get("git_timeout"))


def load_project_config(project_root=".", config_file=PROJECT_CONFIG_FILE):
    """Load the project configuration file.

    Args:
        project_root (str or Path, optional): Directory holding the config file.
        config_file (str, optional): File name. Defaults to "buildstamp.yml".

    Returns:
        dict: The configuration, or an empty dict if the file does not exist.

    Raises:
        ValueError: If the file is not valid YAML, not a mapping, or holds
            non-string path templates or non-JSON constants.
    """
    config_path = Path(project_root) / config_file
    if not config_path.exists():
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML format in {config_path}: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"{config_path} must contain a YAML mapping")

    for key in ('paths', 'constants'):
        if config.get(key) is not None and not isinstance(config[key], dict):
            raise ValueError(f"'{key}' in {config_path} must be a mapping")

    version = config.get('version')
    if version is not None and (isinstance(version, bool) or not isinstance(version, (str, int, float))):
        raise ValueError(f"'version' in {config_path} must be a string")

    for kind, template in (config.get('paths') or {}).items():
        if not isinstance(kind, str) or not isinstance(template, str):
            raise ValueError(f"Path template for '{kind}' in {config_path} must be a string")

    constants = config.get('constants') or {}
    for name in constants:
        if not isinstance(name, str):
            raise ValueError(f"Constant name {name!r} in {config_path} must be a string")
    try:
        json.dumps(constants)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Constants in {config_path} must be JSON values (strings, numbers, booleans, null, lists, mappings): {e}")

    return config


def read_package_version(project_root=".", manifest_file=PACKAGE_MANIFEST_FILE):
    """Read the version from the project's package.json, if there is one.

    Args:
        project_root (str or Path, optional): Directory holding the manifest.
        manifest_file (str, optional): File name. Defaults to "package.json".

    Returns:
        str: The manifest version, or None if it is missing or unreadable.
    """
    manifest_path = Path(project_root) / manifest_file
    try:
        with open(manifest_path, 'r', encoding='utf-8') as f:
            manifest = json.load(f)
    except (OSError, ValueError):
        return None

    if not isinstance(manifest, dict):
        return None
    version = manifest.get('version')
    return version if isinstance(version, str) and version else None
