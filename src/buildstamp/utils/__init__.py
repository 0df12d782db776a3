"""Utility modules for buildstamp."""

from .console import (
    _rich_success,
    _rich_error,
    _rich_warning,
    _rich_info,
    _rich_echo,
    _rich_panel,
    _create_table,
    _get_console,
    STATUS_SYMBOLS
)
from .helpers import has_git_directory, is_tool_available

__all__ = [
    '_rich_success',
    '_rich_error',
    '_rich_warning',
    '_rich_info',
    '_rich_echo',
    '_rich_panel',
    '_create_table',
    '_get_console',
    'STATUS_SYMBOLS',
    'has_git_directory',
    'is_tool_available'
]
