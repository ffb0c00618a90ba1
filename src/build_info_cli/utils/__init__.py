"""Utility modules for the build-info CLI."""

from .console import (
    _rich_success,
    _rich_error,
    _rich_warning,
    _rich_info,
    _rich_echo,
    _rich_panel,
    _rich_table,
    _create_record_table,
    _get_console,
    STATUS_SYMBOLS,
    ABSENT_MARKER,
)
from .helpers import is_tool_available

__all__ = [
    '_rich_success',
    '_rich_error',
    '_rich_warning',
    '_rich_info',
    '_rich_echo',
    '_rich_panel',
    '_rich_table',
    '_create_record_table',
    '_get_console',
    'STATUS_SYMBOLS',
    'ABSENT_MARKER',
    'is_tool_available',
]
