"""Utility functions."""

from .config import config_section, get_default_config, load_config, resolve_config
from .datetime_utils import format_timestamp, now_iso, parse_timestamp
from .logging_config import configure_logging
from .storage_config import StorageConfig, resolve_working_directory

__all__ = [
    'load_config', 'get_default_config', 'resolve_config', 'config_section',
    'now_iso', 'parse_timestamp', 'format_timestamp',
    'configure_logging', 'StorageConfig', 'resolve_working_directory',
]
