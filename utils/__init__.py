"""
Utilities package for Recipe Keeper.

Contains configuration, logging, and shared text helpers.
"""

from .config import Config, get_config, reload_config
from .logger import setup_logging, get_logger, log_operation
from .text_utils import normalize_key, is_non_empty_string, pluralize

__all__ = [
    'Config',
    'get_config',
    'reload_config',
    'setup_logging',
    'get_logger',
    'log_operation',
    'normalize_key',
    'is_non_empty_string',
    'pluralize'
]
