"""
Core module providing foundational components for the library.

Includes sentinels, exceptions, and logging helpers.
"""

from .exceptions import TsurError, UnwrapError
from .sentinels import EMPTY, Sentinel, same_value
from .logging_config import setup_logging, get_logger, configure_from_settings

__all__ = [
    'TsurError',
    'UnwrapError',
    'EMPTY',
    'Sentinel',
    'same_value',
    'setup_logging',
    'get_logger',
    'configure_from_settings',
]
