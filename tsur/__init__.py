"""
tsur: Option and Result containers with sequence helpers.
"""

from .option import NONE, Option, OptionVariant, Some
from .result import Err, Ok, Result, ResultVariant
from .array import (
    filter_map,
    first,
    first_index,
    first_map,
    last,
    last_index,
    last_map,
    map_while,
    reduce_while,
)
from .core.exceptions import TsurError, UnwrapError

__version__ = '1.0.0'

__all__ = [
    'NONE',
    'Option',
    'OptionVariant',
    'Some',
    'Err',
    'Ok',
    'Result',
    'ResultVariant',
    'filter_map',
    'first',
    'first_index',
    'first_map',
    'last',
    'last_index',
    'last_map',
    'map_while',
    'reduce_while',
    'TsurError',
    'UnwrapError',
]
