"""
Optional extensions built on top of the core helpers.
"""

from .sequence import Seq

__all__ = [
    'Seq',
]
