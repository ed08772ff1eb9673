"""
Custom exception hierarchy for the library.

Recoverable failures travel as Result values. These exceptions only
signal programmer errors such as unwrapping the wrong variant.
"""

from typing import Any, Optional


class TsurError(Exception):
    """Base exception for all tsur errors."""
    pass


class UnwrapError(TsurError, ValueError):
    """Raised when a container is unwrapped on the wrong variant."""
    
    def __init__(self, message: str, container: Optional[Any] = None):
        super().__init__(message)
        self.container = container
