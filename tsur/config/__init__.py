"""
Configuration management module.

Centralizes the environment-driven library settings.
"""

from .settings import Settings, get_settings, set_settings

__all__ = [
    'Settings',
    'get_settings',
    'set_settings',
]
