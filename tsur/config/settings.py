"""
Library settings.

Centralizes the few configurable values, read from the environment.
"""

import logging
import os
from typing import Optional, Dict, Any
from dotenv import load_dotenv


class Settings:
    """
    Library settings.
    
    Every value can be overridden with a ``TSUR_`` environment variable.
    """
    
    def __init__(self):
        """Initialize settings from environment and defaults."""
        # Logging Settings
        self.log_level = os.getenv('TSUR_LOG_LEVEL', 'WARNING')
        self.log_format = os.getenv(
            'TSUR_LOG_FORMAT',
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        self.log_file = os.getenv('TSUR_LOG_FILE')
        
        # Attach tracebacks to the debug records of captured exceptions
        self.log_captured_tracebacks = os.getenv(
            'TSUR_LOG_CAPTURED_TRACEBACKS', 'false'
        ).lower() == 'true'
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.
        
        Args:
            key: Configuration key (supports dot notation)
            default: Default value if not found
            
        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self
        
        for k in keys:
            if hasattr(value, k):
                value = getattr(value, k)
            else:
                return default
        
        return value if value is not None else default
    
    def validate(self) -> bool:
        """
        Validate the settings.
        
        Returns:
            True if the log level names a known logging level
        """
        return isinstance(logging.getLevelName(self.log_level.upper()), int)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'log_level': self.log_level,
            'log_format': self.log_format,
            'log_file': self.log_file,
            'log_captured_tracebacks': self.log_captured_tracebacks,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings instance.
    
    The first call loads a ``.env`` file into the environment before
    reading it.
    """
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings()
    return _settings


def set_settings(settings: Optional[Settings]):
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
