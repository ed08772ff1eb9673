"""
Centralized logging configuration.

The library only emits records through module loggers under the ``tsur``
namespace. Applications opt in to output by calling ``setup_logging`` or
``configure_from_settings``.
"""

import logging
import sys
from typing import Optional
from pathlib import Path

LOGGER_NAME = 'tsur'

# Silent unless the host application configures logging
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(
    level: str = 'WARNING',
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> None:
    """
    Configure the ``tsur`` logger.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string (uses default if None)
        log_file: Optional log file path
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper(), logging.WARNING)
    
    handlers = [logging.StreamHandler(sys.stdout)]
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    
    formatter = logging.Formatter(format_string)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_from_settings(settings) -> None:
    """
    Configure logging from settings object.
    
    Args:
        settings: Settings object with log_level, log_format and log_file
    """
    setup_logging(
        level=settings.log_level,
        format_string=settings.log_format,
        log_file=settings.log_file
    )
