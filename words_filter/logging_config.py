"""
Centralized logging configuration for words_filter.

The library itself only creates module loggers; applications (and the
``words-filter`` command) call ``setup_logging`` once to attach handlers.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


# Global flag to prevent duplicate initialization
_logging_initialized = False

LOGGER_NAME = "words_filter"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    force: bool = False,
) -> logging.Logger:
    """
    Configure logging for the package.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path, rotated at 5MB
        console: Whether to log to stderr
        force: Force reconfiguration even if already initialized
    
    Returns:
        The package logger
    """
    global _logging_initialized
    
    if _logging_initialized and not force:
        return logging.getLogger(LOGGER_NAME)
    
    log_level = getattr(logging, level.upper(), logging.INFO)
    
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(log_level)
    
    # Clear any existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        # Rotating file handler: 5MB max, keep 3 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    
    _logging_initialized = True
    
    root_logger.debug(f"Logging initialized: level={level}, file={log_file or '-'}")
    
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.
    
    Usage:
        from words_filter.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)

