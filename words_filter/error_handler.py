"""
Turning exceptions into short messages for people.

The filter library lets errors propagate unchanged; the command line uses
``handle_error`` to log the details and show a readable message.
"""

import traceback
from functools import wraps
from typing import Callable, Tuple

import yaml

from .logging_config import get_logger

logger = get_logger(__name__)


class UserFriendlyError(Exception):
    """Exception with a user-friendly message"""
    def __init__(self, user_message: str, technical_message: str = None):
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        super().__init__(self.technical_message)


def _filename(e: Exception) -> str:
    return getattr(e, 'filename', None) or 'Unknown'


# Order matters: subclasses before their bases
ERROR_MESSAGES = {
    FileNotFoundError: lambda e: (
        "File not found",
        f"The word list could not be found. It may have been moved or deleted.\n\n"
        f"Path: {_filename(e)}"
    ),
    PermissionError: lambda e: (
        "Permission denied",
        f"Unable to read this file. Please check that you have permission "
        f"to access it.\n\nPath: {_filename(e)}"
    ),
    IsADirectoryError: lambda e: (
        "Invalid file",
        "Expected a word list file but got a folder."
    ),
    UnicodeDecodeError: lambda e: (
        "Unreadable file",
        "The file is not valid UTF-8 text. Save it as UTF-8 and try again."
    ),
    yaml.YAMLError: lambda e: (
        "Settings file error",
        f"The configuration file could not be parsed:\n\n{str(e)[:200]}"
    ),
    OSError: lambda e: (
        "Disk error",
        "Unable to read or write files. Please check that the drive is "
        "available and the path is correct."
    ),
}


def get_friendly_message(error: Exception) -> Tuple[str, str]:
    """Get user-friendly title and message for an error"""
    for error_type, msg_func in ERROR_MESSAGES.items():
        if isinstance(error, error_type):
            return msg_func(error)
    
    return (
        "Something went wrong",
        f"An unexpected error occurred:\n\n{str(error)[:200]}"
    )


def handle_error(error: Exception, context: str = "") -> Tuple[str, str]:
    """Log error and return friendly message"""
    logger.error(f"Error in {context}: {error}")
    logger.debug(traceback.format_exc())
    
    return get_friendly_message(error)


def safe_operation(context: str = "operation"):
    """Decorator for safe error handling"""
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except UserFriendlyError:
                raise  # Already friendly, pass through
            except Exception as e:
                title, message = handle_error(e, context)
                raise UserFriendlyError(f"{title}: {message}", str(e)) from e
        return wrapper
    return decorator
