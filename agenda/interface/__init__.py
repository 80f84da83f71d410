"""
Console interface for the agenda.
"""

from .console import ConsoleInterface
from .messages import DEFAULT_LANGUAGE, MESSAGES, get_messages

__all__ = [
    "ConsoleInterface",
    # Catalogs
    "DEFAULT_LANGUAGE",
    "MESSAGES",
    "get_messages",
]
