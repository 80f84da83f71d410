"""
Contact storage for the agenda.
"""

from .contacts import ContactStore
from .errors import (
    ContactError,
    ContactNotFoundError,
    DuplicateContactError,
    EmptyFieldError,
    InvalidPhoneError,
)

__all__ = [
    "ContactStore",
    # Errors
    "ContactError",
    "ContactNotFoundError",
    "DuplicateContactError",
    "EmptyFieldError",
    "InvalidPhoneError",
]
