"""
Errors raised by the contact store.

Each error names the message catalog key used to report it, so the console
can show it in the active language.

File: store/errors.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""


class ContactError(Exception):
    """Base class for rejected contact operations."""

    message_key = "error_generic"


class EmptyFieldError(ContactError):
    message_key = "error_empty_fields"


class InvalidPhoneError(ContactError):
    message_key = "error_invalid_phone"


class DuplicateContactError(ContactError):
    message_key = "error_duplicate"


class ContactNotFoundError(ContactError):
    message_key = "error_not_found"
