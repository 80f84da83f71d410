"""
In-memory contact store.

Holds the ordered contact list and enforces the validation and uniqueness
rules. Nothing is persisted; the list lives as long as the store does.

File: store/contacts.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
import re
from typing import Iterator, List

from ..models import Contact
from .errors import (
    ContactNotFoundError,
    DuplicateContactError,
    EmptyFieldError,
    InvalidPhoneError,
)

log = logging.getLogger(__name__)

PHONE_PATTERN = re.compile(r"[0-9]+")


class ContactStore:
    """Ordered list of contacts with no duplicate (name, phone) pairs."""

    def __init__(self):
        self._contacts: List[Contact] = []

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._contacts))

    @property
    def is_empty(self) -> bool:
        return not self._contacts

    def add(self, name: str, phone: str) -> Contact:
        """
        Validate and append a new contact.

        Args:
            name: Contact name, must be non-empty
            phone: Phone number, must be non-empty and digits only

        Returns:
            The contact that was added

        Raises:
            EmptyFieldError: name or phone is empty
            InvalidPhoneError: phone contains non-digit characters
            DuplicateContactError: same name (any case) and phone already stored
        """
        name = name.strip()
        phone = phone.strip()

        if not name or not phone:
            log.warning("Rejected contact with empty field")
            raise EmptyFieldError()
        if not PHONE_PATTERN.fullmatch(phone):
            log.warning(f"Rejected non-numeric phone for {name!r}")
            raise InvalidPhoneError(phone)

        contact = Contact(name=name, phone=phone)
        if any(existing.is_duplicate_of(contact) for existing in self._contacts):
            log.warning(f"Rejected duplicate contact {name!r}")
            raise DuplicateContactError(name)

        self._contacts.append(contact)
        log.info(f"Added contact {name!r} ({len(self._contacts)} total)")
        return contact

    def list(self) -> List[Contact]:
        """Snapshot of all contacts in insertion order."""
        return list(self._contacts)

    def remove(self, name: str) -> Contact:
        """
        Remove the first contact whose name matches case-insensitively.

        Raises:
            ContactNotFoundError: no contact has that name
        """
        name = name.strip()
        for i, contact in enumerate(self._contacts):
            if contact.matches_name(name):
                del self._contacts[i]
                log.info(f"Removed contact {contact.name!r} ({len(self._contacts)} left)")
                return contact

        log.warning(f"No contact named {name!r} to remove")
        raise ContactNotFoundError(name)
