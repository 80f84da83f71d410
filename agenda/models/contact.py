"""
Contact model for the agenda.

File: models/contact.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class Contact(BaseModel):
    """
    A single agenda entry.

    Immutable once created. Two contacts are duplicates when their names match
    case-insensitively and their phones are identical.
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    name: str = Field(..., description="Contact name", min_length=1)
    phone: str = Field(
        ...,
        description="Phone number, ASCII digits only",
        min_length=1,
        pattern=r"^[0-9]+$",
    )

    def matches_name(self, name: str) -> bool:
        """Case-insensitive name comparison."""
        return self.name.lower() == name.lower()

    def is_duplicate_of(self, other: "Contact") -> bool:
        return self.matches_name(other.name) and self.phone == other.phone

    def display(self, messages: Dict[str, str]) -> str:
        """Render as 'Name: <name>, Phone: <phone>' using the catalog labels."""
        return (
            f"{messages['name_label']}: {self.name}, "
            f"{messages['phone_label']}: {self.phone}"
        )
