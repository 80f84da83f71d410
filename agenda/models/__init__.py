"""
Shared data models for the agenda.
"""

from .contact import Contact

__all__ = [
    "Contact",
]
