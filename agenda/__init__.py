"""
Agenda: an interactive console contact list.

Provides:
- Contact: immutable name/phone value
- ContactStore: in-memory list with validation and uniqueness rules
- ConsoleInterface: menu, prompts and rendering over a rich Console
- AgendaApp: the menu loop
"""

from .app import AgendaApp
from .config import AgendaConfig, load_config
from .interface import ConsoleInterface, get_messages
from .models import Contact
from .store import ContactStore

__all__ = [
    "AgendaApp",
    "AgendaConfig",
    "load_config",
    "ConsoleInterface",
    "get_messages",
    "Contact",
    "ContactStore",
]
