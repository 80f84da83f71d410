"""
Menu loop tying the contact store to the console interface.

File: app.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging

from .interface import ConsoleInterface
from .store import ContactError, ContactStore

log = logging.getLogger(__name__)

# Menu options
ADD = 1
LIST = 2
REMOVE = 3
EXIT = 4


class AgendaApp:
    """Runs the add/list/delete menu until the user exits."""

    def __init__(self, store: ContactStore, ui: ConsoleInterface):
        self.store = store
        self.ui = ui
        self._actions = {
            ADD: self._add_contact,
            LIST: self._list_contacts,
            REMOVE: self._remove_contact,
        }

    def _add_contact(self):
        name = self.ui.read_text(self.ui.messages["prompt_name"])
        phone = self.ui.read_text(self.ui.messages["prompt_phone"])
        self.ui.show_added(self.store.add(name, phone))

    def _list_contacts(self):
        self.ui.show_contacts(self.store.list())

    def _remove_contact(self):
        name = self.ui.read_text(self.ui.messages["prompt_remove_name"])
        self.ui.show_removed(self.store.remove(name))

    def handle(self, choice: int) -> bool:
        """
        Execute one menu choice.

        Returns:
            False when the loop should stop, True otherwise
        """
        if choice == EXIT:
            return False

        action = self._actions.get(choice)
        if action is None:
            self.ui.show_error("error_invalid_option")
            return True

        try:
            action()
        except ContactError as e:
            self.ui.show_error(e.message_key)
        return True

    def run(self) -> int:
        """Main menu loop. Returns the process exit code."""
        log.info("Agenda started")
        try:
            while True:
                self.ui.show_menu()
                if not self.handle(self.ui.read_choice()):
                    break
        except (EOFError, KeyboardInterrupt):
            # Closed input or Ctrl+C count as a request to exit
            self.ui.console.print()

        self.ui.show_goodbye()
        log.info(f"Agenda closed with {len(self.store)} contacts")
        return 0
