"""
Console interface for the agenda.

Reads menu choices and text fields from an input stream and renders prompts
and results through a rich Console. Both ends are injectable, so tests can
drive the menu with a scripted stream and capture what was printed.

File: interface/console.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import re
from typing import Dict, Iterable, Optional, TextIO

from rich.console import Console

from ..models import Contact

# Signed ASCII integer, as a token scanner reads one
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class ConsoleInterface:
    """Menu, prompts and result rendering over a Console and an input stream."""

    def __init__(
        self,
        messages: Dict[str, str],
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        self.messages = messages
        self.console = console or Console()
        self.stream = stream

    def _say(self, text: str, style: Optional[str] = None, end: str = "\n"):
        """Print text verbatim: no markup, emoji codes, highlighting or hard wraps."""
        self.console.print(
            text,
            style=style,
            end=end,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def _read_line(self, prompt: str = "") -> str:
        """
        Read one raw line.

        Raises:
            EOFError: the input is exhausted
        """
        if prompt:
            self._say(prompt, end="")
        line = self.console.input(stream=self.stream)
        # console.input only raises on EOF when reading real stdin
        if self.stream is not None and line == "":
            raise EOFError
        return line

    def show_menu(self):
        """Print the fixed four-option menu and the selection prompt."""
        m = self.messages
        self.console.print()
        self._say(m["menu_title"], style="bold cyan")
        for key in ("menu_add", "menu_list", "menu_remove", "menu_exit"):
            self._say(m[key])
        self._say(m["menu_footer"], style="bold cyan")
        self._say(m["menu_prompt"], end="")

    def read_choice(self) -> int:
        """Read lines until one starts with an integer, reporting anything else."""
        while True:
            tokens = self._read_line().split()
            if not tokens:
                # Blank lines are skipped, like whitespace between tokens
                continue
            if INTEGER_PATTERN.fullmatch(tokens[0]):
                return int(tokens[0])
            self.show_error("error_not_a_number")

    def read_text(self, prompt: str) -> str:
        """Print the prompt and return the trimmed reply."""
        return self._read_line(prompt).strip()

    def show_contacts(self, contacts: Iterable[Contact]):
        contacts = list(contacts)
        if not contacts:
            self._say(self.messages["list_empty"], style="dim")
            return

        self._say(self.messages["list_header"], style="bold")
        for contact in contacts:
            self._say(contact.display(self.messages))

    def show_added(self, contact: Contact):
        self._show_result("added", contact)

    def show_removed(self, contact: Contact):
        self._show_result("removed", contact)

    def _show_result(self, key: str, contact: Contact):
        self._say(self.messages[key] + contact.display(self.messages), style="green")

    def show_error(self, message_key: str):
        """Print the catalog message for an error key."""
        self._say(self.messages[message_key], style="red")

    def show_goodbye(self):
        self._say(self.messages["goodbye"], style="dim")
