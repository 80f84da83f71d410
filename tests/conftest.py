"""Shared fixtures for agenda tests."""
from __future__ import annotations

import io

import pytest
from rich.console import Console

from agenda import ConsoleInterface, ContactStore, get_messages


@pytest.fixture
def store():
    return ContactStore()


@pytest.fixture
def messages():
    return get_messages("es")


@pytest.fixture
def make_ui():
    """Build a ConsoleInterface fed by scripted lines, with captured output."""

    def _make(*lines, language="es"):
        output = io.StringIO()
        console = Console(file=output, force_terminal=False, color_system=None, width=200)
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        return ConsoleInterface(get_messages(language), console=console, stream=stream), output

    return _make
