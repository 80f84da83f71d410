"""End-to-end tests for the menu loop, driven by scripted input."""
from __future__ import annotations

import pytest

from agenda import AgendaApp
from agenda.app import EXIT


@pytest.fixture
def run_app(store, make_ui):
    """Run the menu loop over scripted lines; returns (exit code, output)."""

    def _run(*lines, language="es"):
        ui, output = make_ui(*lines, language=language)
        code = AgendaApp(store, ui).run()
        return code, output.getvalue()

    return _run


class TestMenuLoop:

    def test_exit_option(self, run_app):
        code, output = run_app("4")

        assert code == 0
        assert "Saliendo del programa. Hasta luego!" in output

    def test_add_then_list(self, run_app, store):
        code, output = run_app("1", "Ana", "123", "2", "4")

        assert code == 0
        assert "Contacto agregado: Nombre: Ana, Teléfono: 123" in output
        assert "Lista de contactos:" in output
        assert len(store) == 1

    def test_duplicate_rejected(self, run_app, store):
        _, output = run_app("1", "Ana", "123", "1", "ana", "123", "4")

        assert output.count("Contacto agregado:") == 1
        assert "Error: Ya existe un contacto con este nombre y teléfono." in output
        assert len(store) == 1

    def test_validation_errors_reported(self, run_app, store):
        _, output = run_app("1", "", "123", "1", "Ana", "12a", "4")

        assert "Error: El nombre y el teléfono no pueden estar vacíos." in output
        assert "Error: El teléfono debe contener solo números." in output
        assert store.is_empty

    def test_delete_then_list_is_empty(self, run_app, store):
        _, output = run_app("1", "Ana", "123", "3", "Ana", "2", "4")

        assert "Contacto eliminado: Nombre: Ana, Teléfono: 123" in output
        assert "No hay contactos en la agenda." in output
        assert store.is_empty

    def test_names_printed_as_stored(self, run_app, store):
        _, output = run_app("1", "Ana :smile:", "123", "2", "4")

        assert "Contacto agregado: Nombre: Ana :smile:, Teléfono: 123" in output
        assert "Nombre: Ana :smile:, Teléfono: 123\n" in output
        assert store.list()[0].name == "Ana :smile:"

    def test_delete_missing(self, run_app, store):
        _, output = run_app("1", "Ana", "123", "3", "Bea", "4")

        assert "Error: Contacto no encontrado." in output
        assert len(store) == 1

    def test_non_numeric_choice_reprompts(self, run_app):
        code, output = run_app("abc", "2", "4")

        assert code == 0
        assert "Error: Por favor, ingrese un número válido." in output
        assert "No hay contactos en la agenda." in output

    @pytest.mark.parametrize("choice", ["0", "5", "-1"])
    def test_out_of_range_choice(self, run_app, choice):
        code, output = run_app(choice, "4")

        assert code == 0
        assert "Error: Opción no válida. Por favor, intente de nuevo." in output

    def test_end_of_input_exits_cleanly(self, run_app, store):
        code, output = run_app("1", "Ana")

        assert code == 0
        assert "Saliendo del programa. Hasta luego!" in output
        assert store.is_empty

    def test_english_catalog(self, run_app):
        _, output = run_app("2", "4", language="en")

        assert "There are no contacts in the agenda." in output
        assert "Exiting the program. Goodbye!" in output


class TestHandle:

    def test_exit_stops_loop(self, store, make_ui):
        ui, _ = make_ui()
        assert AgendaApp(store, ui).handle(EXIT) is False

    def test_other_choices_continue(self, store, make_ui):
        ui, _ = make_ui()
        assert AgendaApp(store, ui).handle(2) is True
        assert AgendaApp(store, ui).handle(9) is True
