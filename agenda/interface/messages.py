"""
Message catalogs for the console interface.

File: interface/messages.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
from typing import Dict

log = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "es"

MESSAGES: Dict[str, Dict[str, str]] = {
    "es": {
        "menu_title": "========== Menú ==========",
        "menu_add": "1. Agregar contacto",
        "menu_list": "2. Mostrar contactos",
        "menu_remove": "3. Eliminar contacto",
        "menu_exit": "4. Salir",
        "menu_footer": "=============================",
        "menu_prompt": "Seleccione una opción: ",
        "prompt_name": "Ingrese el nombre del contacto: ",
        "prompt_phone": "Ingrese el teléfono del contacto: ",
        "prompt_remove_name": "Ingrese el nombre del contacto a eliminar: ",
        "name_label": "Nombre",
        "phone_label": "Teléfono",
        "added": "Contacto agregado: ",
        "removed": "Contacto eliminado: ",
        "list_header": "Lista de contactos:",
        "list_empty": "No hay contactos en la agenda.",
        "goodbye": "Saliendo del programa. Hasta luego!",
        "error_generic": "Error: No se pudo completar la operación.",
        "error_not_a_number": "Error: Por favor, ingrese un número válido.",
        "error_invalid_option": "Error: Opción no válida. Por favor, intente de nuevo.",
        "error_empty_fields": "Error: El nombre y el teléfono no pueden estar vacíos.",
        "error_invalid_phone": "Error: El teléfono debe contener solo números.",
        "error_duplicate": "Error: Ya existe un contacto con este nombre y teléfono.",
        "error_not_found": "Error: Contacto no encontrado.",
    },
    "en": {
        "menu_title": "========== Menu ==========",
        "menu_add": "1. Add contact",
        "menu_list": "2. Show contacts",
        "menu_remove": "3. Delete contact",
        "menu_exit": "4. Exit",
        "menu_footer": "=============================",
        "menu_prompt": "Select an option: ",
        "prompt_name": "Enter the contact's name: ",
        "prompt_phone": "Enter the contact's phone: ",
        "prompt_remove_name": "Enter the name of the contact to delete: ",
        "name_label": "Name",
        "phone_label": "Phone",
        "added": "Contact added: ",
        "removed": "Contact deleted: ",
        "list_header": "Contact list:",
        "list_empty": "There are no contacts in the agenda.",
        "goodbye": "Exiting the program. Goodbye!",
        "error_generic": "Error: The operation could not be completed.",
        "error_not_a_number": "Error: Please enter a valid number.",
        "error_invalid_option": "Error: Invalid option. Please try again.",
        "error_empty_fields": "Error: Name and phone cannot be empty.",
        "error_invalid_phone": "Error: Phone must contain digits only.",
        "error_duplicate": "Error: A contact with this name and phone already exists.",
        "error_not_found": "Error: Contact not found.",
    },
}


def get_messages(language: str = DEFAULT_LANGUAGE) -> Dict[str, str]:
    """
    Look up the catalog for a language.

    Unknown languages fall back to the default catalog.
    """
    key = language.strip().lower()
    if key not in MESSAGES:
        log.warning(f"Unknown language {language!r}, falling back to {DEFAULT_LANGUAGE!r}")
        key = DEFAULT_LANGUAGE
    return MESSAGES[key]
