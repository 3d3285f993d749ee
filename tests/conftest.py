"""Configuración de pytest para tests de tuiform."""

import pytest

from tuiform import AddressBlock, Email, Form


def type_text(target, text):
    """Envía cada caracter de text como una tecla."""
    for char in text:
        target.handle_input(char)


@pytest.fixture
def three_field_form():
    """Formulario con tres campos de texto opcionales."""
    return (
        Form.builder()
        .text("a", "A").done()
        .text("b", "B").done()
        .text("c", "C").done()
        .build()
    )


@pytest.fixture
def shipping_form():
    """Formulario con nombre, email y bloque de dirección requerido."""
    return (
        Form.builder()
        .title("Shipping")
        .text("name", "Full Name").required().done()
        .text("email", "Email").required().validator(Email()).done()
        .block(AddressBlock("ship").required())
        .build()
    )
