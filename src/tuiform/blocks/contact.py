"""
Bloque de datos de contacto.
"""

from typing import List

from tuiform.fields import Field, TextInput
from tuiform.validation import Email, Pattern

from .base import Block


class ContactBlock(Block):
    """Nombre, email y teléfono (el teléfono nunca es requerido)."""

    def fields(self) -> List[Field]:
        required = self.is_required
        return [
            TextInput(self.field_id("name"), "Full Name",
                      placeholder="John Doe", required=required),
            TextInput(self.field_id("email"), "Email",
                      placeholder="john@example.com", required=required,
                      validators=[Email()]),
            TextInput(self.field_id("phone"), "Phone",
                      placeholder="(555) 123-4567",
                      validators=[Pattern.phone()]),
        ]
