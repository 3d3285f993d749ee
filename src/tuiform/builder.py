"""
Constructor fluido de formularios.

Ejemplo:
    form = (
        Form.builder()
        .title("Shipping Info")
        .text("name", "Full Name").required().done()
        .text("email", "Email").required().validator(Email()).done()
        .block(AddressBlock("shipping").required())
        .build()
    )
"""

from typing import Iterable, List, Optional, Tuple

from tuiform.blocks import Block
from tuiform.fields import Checkbox, Field, Select, TextInput
from tuiform.form import Form
from tuiform.style import FormStyle
from tuiform.validation import Validator


class FormBuilder:
    """Acumula campos y bloques y produce un Form."""

    def __init__(self):
        self._title: Optional[str] = None
        self._style: Optional[FormStyle] = None
        self._fields: List[Field] = []

    def title(self, title: str) -> "FormBuilder":
        self._title = title
        return self

    def style(self, style: FormStyle) -> "FormBuilder":
        self._style = style
        return self

    def text(self, id: str, label: str) -> "TextFieldBuilder":
        return TextFieldBuilder(self, TextInput(id, label))

    def select(self, id: str, label: str) -> "SelectFieldBuilder":
        return SelectFieldBuilder(self, Select(id, label))

    def checkbox(self, id: str, label: str) -> "CheckboxFieldBuilder":
        return CheckboxFieldBuilder(self, Checkbox(id, label))

    def field(self, field: Field) -> "FormBuilder":
        """Agrega un campo ya construido."""
        self._fields.append(field)
        return self

    def block(self, block: Block) -> "FormBuilder":
        """Agrega los campos de un bloque en la posición actual."""
        self._fields.extend(block.fields())
        return self

    def build(self) -> Form:
        """
        Construye el formulario.

        Raises:
            ValueError: si hay ids de campo repetidos
        """
        seen = set()
        for fld in self._fields:
            if fld.id in seen:
                raise ValueError(f"Id de campo duplicado: {fld.id}")
            seen.add(fld.id)
        return Form(list(self._fields), title=self._title, style=self._style)


class _StageBuilder:
    """Base de los constructores de campo: done() vuelve al formulario."""

    def __init__(self, form_builder: FormBuilder, field: Field):
        self._form_builder = form_builder
        self.field = field

    def required(self):
        self.field.required = True
        return self

    def done(self) -> FormBuilder:
        return self._form_builder.field(self.field)


class TextFieldBuilder(_StageBuilder):
    field: TextInput

    def placeholder(self, placeholder: str) -> "TextFieldBuilder":
        self.field.placeholder = placeholder
        return self

    def initial_value(self, value: str) -> "TextFieldBuilder":
        self.field.set_value(value)
        return self

    def validator(self, validator: Validator) -> "TextFieldBuilder":
        self.field.add_validator(validator)
        return self


class SelectFieldBuilder(_StageBuilder):
    field: Select

    def option(self, value: str, display: str) -> "SelectFieldBuilder":
        self.field.add_option(value, display)
        return self

    def options(self, options: Iterable[Tuple[str, str]]) -> "SelectFieldBuilder":
        self.field.add_options(options)
        return self

    def initial_value(self, value: str) -> "SelectFieldBuilder":
        self.field.select_value(value)
        return self


class CheckboxFieldBuilder(_StageBuilder):
    field: Checkbox

    def checked(self, checked: bool = True) -> "CheckboxFieldBuilder":
        self.field.checked = checked
        return self
