"""
Campo de texto de una línea.

El cursor es un índice de caracteres sobre el contenido, por lo que
siempre queda entre caracteres completos aunque el texto tenga
caracteres multi-byte.
"""

from typing import Iterable, List, Optional

from tuiform.render import Area, Surface
from tuiform.style import FormStyle
from tuiform.validation import ValidationError, Validator
from tuiform.value import Value

from .base import Field, key_char


class TextInput(Field):
    """Entrada de texto con cursor, placeholder y validadores."""

    def __init__(
        self,
        id: str,
        label: str,
        placeholder: Optional[str] = None,
        required: bool = False,
        validators: Optional[Iterable[Validator]] = None,
        initial_value: str = "",
    ):
        super().__init__(id, label, required)
        self.placeholder = placeholder
        self.validators: List[Validator] = list(validators or [])
        self.content = initial_value
        self.cursor = len(initial_value)

    @property
    def cursor_byte_offset(self) -> int:
        """Posición del cursor en bytes UTF-8."""
        return len(self.content[:self.cursor].encode("utf-8"))

    @property
    def height(self) -> int:
        return 2 if self.errors else 1

    def add_validator(self, validator: Validator) -> "TextInput":
        self.validators.append(validator)
        return self

    def set_value(self, text: str) -> None:
        """Reemplaza el contenido y lleva el cursor al final."""
        self.content = text
        self.cursor = len(text)

    # Edición

    def insert_char(self, char: str) -> None:
        self.content = self.content[:self.cursor] + char + self.content[self.cursor:]
        self.cursor += len(char)

    def delete_before_cursor(self) -> None:
        if self.cursor > 0:
            self.content = self.content[:self.cursor - 1] + self.content[self.cursor:]
            self.cursor -= 1

    def delete_at_cursor(self) -> None:
        if self.cursor < len(self.content):
            self.content = self.content[:self.cursor] + self.content[self.cursor + 1:]

    def move_left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_right(self) -> None:
        if self.cursor < len(self.content):
            self.cursor += 1

    def move_home(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self.content)

    def clear(self) -> None:
        self.content = ""
        self.cursor = 0

    def handle_input(self, key: str) -> bool:
        if key in ("ctrl+a", "home"):
            self.move_home()
        elif key in ("ctrl+e", "end"):
            self.move_end()
        elif key == "ctrl+u":
            self.clear()
        elif key == "backspace":
            self.delete_before_cursor()
        elif key == "delete":
            self.delete_at_cursor()
        elif key == "left":
            self.move_left()
        elif key == "right":
            self.move_right()
        else:
            char = key_char(key)
            if char is None:
                return False
            self.insert_char(char)
        return True

    def value(self) -> Value:
        return self.content

    def validate(self) -> List[ValidationError]:
        errors = []

        if self.required and not self.content.strip():
            errors.append(self._required_error())

        # Se reportan todos los errores, no solo el primero
        for validator in self.validators:
            message = validator.validate(self.content)
            if message is not None:
                errors.append(ValidationError(self.id, message))

        return errors

    def render(self, area: Area, surface: Surface, focused: bool, style: FormStyle) -> None:
        if area.height < 1 or area.width < 1:
            return

        label_width = self._render_label(area, surface, focused, style)
        input_x = area.x + label_width
        input_width = area.width - label_width
        if input_width <= 0:
            return

        surface.fill(Area(input_x, area.y, input_width, 1),
                     style.input_focused if focused else style.input)

        if self.content:
            surface.set_string(input_x, area.y, self.content,
                               style.input_focused if focused else style.input,
                               max_width=input_width)
        elif self.placeholder:
            surface.set_string(input_x, area.y, self.placeholder, style.placeholder,
                               max_width=input_width)

        if focused and self.cursor < input_width:
            surface.set_style(input_x + self.cursor, area.y, "reverse")

        # Primer error bajo la entrada
        if self.errors and area.height > 1:
            surface.set_string(input_x, area.y + 1, self.errors[0].message, style.error,
                               max_width=input_width)
