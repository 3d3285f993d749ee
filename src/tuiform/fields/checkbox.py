"""
Campo checkbox.
"""

from typing import List

from tuiform.render import Area, Surface
from tuiform.style import FormStyle
from tuiform.validation import ValidationError
from tuiform.value import Value

from .base import Field


class Checkbox(Field):
    """Casilla de verificación. Si es requerida, debe quedar marcada."""

    def __init__(self, id: str, label: str, checked: bool = False, required: bool = False):
        super().__init__(id, label, required)
        self.checked = checked

    def toggle(self) -> None:
        self.checked = not self.checked

    def handle_input(self, key: str) -> bool:
        if key in ("enter", "space", " "):
            self.toggle()
            return True
        return False

    def value(self) -> Value:
        return self.checked

    def validate(self) -> List[ValidationError]:
        if self.required and not self.checked:
            return [self._required_error(f"{self.label} must be checked")]
        return []

    def render(self, area: Area, surface: Surface, focused: bool, style: FormStyle) -> None:
        if area.height < 1 or area.width < 4:
            return

        box_text = "[✓]" if self.checked else "[ ]"
        surface.set_string(area.x, area.y, box_text,
                           style.input_focused if focused else style.input)

        marker = "*" if self.required else ""
        surface.set_string(area.x + 3, area.y, f" {self.label}{marker}",
                           style.label_focused if focused else style.label,
                           max_width=area.width - 3)
