"""
Formulario: lista de campos, foco y ciclo de envío.

El formulario recibe una tecla a la vez. Las teclas de navegación (tab,
shift+tab) son globales; up/down se ofrecen primero al campo con foco y
solo si no las consume se interpretan como cambio de foco; el resto va
al campo con foco. Enter sobre el botón de envío valida todo el
formulario.
"""

import json
import logging
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional

from tuiform.fields import Field
from tuiform.navigation import FocusManager
from tuiform.render import Area, Surface
from tuiform.style import FormStyle
from tuiform.validation import ValidationError
from tuiform.value import Value

if TYPE_CHECKING:
    from tuiform.builder import FormBuilder

logger = logging.getLogger(__name__)


class FormResult(str, Enum):
    """Estado del ciclo de vida del formulario."""
    ACTIVE = "active"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


class Form:
    """Formulario con campos, navegación y validación."""

    def __init__(
        self,
        fields: List[Field],
        title: Optional[str] = None,
        style: Optional[FormStyle] = None,
    ):
        self.title = title
        self._fields = tuple(fields)
        self.focus = FocusManager(len(self._fields))
        self.style = style or FormStyle()
        self.result = FormResult.ACTIVE
        self.validation_errors: List[ValidationError] = []

    @staticmethod
    def builder() -> "FormBuilder":
        from tuiform.builder import FormBuilder
        return FormBuilder()

    @property
    def fields(self) -> tuple:
        return self._fields

    @property
    def is_active(self) -> bool:
        return self.result == FormResult.ACTIVE

    @property
    def focused_field(self) -> Optional[Field]:
        """Campo con foco, o None si el foco está en el botón de envío."""
        if self.focus.is_submit_focused:
            return None
        return self._fields[self.focus.current_index]

    def field(self, field_id: str) -> Optional[Field]:
        """Busca un campo por su id (o el id de una parte de un campo compuesto)."""
        for fld in self._fields:
            if fld.owns(field_id):
                return fld
        return None

    # Entrada

    def handle_input(self, key: str) -> None:
        """Procesa una tecla."""
        if not self.is_active:
            return

        if key == "esc":
            self.cancel()
        elif key == "tab":
            self.focus.focus_next()
        elif key in ("shift+tab", "backtab"):
            self.focus.focus_previous()
        elif key == "enter" and self.focus.is_submit_focused:
            self.try_submit()
        elif key == "down":
            if not self._delegate(key):
                self.focus.focus_next()
        elif key == "up":
            if not self._delegate(key):
                self.focus.focus_previous()
        else:
            self._delegate(key)

    def _delegate(self, key: str) -> bool:
        fld = self.focused_field
        if fld is None:
            return False
        return fld.handle_input(key)

    def cancel(self) -> None:
        self.result = FormResult.CANCELLED
        logger.info("Formulario cancelado")

    def validate(self) -> List[ValidationError]:
        """Valida todos los campos, en orden de declaración."""
        errors: List[ValidationError] = []
        for fld in self._fields:
            errors.extend(fld.validate())
        return errors

    def try_submit(self) -> bool:
        """
        Intenta enviar el formulario.

        Returns:
            True si el formulario quedó enviado
        """
        if not self.is_active:
            return False

        self.validation_errors = self.validate()
        for fld in self._fields:
            fld.record_errors(self.validation_errors)

        logger.debug("Intento de envío: %d errores", len(self.validation_errors))

        if not self.validation_errors:
            self.result = FormResult.SUBMITTED
            logger.info("Formulario enviado")
            return True

        # Foco al primer campo (en orden de declaración) con error
        first = self.validation_errors[0]
        for idx, fld in enumerate(self._fields):
            if fld.owns(first.field_id):
                self.focus.focus_field(idx)
                fld.focus_error(first.field_id)
                break
        return False

    # Exportación

    def to_value_tree(self) -> Dict[str, Value]:
        """Valores de todos los campos, por id y en orden de declaración."""
        return {fld.id: fld.value() for fld in self._fields}

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_value_tree(), indent=indent, ensure_ascii=False)

    # Render

    def render(self, area: Area, surface: Surface) -> None:
        """Dibuja el formulario completo dentro de area."""
        style = self.style
        submit_focused = self.focus.is_submit_focused
        border_style = style.border if submit_focused else style.border_focused
        _draw_frame(surface, area, border_style)

        if self.title:
            surface.set_string(area.x + 2, area.y, f" {self.title} ", style.title,
                               max_width=max(0, area.width - 4))

        inner = area.inner(margin_x=2, margin_y=1)
        if inner.height < 2 or inner.width < 10:
            return

        y = inner.y
        for idx, fld in enumerate(self._fields):
            height = fld.height
            if y + height > inner.bottom:
                break
            focused = not submit_focused and idx == self.focus.current_index
            fld.render(Area(inner.x, y, inner.width, height), surface, focused, style)
            y += height

        # Separador y botón de envío
        y += 1
        if y < inner.bottom:
            self._render_submit(Area(inner.x, y, inner.width, 1), surface)

        if self.validation_errors:
            count = len(self.validation_errors)
            message = "1 validation error" if count == 1 else f"{count} validation errors"
            surface.set_string(inner.x, inner.bottom - 1, message, style.error,
                               max_width=inner.width)

    def _render_submit(self, area: Area, surface: Surface) -> None:
        focused = self.focus.is_submit_focused
        text = "[ Submit ]" if focused else "  Submit  "
        x = area.x + max(0, area.width - len(text)) // 2
        surface.set_string(x, area.y, text,
                           self.style.button_focused if focused else self.style.button)


def _draw_frame(surface: Surface, area: Area, style: str) -> None:
    """Borde redondeado alrededor de area."""
    if area.width < 2 or area.height < 2:
        return
    right, bottom = area.right - 1, area.bottom - 1
    for x in range(area.x + 1, right):
        surface.set_char(x, area.y, "─", style)
        surface.set_char(x, bottom, "─", style)
    for y in range(area.y + 1, bottom):
        surface.set_char(area.x, y, "│", style)
        surface.set_char(right, y, "│", style)
    surface.set_char(area.x, area.y, "╭", style)
    surface.set_char(right, area.y, "╮", style)
    surface.set_char(area.x, bottom, "╰", style)
    surface.set_char(right, bottom, "╯", style)
