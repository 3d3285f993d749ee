"""
Clase base de los campos del formulario.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from tuiform.render import Area, Surface
from tuiform.style import FormStyle
from tuiform.validation import ValidationError
from tuiform.value import Value


def key_char(key: str) -> Optional[str]:
    """Retorna el caracter que representa una tecla, o None si es especial."""
    if key == "space":
        return " "
    if len(key) == 1 and key.isprintable():
        return key
    return None


class Field(ABC):
    """
    Unidad de entrada del formulario.

    Cada campo tiene un id inmutable, una etiqueta, un flag required y
    produce exactamente un valor.
    """

    def __init__(self, id: str, label: str, required: bool = False):
        self._id = id
        self.label = label
        self.required = required
        # Errores del último intento de envío (solo para mostrar)
        self.errors: List[ValidationError] = []

    @property
    def id(self) -> str:
        return self._id

    @property
    def height(self) -> int:
        """Filas necesarias para dibujar el campo."""
        return 1

    @abstractmethod
    def render(self, area: Area, surface: Surface, focused: bool, style: FormStyle) -> None:
        """Dibuja el campo en el área indicada."""

    @abstractmethod
    def handle_input(self, key: str) -> bool:
        """Procesa una tecla. Retorna True si la tecla fue consumida."""

    @abstractmethod
    def value(self) -> Value:
        """Valor actual del campo."""

    @abstractmethod
    def validate(self) -> List[ValidationError]:
        """Valida el campo y retorna todos los errores encontrados."""

    def owns(self, field_id: str) -> bool:
        """Indica si un id de error pertenece a este campo."""
        return field_id == self.id

    def record_errors(self, errors: List[ValidationError]) -> None:
        """Guarda los errores del último envío para mostrarlos."""
        self.errors = [e for e in errors if self.owns(e.field_id)]

    def focus_error(self, field_id: str) -> None:
        """Hook para campos compuestos: enfocar la parte con error."""

    def _required_error(self, message: Optional[str] = None) -> ValidationError:
        return ValidationError(self.id, message or f"{self.label} is required")

    def _render_label(self, area: Area, surface: Surface, focused: bool, style: FormStyle) -> int:
        """Dibuja 'Etiqueta*: ' y retorna el ancho ocupado."""
        marker = "*" if self.required else ""
        text = f"{self.label}{marker}: "
        label_style = style.label_focused if focused else style.label
        return surface.set_string(area.x, area.y, text, label_style, max_width=area.width)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
