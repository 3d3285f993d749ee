"""
Gestión del foco entre campos.

Los N campos y el botón virtual de envío forman una lista cíclica de N+1
posiciones. En todo momento tiene el foco un campo o el botón, nunca ambos.
"""

import logging

logger = logging.getLogger(__name__)


class FocusManager:
    """Navegación de foco: campos 0..N-1 y el botón de envío al final."""

    def __init__(self, field_count: int):
        self.field_count = field_count
        self.current_index = 0
        # Sin campos, el único destino posible es el botón
        self.submit_focused = field_count == 0

    @property
    def is_submit_focused(self) -> bool:
        return self.submit_focused

    def focus_next(self) -> None:
        if self.submit_focused:
            if self.field_count == 0:
                return
            self.submit_focused = False
            self.current_index = 0
        elif self.current_index + 1 >= self.field_count:
            self.submit_focused = True
        else:
            self.current_index += 1
        logger.debug("Foco siguiente -> %s", self.describe())

    def focus_previous(self) -> None:
        if self.submit_focused:
            if self.field_count == 0:
                return
            self.submit_focused = False
            self.current_index = self.field_count - 1
        elif self.current_index > 0:
            self.current_index -= 1
        else:
            self.submit_focused = True
        logger.debug("Foco anterior -> %s", self.describe())

    def focus_field(self, index: int) -> None:
        """Salta a un campo. Índices fuera de rango se ignoran."""
        if 0 <= index < self.field_count:
            self.current_index = index
            self.submit_focused = False

    def focus_submit(self) -> None:
        self.submit_focused = True

    def set_field_count(self, count: int) -> None:
        self.field_count = count
        if self.current_index >= count:
            self.current_index = max(0, count - 1)
        if count == 0:
            self.submit_focused = True

    def describe(self) -> str:
        return "submit" if self.submit_focused else f"campo {self.current_index}"
