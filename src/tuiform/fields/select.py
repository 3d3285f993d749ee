"""
Campo de selección (dropdown).

Estados: cerrado y abierto. Al abrir, el resaltado parte de la opción
seleccionada (o de la primera). Confirmar copia el resaltado a la
selección; cancelar cierra sin cambiarla.
"""

from typing import Iterable, List, Optional, Tuple

from tuiform.render import Area, Surface
from tuiform.style import FormStyle
from tuiform.validation import ValidationError
from tuiform.value import Value

from .base import Field

# Opciones visibles con el dropdown abierto
MAX_VISIBLE_OPTIONS = 10


class Select(Field):
    """Selección de una opción entre pares (valor, texto)."""

    def __init__(
        self,
        id: str,
        label: str,
        options: Optional[Iterable[Tuple[str, str]]] = None,
        required: bool = False,
        initial_value: Optional[str] = None,
    ):
        super().__init__(id, label, required)
        self.options: List[Tuple[str, str]] = []
        self.selected: Optional[int] = None
        self.is_open = False
        self.highlighted = 0
        if options:
            self.add_options(options)
        if initial_value is not None:
            self.select_value(initial_value)

    def add_option(self, value: str, display: str) -> "Select":
        self.options.append((value, display))
        return self

    def add_options(self, options: Iterable[Tuple[str, str]]) -> "Select":
        for value, display in options:
            self.options.append((value, display))
        return self

    def select_value(self, value: str) -> bool:
        """Selecciona la opción con ese valor. Valores desconocidos se ignoran."""
        for idx, (opt_value, _) in enumerate(self.options):
            if opt_value == value:
                self.selected = idx
                self.highlighted = idx
                return True
        return False

    @property
    def selected_option(self) -> Optional[Tuple[str, str]]:
        if self.selected is None:
            return None
        return self.options[self.selected]

    @property
    def height(self) -> int:
        if self.is_open:
            return 1 + min(len(self.options), MAX_VISIBLE_OPTIONS)
        return 1

    # Transiciones

    def open(self) -> None:
        self.is_open = True
        self.highlighted = self.selected if self.selected is not None else 0

    def close(self) -> None:
        self.is_open = False

    def confirm(self) -> None:
        if self.options:
            self.selected = self.highlighted
        self.is_open = False

    def highlight_up(self) -> None:
        if self.highlighted > 0:
            self.highlighted -= 1

    def highlight_down(self) -> None:
        if self.highlighted < len(self.options) - 1:
            self.highlighted += 1

    def handle_input(self, key: str) -> bool:
        if key in ("enter", "space", " "):
            if self.is_open:
                self.confirm()
            else:
                self.open()
            return True

        if key == "esc":
            if self.is_open:
                self.close()
                return True
            return False

        if key == "up":
            if self.is_open:
                self.highlight_up()
                return True
            return False

        if key == "down":
            # Cerrado: la primera flecha abajo despliega las opciones
            if self.is_open:
                self.highlight_down()
            else:
                self.open()
            return True

        return False

    def value(self) -> Value:
        option = self.selected_option
        return option[0] if option else None

    def validate(self) -> List[ValidationError]:
        if self.required and self.selected is None:
            return [self._required_error()]
        return []

    def visible_window(self) -> range:
        """Rango de opciones visibles, siguiendo al resaltado."""
        n = len(self.options)
        if n <= MAX_VISIBLE_OPTIONS:
            return range(n)
        start = min(max(0, self.highlighted - MAX_VISIBLE_OPTIONS + 1), n - MAX_VISIBLE_OPTIONS)
        return range(start, start + MAX_VISIBLE_OPTIONS)

    def render(self, area: Area, surface: Surface, focused: bool, style: FormStyle) -> None:
        if area.height < 1 or area.width < 1:
            return

        label_width = self._render_label(area, surface, focused, style)
        input_x = area.x + label_width
        input_width = area.width - label_width
        if input_width <= 0:
            return

        input_style = style.input_focused if focused else style.input
        surface.fill(Area(input_x, area.y, input_width, 1), input_style)

        option = self.selected_option
        display = option[1] if option else "-- Select --"
        surface.set_string(input_x, area.y, display, input_style,
                           max_width=max(0, input_width - 2))

        arrow = " ▲" if self.is_open else " ▼"
        surface.set_string(area.right - 2, area.y, arrow, input_style)

        if not self.is_open:
            return

        for row, idx in enumerate(self.visible_window(), start=1):
            if row >= area.height:
                break
            y = area.y + row
            if idx == self.highlighted:
                option_style = "white on blue"
            elif idx == self.selected:
                option_style = "white on grey35"
            else:
                option_style = style.input
            surface.fill(Area(input_x, y, input_width, 1), option_style)
            prefix = "● " if idx == self.selected else "  "
            surface.set_string(input_x, y, prefix + self.options[idx][1], option_style,
                               max_width=input_width)
