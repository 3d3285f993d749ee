"""
Campo compuesto de rango de fechas.

Contiene dos entradas de texto (inicio y fin) con formato YYYY-MM-DD y
exige inicio <= fin. La comparación es lexicográfica, válida porque ambos
lados tienen exactamente el mismo formato de ancho fijo.
"""

from typing import List, Optional

from tuiform.render import Area, Surface
from tuiform.style import FormStyle
from tuiform.validation import Pattern, ValidationError
from tuiform.value import Value

from .base import Field
from .text import TextInput

RANGE_MESSAGE = "End date must be on or after start date"


class DateRangeField(Field):
    """Par de fechas inicio/fin con validación cruzada."""

    def __init__(
        self,
        prefix: str,
        required: bool = False,
        label: str = "Date Range",
        start_label: str = "Start Date",
        end_label: str = "End Date",
    ):
        super().__init__(prefix, label, required)
        self.start = TextInput(
            f"{prefix}_start", start_label,
            placeholder="YYYY-MM-DD",
            required=required,
            validators=[Pattern.date()],
        )
        self.end = TextInput(
            f"{prefix}_end", end_label,
            placeholder="YYYY-MM-DD",
            required=required,
            validators=[Pattern.date()],
        )
        self.focused_side = 0  # 0 = inicio, 1 = fin

    @property
    def sides(self) -> List[TextInput]:
        return [self.start, self.end]

    @property
    def focused_input(self) -> TextInput:
        return self.sides[self.focused_side]

    @property
    def height(self) -> int:
        return self.start.height + self.end.height

    def handle_input(self, key: str) -> bool:
        if self.focused_side == 0 and key in ("down", "enter"):
            self.focused_side = 1
            return True
        if self.focused_side == 1 and key == "up":
            self.focused_side = 0
            return True
        return self.focused_input.handle_input(key)

    def value(self) -> Value:
        return {"start": self.start.value(), "end": self.end.value()}

    def validate_range(self) -> Optional[ValidationError]:
        """Orden inicio <= fin; si falta un lado no se verifica."""
        start, end = self.start.content, self.end.content
        if not start or not end:
            return None
        if end < start:
            return ValidationError(self.end.id, RANGE_MESSAGE)
        return None

    def validate(self) -> List[ValidationError]:
        errors = self.start.validate() + self.end.validate()
        range_error = self.validate_range()
        if range_error is not None:
            errors.append(range_error)
        return errors

    def owns(self, field_id: str) -> bool:
        return field_id in (self.id, self.start.id, self.end.id)

    def record_errors(self, errors: List[ValidationError]) -> None:
        super().record_errors(errors)
        for side in self.sides:
            side.record_errors(errors)

    def focus_error(self, field_id: str) -> None:
        if field_id == self.start.id:
            self.focused_side = 0
        elif field_id == self.end.id:
            self.focused_side = 1

    def render(self, area: Area, surface: Surface, focused: bool, style: FormStyle) -> None:
        if area.height < 2:
            return
        start_height = self.start.height
        self.start.render(area.row(0, start_height), surface,
                          focused and self.focused_side == 0, style)
        self.end.render(area.row(start_height, self.end.height), surface,
                        focused and self.focused_side == 1, style)
