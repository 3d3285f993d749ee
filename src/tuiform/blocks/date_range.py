"""
Bloque de rango de fechas.
"""

from typing import List

from tuiform.fields import DateRangeField, Field

from .base import Block


class DateRangeBlock(Block):
    """
    Fecha de inicio y de fin con validación de orden.

    Se expande en un único DateRangeField cuyas entradas tienen ids
    "{prefix}_start" y "{prefix}_end"; su valor es {"start", "end"}.

    A diferencia de los demás bloques, el campo no usa un id
    "{prefix}_{nombre}": su id es el prefijo mismo, y la exportación
    agrupa ambas fechas en un objeto para validar el orden en conjunto.
    """

    def fields(self) -> List[Field]:
        return [DateRangeField(self.prefix, required=self.is_required,
                               label=self.title or "Date Range")]
