"""
Clase base de bloques compuestos.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from tuiform.fields import Field


class Block(ABC):
    """
    Plantilla que se expande en una lista de campos con ids prefijados.

    Un bloque no guarda instancias de campos: cada llamada a fields()
    construye campos nuevos con ids "{prefix}_{nombre}".
    """

    def __init__(self, prefix: str, title: Optional[str] = None, required: bool = False):
        self.prefix = prefix
        self.title = title
        self.is_required = required

    def required(self) -> "Block":
        """Marca como requeridos todos los campos del bloque."""
        self.is_required = True
        return self

    def with_title(self, title: str) -> "Block":
        self.title = title
        return self

    def field_id(self, name: str) -> str:
        return f"{self.prefix}_{name}"

    @abstractmethod
    def fields(self) -> List[Field]:
        """Construye los campos del bloque, en orden."""
