"""
Tipos base de validación.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationError:
    """Error de validación de un campo."""
    field_id: str
    message: str

    def __str__(self) -> str:
        return f"{self.field_id}: {self.message}"


class Validator(ABC):
    """Regla de validación sobre un string."""

    @abstractmethod
    def validate(self, value: str) -> Optional[str]:
        """Retorna None si el valor es válido, o el mensaje de error."""
