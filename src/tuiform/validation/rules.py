"""
Reglas de validación incorporadas.

Todas las reglas de formato (Email, Pattern, MinLength, Predicate)
consideran válido el string vacío: la obligatoriedad es responsabilidad
del flag required del campo, o de la regla Required.
"""

import re
from typing import Callable, Optional, Pattern as RegexPattern, Union

from .base import Validator


class Required(Validator):
    """El valor no puede estar vacío (ignorando espacios)."""

    def validate(self, value: str) -> Optional[str]:
        if not value.strip():
            return "This field is required"
        return None


class Email(Validator):
    """Validación estructural de email: local@dominio.tld"""

    MESSAGE = "Invalid email address"

    def validate(self, value: str) -> Optional[str]:
        if not value:
            return None

        parts = value.split("@")
        if len(parts) != 2:
            return self.MESSAGE

        local, domain = parts
        if not local or not domain:
            return self.MESSAGE

        # Dominio con al menos un punto y sin etiquetas vacías
        if "." not in domain:
            return self.MESSAGE
        if any(not label for label in domain.split(".")):
            return self.MESSAGE

        return None


class MinLength(Validator):
    """Longitud mínima en caracteres."""

    def __init__(self, length: int):
        if length < 0:
            raise ValueError(f"Longitud mínima inválida: {length}")
        self.length = length

    def validate(self, value: str) -> Optional[str]:
        if not value:
            return None
        if len(value) < self.length:
            return f"Must be at least {self.length} characters"
        return None


class MaxLength(Validator):
    """Longitud máxima en caracteres."""

    def __init__(self, length: int):
        if length < 0:
            raise ValueError(f"Longitud máxima inválida: {length}")
        self.length = length

    def validate(self, value: str) -> Optional[str]:
        if len(value) > self.length:
            return f"Must be at most {self.length} characters"
        return None


class Pattern(Validator):
    """
    Validación contra una expresión regular.

    El patrón se busca en el valor (como re.search); para exigir
    coincidencia completa, el patrón debe anclarse con ^ y $.

    Raises:
        ValueError: si el patrón no compila
    """

    def __init__(self, pattern: Union[str, RegexPattern], message: str):
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Patrón inválido {pattern!r}: {e}") from e
        self.regex = pattern
        self.message = message

    @classmethod
    def zip_code(cls) -> "Pattern":
        """Código postal US: 12345 o 12345-6789."""
        return cls(r"^\d{5}(-\d{4})?$", "Invalid ZIP code format")

    @classmethod
    def phone(cls) -> "Pattern":
        """Teléfono US con prefijo +1 y código de área opcionales."""
        return cls(
            r"^(\+1[-.\s]?)?(\(?\d{3}\)?[-.\s]?)?\d{3}[-.\s]?\d{4}$",
            "Invalid phone number format",
        )

    @classmethod
    def date(cls) -> "Pattern":
        """Fecha ISO YYYY-MM-DD."""
        return cls(r"^\d{4}-\d{2}-\d{2}$", "Invalid date format (use YYYY-MM-DD)")

    def validate(self, value: str) -> Optional[str]:
        if not value:
            return None
        if self.regex.search(value):
            return None
        return self.message


class Predicate(Validator):
    """
    Validador a partir de una función.

    La función retorna True si el valor es válido, False si no lo es
    (se usa message), o un string con el mensaje de error.
    """

    def __init__(
        self,
        func: Callable[[str], Union[bool, str]],
        message: Optional[str] = None,
    ):
        self.func = func
        self.message = message or "Invalid value"

    def validate(self, value: str) -> Optional[str]:
        if not value:
            return None
        result = self.func(value)
        if result is True:
            return None
        if isinstance(result, str):
            return result
        return self.message
