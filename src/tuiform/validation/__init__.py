"""
Validación de campos.

Un Validator recibe el texto crudo de un campo y retorna None si es válido
o un mensaje legible si no lo es. Los errores se reportan como
ValidationError asociados al id del campo.
"""

from .base import ValidationError, Validator
from .rules import (
    Required,
    Email,
    MinLength,
    MaxLength,
    Pattern,
    Predicate,
)

__all__ = [
    "ValidationError",
    "Validator",
    "Required",
    "Email",
    "MinLength",
    "MaxLength",
    "Pattern",
    "Predicate",
]
