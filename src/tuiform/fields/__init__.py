"""
Tipos de campo del formulario.
"""

from .base import Field, key_char
from .text import TextInput
from .select import Select, MAX_VISIBLE_OPTIONS
from .checkbox import Checkbox
from .date_range import DateRangeField

__all__ = [
    "Field",
    "key_char",
    "TextInput",
    "Select",
    "MAX_VISIBLE_OPTIONS",
    "Checkbox",
    "DateRangeField",
]
