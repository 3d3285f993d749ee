"""
tuiform - Formularios interactivos para la terminal.

Los formularios se arman con un constructor fluido a partir de campos
(texto, selección, checkbox) y bloques compuestos (dirección, contacto,
rango de fechas), se controlan con una secuencia de teclas y exportan
sus valores como un árbol de None/bool/str/dict.

El paquete esta organizado en modulos:
- fields: Tipos de campo
- blocks: Bloques compuestos
- validation: Validadores y errores de validación
- navigation: Gestión del foco
- form / builder: Formulario y constructor
- render / style: Superficie de dibujo y temas
- runner / terminal / export: Bucle interactivo, teclado y JSON
"""

__version__ = "0.1.0"

from tuiform.value import Value, is_value
from tuiform.validation import (
    ValidationError,
    Validator,
    Required,
    Email,
    MinLength,
    MaxLength,
    Pattern,
    Predicate,
)
from tuiform.fields import Field, TextInput, Select, Checkbox, DateRangeField
from tuiform.blocks import Block, AddressBlock, ContactBlock, DateRangeBlock
from tuiform.navigation import FocusManager
from tuiform.form import Form, FormResult
from tuiform.builder import FormBuilder
from tuiform.style import FormStyle, ThemeName, get_style
from tuiform.render import Area, Surface

__all__ = [
    "Value",
    "is_value",
    "ValidationError",
    "Validator",
    "Required",
    "Email",
    "MinLength",
    "MaxLength",
    "Pattern",
    "Predicate",
    "Field",
    "TextInput",
    "Select",
    "Checkbox",
    "DateRangeField",
    "Block",
    "AddressBlock",
    "ContactBlock",
    "DateRangeBlock",
    "FocusManager",
    "Form",
    "FormResult",
    "FormBuilder",
    "FormStyle",
    "ThemeName",
    "get_style",
    "Area",
    "Surface",
]
