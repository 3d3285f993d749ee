"""
Bloques compuestos: plantillas que generan varios campos prefijados.
"""

from .base import Block
from .address import AddressBlock, US_STATES
from .contact import ContactBlock
from .date_range import DateRangeBlock

__all__ = [
    "Block",
    "AddressBlock",
    "US_STATES",
    "ContactBlock",
    "DateRangeBlock",
]
