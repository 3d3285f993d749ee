"""
Bloque de dirección postal de EE.UU.
"""

from typing import List

from tuiform.fields import Field, Select, TextInput
from tuiform.validation import Pattern

from .base import Block

# Estados de EE.UU. y Distrito de Columbia (51 entradas)
US_STATES = [
    ("AL", "Alabama"),
    ("AK", "Alaska"),
    ("AZ", "Arizona"),
    ("AR", "Arkansas"),
    ("CA", "California"),
    ("CO", "Colorado"),
    ("CT", "Connecticut"),
    ("DE", "Delaware"),
    ("FL", "Florida"),
    ("GA", "Georgia"),
    ("HI", "Hawaii"),
    ("ID", "Idaho"),
    ("IL", "Illinois"),
    ("IN", "Indiana"),
    ("IA", "Iowa"),
    ("KS", "Kansas"),
    ("KY", "Kentucky"),
    ("LA", "Louisiana"),
    ("ME", "Maine"),
    ("MD", "Maryland"),
    ("MA", "Massachusetts"),
    ("MI", "Michigan"),
    ("MN", "Minnesota"),
    ("MS", "Mississippi"),
    ("MO", "Missouri"),
    ("MT", "Montana"),
    ("NE", "Nebraska"),
    ("NV", "Nevada"),
    ("NH", "New Hampshire"),
    ("NJ", "New Jersey"),
    ("NM", "New Mexico"),
    ("NY", "New York"),
    ("NC", "North Carolina"),
    ("ND", "North Dakota"),
    ("OH", "Ohio"),
    ("OK", "Oklahoma"),
    ("OR", "Oregon"),
    ("PA", "Pennsylvania"),
    ("RI", "Rhode Island"),
    ("SC", "South Carolina"),
    ("SD", "South Dakota"),
    ("TN", "Tennessee"),
    ("TX", "Texas"),
    ("UT", "Utah"),
    ("VT", "Vermont"),
    ("VA", "Virginia"),
    ("WA", "Washington"),
    ("WV", "West Virginia"),
    ("WI", "Wisconsin"),
    ("WY", "Wyoming"),
    ("DC", "District of Columbia"),
]


class AddressBlock(Block):
    """Calle (2 líneas), ciudad, estado y código postal."""

    def fields(self) -> List[Field]:
        required = self.is_required
        return [
            TextInput(self.field_id("street1"), "Street Address",
                      placeholder="123 Main St", required=required),
            # La segunda línea siempre es opcional
            TextInput(self.field_id("street2"), "Address Line 2",
                      placeholder="Apt, Suite, Unit, etc. (optional)"),
            TextInput(self.field_id("city"), "City",
                      placeholder="City", required=required),
            Select(self.field_id("state"), "State",
                   options=[(abbr, f"{name} ({abbr})") for abbr, name in US_STATES],
                   required=required),
            TextInput(self.field_id("zip"), "ZIP Code",
                      placeholder="12345 or 12345-6789", required=required,
                      validators=[Pattern.zip_code()]),
        ]
