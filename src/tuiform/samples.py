"""
Formularios de ejemplo usados por la CLI.
"""

from typing import Callable, Dict, Optional

from tuiform.blocks import AddressBlock, ContactBlock, DateRangeBlock
from tuiform.form import Form
from tuiform.style import FormStyle
from tuiform.validation import Email, MaxLength, MinLength


def shipping_form(style: Optional[FormStyle] = None) -> Form:
    """Datos de envío: nombre, email, dirección y términos."""
    builder = (
        Form.builder()
        .title("Shipping Information")
        .text("name", "Full Name").placeholder("John Doe").required().done()
        .text("email", "Email").placeholder("john@example.com").required()
        .validator(Email()).done()
        .text("phone", "Phone").placeholder("(555) 123-4567").done()
        .block(AddressBlock("shipping").required())
        .checkbox("newsletter", "Subscribe to newsletter").done()
        .checkbox("terms", "I agree to the terms and conditions").required().done()
    )
    if style is not None:
        builder.style(style)
    return builder.build()


def contact_form(style: Optional[FormStyle] = None) -> Form:
    """Contacto con mensaje y tema de consulta."""
    builder = (
        Form.builder()
        .title("Contact Us")
        .block(ContactBlock("contact").required())
        .select("topic", "Topic")
        .options([("sales", "Sales"), ("support", "Support"), ("other", "Other")])
        .required().done()
        .text("message", "Message").validator(MinLength(10))
        .validator(MaxLength(200)).done()
    )
    if style is not None:
        builder.style(style)
    return builder.build()


def event_form(style: Optional[FormStyle] = None) -> Form:
    """Registro de evento con rango de fechas."""
    builder = (
        Form.builder()
        .title("Event Registration")
        .text("event", "Event Name").required().done()
        .block(DateRangeBlock("dates").required())
        .checkbox("remote", "Attending remotely").done()
    )
    if style is not None:
        builder.style(style)
    return builder.build()


SAMPLES: Dict[str, Callable[..., Form]] = {
    "address": shipping_form,
    "contact": contact_form,
    "event": event_form,
}
