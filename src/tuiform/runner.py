"""
Bucle interactivo: dibuja el formulario con Rich y procesa teclas.
"""

import logging
import shutil
from typing import Callable, Optional

from rich.console import Console
from rich.live import Live
from rich.text import Text

from tuiform.form import Form, FormResult
from tuiform.render import Surface

logger = logging.getLogger(__name__)


def build_display(form: Form, width: int, height: int) -> Text:
    """Dibuja el formulario en una superficie nueva y la convierte a Text."""
    surface = Surface(width, height)
    form.render(surface.area, surface)
    return surface.to_text()


def form_height(form: Form) -> int:
    """Filas necesarias: campos, separador, botón, resumen y bordes."""
    return sum(fld.height for fld in form.fields) + 5


def run_form(
    form: Form,
    console: Optional[Console] = None,
    get_key: Optional[Callable[[], str]] = None,
    width: Optional[int] = None,
) -> FormResult:
    """
    Muestra un formulario interactivo hasta que se envía o se cancela.

    Args:
        form: Formulario a mostrar
        console: Consola Rich (por defecto una nueva)
        get_key: Fuente de teclas (por defecto la terminal)
        width: Ancho del formulario (por defecto el de la terminal)

    Returns:
        Resultado final del formulario
    """
    if console is None:
        console = Console()
    if get_key is None:
        from tuiform.terminal import get_key

    def current_width() -> int:
        return width or min(shutil.get_terminal_size().columns, 100)

    with Live(console=console, auto_refresh=False, transient=False) as live:
        live.update(build_display(form, current_width(), form_height(form)), refresh=True)

        while form.is_active:
            key = get_key()
            if not key:
                continue
            form.handle_input(key)
            live.update(build_display(form, current_width(), form_height(form)), refresh=True)

    logger.debug("Formulario terminado: %s", form.result.value)
    return form.result
