"""
Estilos y temas del formulario.

Cada atributo es un string de estilo Rich ("bold cyan", "white on blue").
El núcleo del formulario solo transporta el estilo hasta el render.
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style


class ThemeName(str, Enum):
    """Temas disponibles."""
    DARK = "dark"
    LIGHT = "light"


class FormStyle(BaseModel):
    """Configuración de estilos para formularios."""

    model_config = ConfigDict(frozen=True)

    title: str = "bold cyan"
    label: str = "white"
    label_focused: str = "bold cyan"
    input: str = "white on grey23"
    input_focused: str = "white on blue"
    placeholder: str = "grey62 on grey23"
    error: str = "red"
    button: str = "white on grey23"
    button_focused: str = "bold black on green"
    border: str = "grey62"
    border_focused: str = "cyan"

    @field_validator("*")
    @classmethod
    def check_style(cls, v: str) -> str:
        # Falla en construcción si Rich no entiende el estilo
        try:
            Style.parse(v)
        except StyleSyntaxError as e:
            raise ValueError(f"Estilo inválido {v!r}: {e}") from e
        return v

    @classmethod
    def dark(cls) -> "FormStyle":
        """Tema oscuro (por defecto)."""
        return cls()

    @classmethod
    def light(cls) -> "FormStyle":
        """Tema claro."""
        return cls(
            title="bold blue",
            label="black",
            label_focused="bold blue",
            input="black on white",
            input_focused="black on bright_blue",
            placeholder="grey35 on white",
            error="red",
            button="black on white",
            button_focused="bold white on blue",
            border="grey35",
            border_focused="blue",
        )


THEMES = {
    ThemeName.DARK: FormStyle.dark,
    ThemeName.LIGHT: FormStyle.light,
}


def get_style(name: Union[str, ThemeName]) -> FormStyle:
    """
    Obtiene el estilo de un tema por nombre.

    Raises:
        ValueError: si el tema no existe
    """
    try:
        theme = ThemeName(name)
    except ValueError:
        available = ", ".join(t.value for t in ThemeName)
        raise ValueError(f"Tema desconocido: {name} (disponibles: {available})") from None
    return THEMES[theme]()
