"""
Superficie de render: buffer de celdas (caracter, estilo).

Los campos escriben en un Area rectangular de la superficie; la superficie
se convierte a rich.text.Text para mostrarse en consola. Las escrituras
fuera de los límites se recortan.
"""

from typing import List, NamedTuple, Tuple

from rich.text import Text


class Area(NamedTuple):
    """Región rectangular de la superficie."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def row(self, offset: int, height: int = 1) -> "Area":
        """Sub-área que empieza offset filas más abajo."""
        height = max(0, min(height, self.height - offset))
        return Area(self.x, self.y + offset, self.width, height)

    def inner(self, margin_x: int = 1, margin_y: int = 1) -> "Area":
        """Área interior descontando márgenes."""
        return Area(
            self.x + margin_x,
            self.y + margin_y,
            max(0, self.width - 2 * margin_x),
            max(0, self.height - 2 * margin_y),
        )


Cell = Tuple[str, str]


class Surface:
    """Buffer de celdas de tamaño fijo."""

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self._cells: List[List[Cell]] = [
            [(" ", "") for _ in range(self.width)] for _ in range(self.height)
        ]

    @property
    def area(self) -> Area:
        return Area(0, 0, self.width, self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_char(self, x: int, y: int, char: str, style: str = "") -> None:
        if self._inside(x, y):
            self._cells[y][x] = (char, style)

    def set_style(self, x: int, y: int, style: str) -> None:
        if self._inside(x, y):
            char, _ = self._cells[y][x]
            self._cells[y][x] = (char, style)

    def set_string(self, x: int, y: int, text: str, style: str = "", max_width: int = -1) -> int:
        """
        Escribe text desde (x, y), un caracter por celda.

        Returns:
            Cantidad de celdas escritas
        """
        if max_width >= 0:
            text = text[:max_width]
        written = 0
        for i, char in enumerate(text):
            if x + i >= self.width:
                break
            self.set_char(x + i, y, char, style)
            written += 1
        return written

    def fill(self, area: Area, style: str = "", char: str = " ") -> None:
        """Rellena un área con un caracter y estilo."""
        for y in range(area.y, area.bottom):
            for x in range(area.x, area.right):
                self.set_char(x, y, char, style)

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y][x]

    def line(self, y: int) -> str:
        """Texto plano de una fila (para tests y depuración)."""
        return "".join(char for char, _ in self._cells[y])

    def to_text(self) -> Text:
        """Convierte la superficie en un Text de Rich."""
        text = Text()
        for y, row in enumerate(self._cells):
            if y:
                text.append("\n")
            for char, style in row:
                text.append(char, style=style or None)
        return text
