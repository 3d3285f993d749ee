"""
Lectura de teclas desde la terminal.

Convierte la entrada cruda en los nombres de tecla que entiende el
formulario: caracteres sueltos, 'up', 'down', 'left', 'right', 'home',
'end', 'delete', 'backspace', 'tab', 'shift+tab', 'enter', 'esc',
'space' y 'ctrl+<letra>'.

Las secuencias de escape que no se reconocen (F1..F12, Alt+letra, etc.)
devuelven "", que el bucle interactivo ignora. Sólo un ESC aislado
produce 'esc'.
"""

import os
import select
import sys

# Tiempo de espera tras un ESC para distinguirlo de una secuencia (s)
ESC_TIMEOUT = 0.05

# Letra final de secuencias CSI (ESC [ ...) y SS3 (ESC O ...)
_CSI_KEYS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "Z": "shift+tab",
}

# Secuencias ESC [ n ~
_TILDE_KEYS = {
    "1": "home",
    "3": "delete",
    "4": "end",
    "7": "home",
    "8": "end",
}

# Segundo byte de teclas especiales en Windows
_WINDOWS_KEYS = {
    b"H": "up",
    b"P": "down",
    b"K": "left",
    b"M": "right",
    b"G": "home",
    b"O": "end",
    b"S": "delete",
    b"\x0f": "shift+tab",
}


def _control_key(char: str) -> str:
    """Nombre de tecla para un caracter crudo de un byte."""
    if char in ("\r", "\n"):
        return "enter"
    if char == "\t":
        return "tab"
    if char in ("\x7f", "\x08"):
        return "backspace"
    if char == " ":
        return "space"
    code = ord(char)
    if 1 <= code <= 26:
        return f"ctrl+{chr(code + 96)}"
    return char


def _read_char(fd: int) -> str:
    """Lee un caracter UTF-8 completo directamente del descriptor."""
    first = os.read(fd, 1)
    if not first:
        return ""
    lead = first[0]
    if lead >= 0xF0:
        extra = 3
    elif lead >= 0xE0:
        extra = 2
    elif lead >= 0xC0:
        extra = 1
    else:
        extra = 0
    data = first + (os.read(fd, extra) if extra else b"")
    return data.decode("utf-8", errors="replace")


def _input_pending(fd: int, timeout: float = ESC_TIMEOUT) -> bool:
    """True si hay más bytes disponibles antes de timeout."""
    ready, _, _ = select.select([fd], [], [], timeout)
    return bool(ready)


def _escape_key(fd: int) -> str:
    """Interpreta lo que sigue a un ESC ya leído."""
    if not _input_pending(fd):
        return "esc"

    intro = _read_char(fd)
    if intro == "[":
        # Parámetros (0x30-0x3F) hasta el byte final
        params = ""
        final = _read_char(fd)
        while final and "0" <= final <= "?":
            params += final
            final = _read_char(fd)
        if final == "~":
            return _TILDE_KEYS.get(params.split(";")[0], "")
        return _CSI_KEYS.get(final, "")
    if intro == "O":
        return _CSI_KEYS.get(_read_char(fd), "")
    # Alt+tecla u otra secuencia
    return ""


def get_key() -> str:
    """Captura una tecla del usuario."""
    if os.name == 'nt':
        import msvcrt

        key = msvcrt.getwch()
        if key in ("\x00", "\xe0"):
            return _WINDOWS_KEYS.get(msvcrt.getwch().encode("latin-1"), "")
        if key == "\x1b":
            return "esc"
        return _control_key(key)

    import termios
    import tty

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        key = _read_char(fd)
        if not key:
            return ""
        if key == "\x1b":
            return _escape_key(fd)
        return _control_key(key)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
