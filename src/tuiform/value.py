"""
Modelo de valores exportados por el formulario.

Cada campo produce exactamente un valor: None, bool, str o un dict
(objeto) con claves str. Los dict conservan el orden de inserción, por lo
que la exportación es determinista.
"""

from typing import Any, Dict, Union

Value = Union[None, bool, str, Dict[str, Any]]


def is_value(obj: Any) -> bool:
    """Verifica que obj pertenezca al modelo de valores (recursivo)."""
    if obj is None or isinstance(obj, (bool, str)):
        return True
    if isinstance(obj, dict):
        return all(isinstance(k, str) and is_value(v) for k, v in obj.items())
    return False
