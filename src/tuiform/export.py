"""
Exportación de los valores del formulario a JSON.
"""

import json
import logging
from pathlib import Path
from typing import Union

from tuiform.form import Form

logger = logging.getLogger(__name__)


def write_json(form: Form, path: Union[str, Path]) -> Path:
    """Escribe el árbol de valores del formulario como JSON."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(form.to_value_tree(), f, indent=2, ensure_ascii=False)
        f.write("\n")
    logger.debug("Valores guardados en %s", path)
    return path
