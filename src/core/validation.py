"""Validación mínima de respuestas JSON.

Solo comprueba presencia "truthy" de campos de primer nivel, en orden.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from core.errors import MissingField


def validate_response(value: Any, required_fields: Iterable[str]) -> None:
    """Lanza `MissingField` con el primer campo ausente o falsy.

    Un valor que no es mapping no tiene campos: su primer campo requerido
    se reporta como ausente.
    """

    for field in required_fields:
        present = value.get(field) if isinstance(value, Mapping) else None
        if not present:
            raise MissingField(field)
