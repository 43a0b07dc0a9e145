"""Contrato de las fuentes API.

Por qué Protocol:
- Cada API pública es un adaptador intercambiable y testeable.
- El handler genérico solo conoce `fetch()` y la tarjeta que devuelve.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Card


@runtime_checkable
class ApiSource(Protocol):
    """Contrato mínimo de una fuente.

    Reglas de diseño:
    - `fetch` es asíncrono porque hace una única petición HTTP.
    - Devuelve la tarjeta ya formateada o lanza un `core.errors.ApiError`.
    """

    async def fetch(self) -> Card:
        ...
