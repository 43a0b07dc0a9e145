"""Contratos de la página anfitriona (regiones de salida y triggers).

Por qué Protocol:
- La página real (HTML exportable, terminal, tests) es un detalle de adaptador.
- Los handlers solo necesitan "reemplazar el contenido" y "registrar un click".
"""

from __future__ import annotations

from typing import Awaitable, Callable, Protocol, runtime_checkable

from core.domain.models import RegionView


@runtime_checkable
class OutputRegion(Protocol):
    """Superficie de salida propiedad de un único handler.

    Reglas de diseño:
    - `show` reemplaza el contenido completo; nunca parchea.
    - Es síncrono y no falla.
    """

    def show(self, view: RegionView) -> None:
        ...


ClickHandler = Callable[[], Awaitable[None]]


@runtime_checkable
class Trigger(Protocol):
    """Elemento accionable que arranca la máquina de estados de un handler."""

    def on_click(self, handler: ClickHandler) -> None:
        ...


@runtime_checkable
class ElementHost(Protocol):
    """Página anfitriona: resuelve elementos por id (None si no existe)."""

    def get_element_by_id(self, element_id: str) -> object | None:
        ...
