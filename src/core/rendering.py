"""Helpers de render sobre regiones de salida.

Todos son síncronos, totales e idempotentes: construyen un `RegionView`
y reemplazan el contenido completo de la región.
"""

from __future__ import annotations

from core.domain.models import Card, RegionState, RegionView
from core.interfaces.region import OutputRegion

DEFAULT_LOADING_MESSAGE = "Loading..."


def render_loading(region: OutputRegion, message: str = DEFAULT_LOADING_MESSAGE) -> None:
    region.show(RegionView(state=RegionState.LOADING, message=message))


def render_error(region: OutputRegion, message: str) -> None:
    region.show(RegionView(state=RegionState.ERROR, message=message))


def render_placeholder(region: OutputRegion, message: str) -> None:
    """Mensaje estático atenuado (estado Idle tras el arranque)."""

    region.show(RegionView(state=RegionState.PLACEHOLDER, message=message))


def render_card(region: OutputRegion, card: Card) -> None:
    region.show(RegionView(state=RegionState.RENDERED, card=card))
