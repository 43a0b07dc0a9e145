"""Handlers de operaciones y hook de arranque de la página.

Cada operación sigue la misma máquina de estados corta: render de carga,
una única petición y después la tarjeta o el error.

Por qué aquí:
- Los handlers son callables planos enlazados una sola vez al arrancar desde
  una tabla explícita clave -> fuente; nada se busca por nombre al hacer click.
- Los fallos se contienen en cada handler: ninguno llega a `Dashboard.run`.
"""

from __future__ import annotations

import asyncio
import itertools
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping

import httpx

from adapters.api_sources import (
    AirQualitySource,
    CatImageSource,
    DogImageSource,
    ExchangeRatesSource,
    JokeSource,
    PokemonSource,
    SunTimesSource,
    WeatherSource,
)
from core.config import AppSettings
from core.domain.models import OperationDescriptor, OperationKey
from core.errors import ApiError
from core.interfaces.region import ElementHost, OutputRegion, Trigger
from core.interfaces.source import ApiSource
from core.logging import get_logger
from core.registry import OPERATIONS
from core.rendering import render_card, render_error, render_loading, render_placeholder

log = get_logger(__name__)

# Field-access errors on malformed payloads are reported like any other failure.
HANDLED_ERRORS: tuple[type[Exception], ...] = (
    ApiError,
    KeyError,
    IndexError,
    TypeError,
    AttributeError,
    ValueError,
)

_SOURCE_TYPES: dict[OperationKey, Callable[..., ApiSource]] = {
    OperationKey.DOG: DogImageSource,
    OperationKey.CAT: CatImageSource,
    OperationKey.JOKE: JokeSource,
    OperationKey.POKEMON: PokemonSource,
    OperationKey.WEATHER: WeatherSource,
    OperationKey.AIR_QUALITY: AirQualitySource,
    OperationKey.SUN_TIMES: SunTimesSource,
    OperationKey.EXCHANGE_RATES: ExchangeRatesSource,
}


def build_sources(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[OperationKey, ApiSource]:
    """Instantiate one source per operation key."""

    return {
        key: source_type(settings, transport=transport)
        for key, source_type in _SOURCE_TYPES.items()
    }


class RenderSequencer:
    """Per-region monotonic tickets.

    With `enabled=True` a render whose ticket is older than the latest one
    issued for the same region is discarded. With `enabled=False` every
    render commits (last write wins).
    """

    def __init__(self, *, enabled: bool = True) -> None:
        self.enabled = enabled
        self._counter = itertools.count(1)
        self._latest: dict[str, int] = {}

    def begin(self, region_id: str) -> int:
        ticket = next(self._counter)
        self._latest[region_id] = ticket
        return ticket

    def is_current(self, region_id: str, ticket: int) -> bool:
        if not self.enabled:
            return True
        return self._latest.get(region_id) == ticket


@dataclass
class OperationHandler:
    """The fetch -> validate -> format -> render cycle for one region."""

    descriptor: OperationDescriptor
    source: ApiSource
    region: OutputRegion
    sequencer: RenderSequencer

    async def __call__(self) -> None:
        region_id = self.descriptor.output_id
        ticket = self.sequencer.begin(region_id)
        bound = log.bind(operation=self.descriptor.key.value, ticket=ticket)

        render_loading(self.region, self.descriptor.loading_message)
        bound.debug("operation_started")

        try:
            card = await self.source.fetch()
        except HANDLED_ERRORS as exc:
            if not self.sequencer.is_current(region_id, ticket):
                bound.info("render_discarded_stale", outcome="error")
                return
            bound.warning("operation_failed", error=str(exc), error_type=type(exc).__name__)
            render_error(self.region, f"{self.descriptor.error_message} {exc}")
            return

        if not self.sequencer.is_current(region_id, ticket):
            bound.info("render_discarded_stale", outcome="rendered")
            return
        render_card(self.region, card)
        bound.debug("operation_rendered", card=card.kind)


@dataclass
class DashboardHooks:
    """Optional callbacks for UI layers."""

    warning: Callable[[str], None] | None = None


@dataclass
class Dashboard:
    """Read-only wiring produced by `start_dashboard`."""

    output_regions: Mapping[OperationKey, OutputRegion]
    buttons: Mapping[OperationKey, Trigger]
    handlers: Mapping[OperationKey, OperationHandler]
    warnings: list[str] = field(default_factory=list)

    async def trigger(self, key: OperationKey | str) -> None:
        """Run one handler to completion (same as a click, but awaited)."""

        handler = self.handlers.get(OperationKey(key))
        if handler is None:
            log.warning("operation_unavailable", operation=OperationKey(key).value)
            return
        await handler()

    async def run(self, keys: Iterable[OperationKey | str] | None = None) -> None:
        """Run several handlers concurrently; all of them when `keys` is None."""

        selected = list(self.handlers) if keys is None else [OperationKey(k) for k in keys]
        await asyncio.gather(*(self.trigger(key) for key in selected))


def start_dashboard(
    host: ElementHost,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    sources: Mapping[OperationKey, ApiSource] | None = None,
    descriptors: Iterable[OperationDescriptor] = OPERATIONS,
    hooks: DashboardHooks | None = None,
) -> Dashboard:
    """Wire every operation into the host page.

    For each descriptor: the output region gets its placeholder and the
    button gets its handler. Missing elements are reported as warnings and
    the remaining operations still wire up.
    """

    settings = settings or AppSettings()
    hooks = hooks or DashboardHooks()
    sources = sources if sources is not None else build_sources(settings, transport=transport)
    sequencer = RenderSequencer(enabled=settings.discard_stale_renders)

    regions: dict[OperationKey, OutputRegion] = {}
    buttons: dict[OperationKey, Trigger] = {}
    handlers: dict[OperationKey, OperationHandler] = {}
    warnings: list[str] = []

    def warn(message: str, **context: object) -> None:
        warnings.append(message)
        log.warning("element_missing", detail=message, **context)
        if hooks.warning:
            hooks.warning(message)

    for descriptor in descriptors:
        region = host.get_element_by_id(descriptor.output_id)
        if isinstance(region, OutputRegion):
            regions[descriptor.key] = region
            render_placeholder(region, descriptor.message)
            handlers[descriptor.key] = OperationHandler(
                descriptor=descriptor,
                source=sources[descriptor.key],
                region=region,
                sequencer=sequencer,
            )
        else:
            warn(f"Missing output element: {descriptor.output_id}", operation=descriptor.key.value)

        button = host.get_element_by_id(descriptor.button_id)
        if not isinstance(button, Trigger):
            warn(f"Missing button element: {descriptor.button_id}", operation=descriptor.key.value)
            continue
        buttons[descriptor.key] = button
        handler = handlers.get(descriptor.key)
        if handler is None:
            warn(f"Handler missing for {descriptor.key.value}", operation=descriptor.key.value)
            continue
        button.on_click(handler)

    return Dashboard(
        output_regions=regions,
        buttons=buttons,
        handlers=handlers,
        warnings=warnings,
    )
