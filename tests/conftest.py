"""Shared fixtures: fake HTTP payloads and an in-memory region."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import RegionView

DOG_PAYLOAD = {"message": "https://images.dog.ceo/breeds/hound/n02089.jpg", "status": "success"}
CAT_PAYLOAD = [{"id": "abc", "url": "https://cdn2.thecatapi.com/images/abc.jpg", "width": 500}]
SINGLE_JOKE = {"type": "single", "joke": "X", "error": False}
TWOPART_JOKE = {"type": "twopart", "setup": "A", "delivery": "B", "error": False}
POKEMON_PAYLOAD = {
    "name": "bulbasaur",
    "types": [{"slot": 1, "type": {"name": "grass"}}, {"slot": 2, "type": {"name": "poison"}}],
    "sprites": {"front_default": "https://raw.githubusercontent.com/PokeAPI/sprites/1.png"},
    "height": 7,
    "weight": 69,
}
WEATHER_PAYLOAD = {
    "current": {
        "time": "2026-10-19T14:00",
        "temperature_2m": 12.4,
        "apparent_temperature": 10.1,
        "wind_speed_10m": 15.3,
    }
}
AIR_QUALITY_PAYLOAD = {
    "current": {
        "time": "2026-10-19T14:00",
        "us_aqi": 31,
        "pm2_5": 4.2,
        "pm10": 7.9,
        "nitrogen_dioxide": 12.5,
        "ozone": 55.0,
    }
}
SUN_PAYLOAD = {
    "results": {
        "sunrise": "2026-10-19T11:32:10+00:00",
        "sunset": "2026-10-19T22:27:45+00:00",
        "solar_noon": "2026-10-19T16:59:57+00:00",
        "day_length": 39335,
    },
    "status": "OK",
}
RATES_PAYLOAD = {
    "result": "success",
    "base_code": "CAD",
    "time_last_update_utc": "Sun, 19 Oct 2026 00:02:31 +0000",
    "rates": {"CAD": 1, "EUR": 0.6789, "USD": 0.7312},
}

DEFAULT_ROUTES: dict[str, Any] = {
    "dog.ceo": DOG_PAYLOAD,
    "api.thecatapi.com": CAT_PAYLOAD,
    "v2.jokeapi.dev": SINGLE_JOKE,
    "pokeapi.co": POKEMON_PAYLOAD,
    "api.open-meteo.com": WEATHER_PAYLOAD,
    "air-quality-api.open-meteo.com": AIR_QUALITY_PAYLOAD,
    "api.sunrise-sunset.org": SUN_PAYLOAD,
    "open.er-api.com": RATES_PAYLOAD,
}


def make_transport(routes: dict[str, Any] | None = None, *, seen: list[httpx.Request] | None = None) -> httpx.MockTransport:
    """MockTransport keyed by host.

    A route value can be a JSON-able payload, an `httpx.Response` or a
    callable taking the request (sync or async).
    """

    table = {**DEFAULT_ROUTES, **(routes or {})}

    async def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        route = table.get(request.url.host)
        if route is None:
            return httpx.Response(404, json={"error": "no route"})
        if isinstance(route, httpx.Response):
            return route
        if callable(route):
            result = route(request)
            if hasattr(result, "__await__"):
                result = await result
            return result
        return httpx.Response(200, json=route)

    return httpx.MockTransport(handler)


class RecordingRegion:
    """OutputRegion that keeps every view it was shown."""

    def __init__(self) -> None:
        self.views: list[RegionView] = []

    def show(self, view: RegionView) -> None:
        self.views.append(view)

    @property
    def current(self) -> RegionView | None:
        return self.views[-1] if self.views else None


@pytest.fixture
def settings() -> AppSettings:
    # _env_file=None: los tests no deben leer el .env del desarrollador.
    return AppSettings(_env_file=None)


@pytest.fixture
def transport() -> httpx.MockTransport:
    return make_transport()


@pytest.fixture
def region() -> RecordingRegion:
    return RecordingRegion()


