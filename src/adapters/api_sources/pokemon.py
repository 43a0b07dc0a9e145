"""Fuente API: PokéAPI.

- Elige un id uniforme en [1, pokemon_max_id] (no criptográfico).
- El sprite es opcional; el resto de campos son requeridos.
"""

from __future__ import annotations

import random
from typing import Any, Callable

import httpx

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.models import PokemonCard
from core.interfaces.source import ApiSource
from core.validation import validate_response

REQUIRED_FIELDS = ("name", "types", "sprites", "height", "weight")


def random_pokemon_id(max_id: int, rng: Callable[[], float] = random.random) -> int:
    """`floor(rng() * max_id) + 1`: siempre en 1..max_id."""

    return int(rng() * max_id) + 1


def capitalize_first(value: str) -> str:
    # A diferencia de str.capitalize, no toca el resto de la cadena.
    return value[:1].upper() + value[1:]


def format_pokemon(data: dict[str, Any], *, pokemon_id: int, attribution: str) -> PokemonCard:
    types = ", ".join(entry["type"]["name"] for entry in data["types"])
    return PokemonCard(
        pokemon_id=pokemon_id,
        name=capitalize_first(data["name"]),
        types=types,
        sprite_url=data["sprites"].get("front_default") or None,
        height=data["height"],
        weight=data["weight"],
        attribution=attribution,
    )


class PokemonSource(ApiSource):
    attribution = "PokéAPI (https://pokeapi.co/)"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        rng: Callable[[], float] = random.random,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._rng = rng

    async def fetch(self) -> PokemonCard:
        pokemon_id = random_pokemon_id(self._settings.pokemon_max_id, self._rng)
        url = f"{self._settings.endpoints.pokemon.rstrip('/')}/{pokemon_id}"
        data = await fetch_json(url, settings=self._settings, transport=self._transport)
        validate_response(data, REQUIRED_FIELDS)
        return format_pokemon(data, pokemon_id=pokemon_id, attribution=self.attribution)
