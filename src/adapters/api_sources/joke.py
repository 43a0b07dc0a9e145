"""Fuente API: JokeAPI.

Dos formatos de respuesta:
- `single`: el chiste completo en `joke`.
- `twopart`: `setup` + `delivery` (remate).
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.models import JokeCard
from core.interfaces.source import ApiSource
from core.validation import validate_response


def format_joke(data: dict[str, Any], *, attribution: str) -> JokeCard:
    if data["type"] == "single":
        return JokeCard(text=data.get("joke"), attribution=attribution)
    return JokeCard(
        text=data.get("setup"),
        punchline=data.get("delivery"),
        attribution=attribution,
    )


class JokeSource(ApiSource):
    attribution = "JokeAPI (https://jokeapi.dev/)"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self) -> JokeCard:
        params = {"safe-mode": None} if self._settings.joke_safe_mode else None
        data = await fetch_json(
            self._settings.endpoints.joke,
            params=params,
            settings=self._settings,
            transport=self._transport,
        )
        validate_response(data, ["type"])
        return format_joke(data, attribution=self.attribution)
