"""Fuente API: Dog CEO.

- Una imagen aleatoria por petición; la URL viene en `message`.
"""

from __future__ import annotations

import httpx

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.models import DogCard
from core.interfaces.source import ApiSource
from core.validation import validate_response


class DogImageSource(ApiSource):
    attribution = "Dog CEO API (https://dog.ceo/dog-api/)"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self) -> DogCard:
        data = await fetch_json(
            self._settings.endpoints.dog,
            settings=self._settings,
            transport=self._transport,
        )
        validate_response(data, ["message"])
        return DogCard(image_url=data["message"], attribution=self.attribution)
