"""Fuente API: TheCatAPI.

La respuesta es una lista; solo interesa la `url` del primer elemento.
"""

from __future__ import annotations

import httpx

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.models import CatCard
from core.errors import ParseError
from core.interfaces.source import ApiSource
from core.validation import validate_response


class CatImageSource(ApiSource):
    attribution = "TheCatAPI (https://thecatapi.com/)"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self) -> CatCard:
        data = await fetch_json(
            self._settings.endpoints.cat,
            settings=self._settings,
            transport=self._transport,
        )
        if not isinstance(data, list) or not data:
            raise ParseError("Unexpected response format")

        first = data[0]
        validate_response(first, ["url"])
        return CatCard(image_url=first["url"], attribution=self.attribution)
