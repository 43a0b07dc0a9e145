"""Fuente API: Sunrise-Sunset.

Con `formatted=0` la API devuelve ISO-8601 en UTC; aquí se convierte a hora
local del proceso. `day_length` se muestra tal cual llega.
"""

from __future__ import annotations

from datetime import datetime, tzinfo

import httpx

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.models import SunTimesCard
from core.interfaces.source import ApiSource
from core.validation import validate_response


def to_local_time(value: str, tz: tzinfo | None = None) -> str:
    """ISO-8601 -> hora local `HH:MM:SS` (tz del sistema si no se indica)."""

    moment = datetime.fromisoformat(value)
    return moment.astimezone(tz).strftime("%H:%M:%S")


class SunTimesSource(ApiSource):
    attribution = "Sunrise-Sunset API (https://sunrise-sunset.org/api)"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._tz = tz

    async def fetch(self) -> SunTimesCard:
        location = self._settings.sun_location
        params = {
            "lat": location.latitude,
            "lng": location.longitude,
            "formatted": 0,
        }
        data = await fetch_json(
            self._settings.endpoints.sun_times,
            params=params,
            settings=self._settings,
            transport=self._transport,
        )
        validate_response(data, ["results"])
        results = data["results"]

        return SunTimesCard(
            city=location.name,
            sunrise=to_local_time(results["sunrise"], self._tz),
            sunset=to_local_time(results["sunset"], self._tz),
            solar_noon=to_local_time(results["solar_noon"], self._tz),
            day_length=str(results.get("day_length")),
            attribution=self.attribution,
        )
