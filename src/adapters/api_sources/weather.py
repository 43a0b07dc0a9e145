"""Fuente API: Open-Meteo (clima actual).

Ubicación fija (configurable), unidades métricas. Las lecturas pueden llegar a
`null`; se muestran tal cual.
"""

from __future__ import annotations

import httpx

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.models import WeatherCard
from core.interfaces.source import ApiSource
from core.validation import validate_response


class WeatherSource(ApiSource):
    attribution = "Open-Meteo (https://open-meteo.com/en/docs)"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self) -> WeatherCard:
        location = self._settings.weather_location
        params = {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "current": "temperature_2m,apparent_temperature,wind_speed_10m",
            "temperature_unit": "celsius",
            "wind_speed_unit": "kmh",
        }
        data = await fetch_json(
            self._settings.endpoints.weather,
            params=params,
            settings=self._settings,
            transport=self._transport,
        )
        validate_response(data, ["current"])
        current = data["current"]

        return WeatherCard(
            city=location.name,
            temperature=current.get("temperature_2m"),
            apparent_temperature=current.get("apparent_temperature"),
            wind_speed=current.get("wind_speed_10m"),
            observed_at=current["time"],
            attribution=self.attribution,
        )
