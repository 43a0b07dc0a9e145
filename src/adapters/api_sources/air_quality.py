"""Fuente API: Open-Meteo Air Quality.

Los contaminantes pueden llegar a `null` en la API; se muestran tal cual.
"""

from __future__ import annotations

import httpx

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.models import AirQualityCard
from core.interfaces.source import ApiSource
from core.validation import validate_response


class AirQualitySource(ApiSource):
    attribution = "Open-Meteo Air Quality (https://open-meteo.com/en/docs/air-quality-api)"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self) -> AirQualityCard:
        location = self._settings.weather_location
        params = {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "current": "us_aqi,pm2_5,pm10,nitrogen_dioxide,ozone",
        }
        data = await fetch_json(
            self._settings.endpoints.air_quality,
            params=params,
            settings=self._settings,
            transport=self._transport,
        )
        validate_response(data, ["current"])
        current = data["current"]

        return AirQualityCard(
            city=location.name,
            us_aqi=current.get("us_aqi"),
            pm2_5=current.get("pm2_5"),
            pm10=current.get("pm10"),
            nitrogen_dioxide=current.get("nitrogen_dioxide"),
            ozone=current.get("ozone"),
            observed_at=current["time"],
            attribution=self.attribution,
        )
