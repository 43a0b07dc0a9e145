"""Fuente API: open.er-api.com.

Moneda base fija (config, CAD por defecto); se muestran EUR y USD con 3
decimales.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.models import ExchangeRatesCard
from core.errors import MissingRate
from core.interfaces.source import ApiSource
from core.validation import validate_response


def format_rate(value: Any) -> str:
    return f"{float(value):.3f}"


def format_exchange_rates(data: dict[str, Any], *, base: str, attribution: str) -> ExchangeRatesCard:
    rates = data["rates"]
    eur = rates.get("EUR")
    usd = rates.get("USD")
    if not eur or not usd:
        raise MissingRate()

    return ExchangeRatesCard(
        base=base,
        eur=format_rate(eur),
        usd=format_rate(usd),
        last_updated=data.get("time_last_update_utc"),
        attribution=attribution,
    )


class ExchangeRatesSource(ApiSource):
    attribution = (
        "open.er-api.com (https://www.exchangerate-api.com/docs/free?ref=freepublicapis.com)"
    )

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self) -> ExchangeRatesCard:
        base = self._settings.exchange_base.upper()
        url = f"{self._settings.endpoints.exchange_rates.rstrip('/')}/{base}"
        data = await fetch_json(url, settings=self._settings, transport=self._transport)
        validate_response(data, ["rates"])
        return format_exchange_rates(data, base=base, attribution=self.attribution)
