"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para que todas las fuentes se comporten igual.
- Traduce fallos de transporte/HTTP/JSON a los errores tipados del Core.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

import httpx

from core.config import AppSettings
from core.errors import NetworkError, ParseError, RequestFailed


QueryParams = Mapping[str, str | int | float | None]


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def build_url(base_url: str, params: QueryParams | None = None) -> str:
    """Compone la URL final.

    Un valor `None` se serializa como flag sin valor (`?safe-mode`).
    """

    if not params:
        return base_url
    parts: list[str] = []
    for key, value in params.items():
        if value is None:
            parts.append(key)
        else:
            parts.append(str(httpx.QueryParams({key: str(value)})))
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{'&'.join(parts)}"


async def fetch_json(
    url: str,
    *,
    params: QueryParams | None = None,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """GET + decodificación JSON.

    Errores:
    - `NetworkError`: DNS, conexión, timeout, redirecciones, decodificación.
    - `RequestFailed(status)`: status fuera de 2xx.
    - `ParseError`: cuerpo no decodificable como JSON.
    """

    full_url = build_url(url, params)
    try:
        async with build_async_client(settings, transport=transport) as client:
            response = await client.get(full_url)
    except httpx.RequestError as exc:
        # Incluye TooManyRedirects y DecodingError, no solo TransportError.
        raise NetworkError(str(exc) or exc.__class__.__name__) from exc

    if not response.is_success:
        raise RequestFailed(response.status_code)

    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError() from exc
