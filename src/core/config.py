"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP, fuentes API) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "apiboard"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "apiboard"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "apiboard"
    return Path.home() / ".config" / "apiboard"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class Location(BaseModel):
    """Punto geográfico fijo usado por las fuentes meteorológicas."""

    name: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class ApiEndpoints(BaseModel):
    """URLs base de las ocho APIs públicas."""

    dog: str = "https://dog.ceo/api/breeds/image/random"
    cat: str = "https://api.thecatapi.com/v1/images/search"
    joke: str = "https://v2.jokeapi.dev/joke/Any"
    pokemon: str = "https://pokeapi.co/api/v2/pokemon"
    weather: str = "https://api.open-meteo.com/v1/forecast"
    air_quality: str = "https://air-quality-api.open-meteo.com/v1/air-quality"
    sun_times: str = "https://api.sunrise-sunset.org/json"
    exchange_rates: str = "https://open.er-api.com/v6/latest"


TORONTO = Location(name="Toronto, ON", latitude=43.7064, longitude=-79.3986)
TORONTO_SUNRISE = Location(name="Toronto, ON", latitude=43.6532, longitude=-79.3832)


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="APIBOARD_",
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="apiboard/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones a las APIs públicas.",
    )

    endpoints: ApiEndpoints = Field(
        default_factory=ApiEndpoints,
        description="URLs de cada API (sobrescribibles p.ej. APIBOARD_ENDPOINTS__DOG).",
    )
    weather_location: Location = Field(
        default=TORONTO,
        description="Ubicación para clima y calidad del aire.",
    )
    sun_location: Location = Field(
        default=TORONTO_SUNRISE,
        description="Ubicación para amanecer/atardecer.",
    )

    pokemon_max_id: int = Field(
        default=151,
        ge=1,
        description="Id máximo (inclusive) para el Pokémon aleatorio.",
    )
    joke_safe_mode: bool = Field(
        default=True,
        description="Añade el flag `safe-mode` a la petición de chistes.",
    )
    exchange_base: str = Field(
        default="CAD",
        min_length=3,
        max_length=3,
        description="Moneda base para los tipos de cambio.",
    )

    discard_stale_renders: bool = Field(
        default=True,
        description=(
            "Descarta resultados de invocaciones antiguas de una misma región. "
            "En False se conserva last-write-wins."
        ),
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ...).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs en JSON en lugar de consola legible.",
    )
