"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta del registro estático y de los view-models.
- Las tarjetas (`Card`) son registros planos de campos a mostrar: el formato
  de datos vive en las fuentes, el markup en la frontera de render.

Nota:
- Estos modelos describen *qué* se muestra, no *cómo* se obtiene ni se pinta.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class OperationKey(str, Enum):
    """Identificador estable de cada operación."""

    DOG = "dog"
    CAT = "cat"
    JOKE = "joke"
    POKEMON = "pokemon"
    WEATHER = "weather"
    AIR_QUALITY = "air_quality"
    SUN_TIMES = "sun_times"
    EXCHANGE_RATES = "exchange_rates"


class OperationDescriptor(BaseModel):
    """Entrada del registro estático: qué botón dispara qué región.

    Inmutable: se construye una vez al arrancar.
    """

    model_config = ConfigDict(frozen=True)

    key: OperationKey = Field(..., description="Identificador de la operación.")
    button_id: str = Field(..., min_length=1, description="Id del trigger en la página.")
    output_id: str = Field(..., min_length=1, description="Id de la región de salida.")
    message: str = Field(..., min_length=1, description="Mensaje placeholder inicial.")
    loading_message: str = Field(default="Loading...", min_length=1)
    error_message: str = Field(..., min_length=1, description="Prefijo del mensaje de error.")
    title: str = Field(..., min_length=1, description="Título corto (CLI/página).")


class RegionState(str, Enum):
    PLACEHOLDER = "placeholder"
    LOADING = "loading"
    ERROR = "error"
    RENDERED = "rendered"


class Card(BaseModel):
    """View-model base: campos de presentación de una respuesta."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "card"

    attribution: str = Field(..., description="Fuente de los datos (nombre + URL).")


class DogCard(Card):
    kind: ClassVar[str] = "dog"

    image_url: str = Field(..., min_length=1)


class CatCard(Card):
    kind: ClassVar[str] = "cat"

    image_url: str = Field(..., min_length=1)


class JokeCard(Card):
    kind: ClassVar[str] = "joke"

    text: str = Field(..., description="Chiste completo o planteamiento (setup).")
    punchline: str | None = Field(default=None, description="Remate de chistes en dos partes.")


class PokemonCard(Card):
    kind: ClassVar[str] = "pokemon"

    pokemon_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    types: str = Field(..., description="Nombres de tipo separados por coma.")
    sprite_url: str | None = None
    height: int
    weight: int


class WeatherCard(Card):
    kind: ClassVar[str] = "weather"

    city: str
    temperature: float | None = None
    apparent_temperature: float | None = None
    wind_speed: float | None = None
    observed_at: str


class AirQualityCard(Card):
    kind: ClassVar[str] = "air_quality"

    city: str
    us_aqi: float | None = None
    pm2_5: float | None = None
    pm10: float | None = None
    nitrogen_dioxide: float | None = None
    ozone: float | None = None
    observed_at: str


class SunTimesCard(Card):
    kind: ClassVar[str] = "sun_times"

    city: str
    sunrise: str
    sunset: str
    solar_noon: str
    day_length: str


class ExchangeRatesCard(Card):
    kind: ClassVar[str] = "exchange_rates"

    base: str
    eur: str = Field(..., description="Tipo base -> EUR con 3 decimales.")
    usd: str = Field(..., description="Tipo base -> USD con 3 decimales.")
    last_updated: str | None = None


class RegionView(BaseModel):
    """Contenido completo de una región en un instante dado."""

    model_config = ConfigDict(frozen=True)

    state: RegionState
    message: str | None = None
    card: Card | None = None
