"""Fuentes API (adaptadores concretos).

Por qué un paquete:
- Un módulo por API pública.
- Cada módulo implementa `core.interfaces.source.ApiSource`.
"""

from adapters.api_sources.air_quality import AirQualitySource
from adapters.api_sources.cat import CatImageSource
from adapters.api_sources.dog import DogImageSource
from adapters.api_sources.exchange_rates import ExchangeRatesSource
from adapters.api_sources.joke import JokeSource
from adapters.api_sources.pokemon import PokemonSource
from adapters.api_sources.sun_times import SunTimesSource
from adapters.api_sources.weather import WeatherSource

__all__ = [
	"AirQualitySource",
	"CatImageSource",
	"DogImageSource",
	"ExchangeRatesSource",
	"JokeSource",
	"PokemonSource",
	"SunTimesSource",
	"WeatherSource",
]
