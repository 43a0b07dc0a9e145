"""Registro estático de operaciones.

Una entrada por API: qué botón la dispara, en qué región se pinta y con qué
mensajes. Se construye una vez; el mapeo a handlers vive en
`core.services.dashboard`.
"""

from __future__ import annotations

from core.domain.models import OperationDescriptor, OperationKey

OPERATIONS: tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        key=OperationKey.DOG,
        button_id="dog-button",
        output_id="dog-output",
        title="Dog",
        message='Click "Get Dog" to load an image.',
        loading_message="Fetching a random dog...",
        error_message="Could not load dog image.",
    ),
    OperationDescriptor(
        key=OperationKey.CAT,
        button_id="cat-button",
        output_id="cat-output",
        title="Cat",
        message='Click "Get Cat" to load an image.',
        loading_message="Fetching a random cat...",
        error_message="Could not load cat image.",
    ),
    OperationDescriptor(
        key=OperationKey.JOKE,
        button_id="joke-button",
        output_id="joke-output",
        title="Joke",
        message='Click "Get Joke" for a random joke.',
        loading_message="Fetching a joke...",
        error_message="Could not load a joke.",
    ),
    OperationDescriptor(
        key=OperationKey.POKEMON,
        button_id="pokemon-button",
        output_id="pokemon-output",
        title="Pokémon",
        message='Click "Get Pokémon" for a random Pokémon.',
        loading_message="Fetching a random Pokémon...",
        error_message="Could not load Pokémon.",
    ),
    OperationDescriptor(
        key=OperationKey.WEATHER,
        button_id="weather-button",
        output_id="weather-output",
        title="Weather",
        message='Click "Get Weather" to load Toronto weather.',
        loading_message="Fetching weather (Toronto)...",
        error_message="Could not load current Toronto weather.",
    ),
    OperationDescriptor(
        key=OperationKey.AIR_QUALITY,
        button_id="airquality-button",
        output_id="airquality-output",
        title="Air Quality",
        message='Click "Get Air Quality" to load Toronto air quality.',
        loading_message="Fetching Toronto air quality...",
        error_message="Could not load air quality.",
    ),
    OperationDescriptor(
        key=OperationKey.SUN_TIMES,
        button_id="sun-button",
        output_id="sun-output",
        title="Sun Times",
        message='Click "Get Sun Times" to load sunrise and sunset data for Toronto.',
        loading_message="Fetching sun times for Toronto...",
        error_message="Could not load sun data.",
    ),
    OperationDescriptor(
        key=OperationKey.EXCHANGE_RATES,
        button_id="currency-button",
        output_id="currency-output",
        title="Exchange Rates",
        message='Click "Get Rates" to load CAD exchange rates.',
        loading_message="Fetching exchange rates (CAD)...",
        error_message="Could not load currency rates.",
    ),
)


def get_descriptor(key: OperationKey | str) -> OperationDescriptor:
    """Busca una entrada por clave (`ValueError` si la clave no es válida)."""

    wanted = OperationKey(key)
    for descriptor in OPERATIONS:
        if descriptor.key is wanted:
            return descriptor
    raise KeyError(wanted)
