"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Es la frontera de render en terminal: recibe `RegionView`, nunca HTML.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from core.domain.models import (
    AirQualityCard,
    Card,
    CatCard,
    DogCard,
    ExchangeRatesCard,
    JokeCard,
    OperationDescriptor,
    PokemonCard,
    RegionState,
    RegionView,
    SunTimesCard,
    WeatherCard,
)


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("APIBoard", style="bold cyan")
    subtitle = Text("Dogs • Cats • Jokes • Pokémon • Weather • Air • Sun • Rates", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_operations_table(descriptors: Iterable[OperationDescriptor]) -> Table:
    table = Table(title="Operations")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Button", style="white")
    table.add_column("Output", style="white")
    table.add_column("Placeholder", style="dim")
    for descriptor in descriptors:
        table.add_row(
            descriptor.key.value,
            descriptor.button_id,
            descriptor.output_id,
            descriptor.message,
        )
    return table


def _card_rows(card: Card) -> list[tuple[str, str]]:
    if isinstance(card, (DogCard, CatCard)):
        return [("Image", card.image_url)]
    if isinstance(card, JokeCard):
        rows = [("Joke", card.text)]
        if card.punchline:
            rows.append(("Punchline", card.punchline))
        return rows
    if isinstance(card, PokemonCard):
        rows = [
            ("Name", f"{card.name} (#{card.pokemon_id})"),
            ("Type", card.types),
            ("Height | Weight", f"{card.height} | {card.weight}"),
        ]
        if card.sprite_url:
            rows.append(("Sprite", card.sprite_url))
        return rows
    if isinstance(card, WeatherCard):
        return [
            ("City", card.city),
            ("Temperature", f"{card.temperature}°C (feels like {card.apparent_temperature}°C)"),
            ("Wind", f"{card.wind_speed} km/h"),
            ("Updated", card.observed_at),
        ]
    if isinstance(card, AirQualityCard):
        return [
            ("City", card.city),
            ("US AQI", str(card.us_aqi)),
            ("PM2.5", f"{card.pm2_5} µg/m³"),
            ("PM10", f"{card.pm10} µg/m³"),
            ("NO₂", f"{card.nitrogen_dioxide} µg/m³"),
            ("O₃", f"{card.ozone} µg/m³"),
            ("Updated", card.observed_at),
        ]
    if isinstance(card, SunTimesCard):
        return [
            ("City", card.city),
            ("Sunrise", card.sunrise),
            ("Sunset", card.sunset),
            ("Solar Noon", card.solar_noon),
            ("Day Length", card.day_length),
        ]
    if isinstance(card, ExchangeRatesCard):
        return [
            ("Base", card.base),
            (f"{card.base} → EUR", card.eur),
            (f"{card.base} → USD", card.usd),
            ("Last Updated", card.last_updated or "-"),
        ]
    return [(name, str(value)) for name, value in card.model_dump().items() if name != "attribution"]


def build_card_table(card: Card) -> Table:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    for label, value in _card_rows(card):
        table.add_row(label, value)
    return table


def build_region_panel(title: str, view: RegionView | None) -> Panel:
    """Panel Rich con el contenido actual de una región."""

    if view is None:
        return Panel(Text("(no output)", style="dim"), title=title, border_style="dim")

    if view.state is RegionState.LOADING:
        body = Spinner("dots", text=view.message or "")
        return Panel(body, title=title, border_style="blue")
    if view.state is RegionState.ERROR:
        return Panel(Text(f"❌ {view.message}", style="red"), title=title, border_style="red")
    if view.state is RegionState.PLACEHOLDER or view.card is None:
        return Panel(Text(view.message or "", style="dim"), title=title, border_style="dim")

    footer = Text(f"Source: {view.card.attribution}", style="dim")
    return Panel(Group(build_card_table(view.card), footer), title=title, border_style="green")
