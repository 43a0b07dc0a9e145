"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.status_code < 500, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


async def _check_all(settings: AppSettings) -> list[tuple[str, str, bool, str]]:
    # Solo conectividad: cualquier respuesta < 500 cuenta como alcanzable.
    endpoints = settings.endpoints.model_dump()
    results = await asyncio.gather(*(_check_http(url, settings) for url in endpoints.values()))
    return [
        (name, url, ok, detail)
        for (name, url), (ok, detail) in zip(endpoints.items(), results)
    ]


@app.command()
def run() -> None:
    """Run baseline diagnostics and show the effective configuration."""

    settings = AppSettings()

    table = Table(title="APIBoard Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row(
        "Stale renders",
        "OK",
        "discarded" if settings.discard_stale_renders else "last write wins",
    )
    table.add_row("Weather location", "OK", settings.weather_location.name)

    # Connectivity (best-effort)
    for name, url, ok, detail in asyncio.run(_check_all(settings)):
        table.add_row(f"API {name}", "OK" if ok else "FAIL", f"{detail} · {url}")

    _console.print(table)
