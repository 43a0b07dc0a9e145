"""CLI principal (Typer).

Comandos:
- `list`: registro de operaciones.
- `fetch`: ejecuta operaciones en paralelo y muestra un panel por región.
- `page`: ejecuta operaciones y exporta la página completa como HTML.
- `doctor`: diagnósticos de entorno.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console

from adapters.page import Page, export_page_html
from cli import doctor
from cli.ui_components import build_operations_table, build_region_panel, print_banner
from core.config import AppSettings
from core.domain.models import OperationDescriptor, OperationKey
from core.logging import configure_logging
from core.registry import OPERATIONS
from core.services.dashboard import Dashboard, DashboardHooks, start_dashboard

app = typer.Typer(
    no_args_is_help=True,
    help="Fetch data from eight public APIs and render it.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _parse_keys(values: list[str] | None) -> list[OperationKey] | None:
    if not values:
        return None
    keys: list[OperationKey] = []
    for value in values:
        try:
            keys.append(OperationKey(value.strip().lower()))
        except ValueError:
            valid = ", ".join(k.value for k in OperationKey)
            raise typer.BadParameter(f"Unknown operation '{value}'. Valid: {valid}")
    return keys


def _selected_descriptors(keys: list[OperationKey] | None) -> list[OperationDescriptor]:
    if keys is None:
        return list(OPERATIONS)
    return [d for d in OPERATIONS if d.key in keys]


def _start(settings: AppSettings) -> tuple[Page, Dashboard]:
    configure_logging(level=settings.log_level, json=settings.log_json)
    page = Page.for_operations(OPERATIONS)
    hooks = DashboardHooks(warning=lambda msg: _console.print(f"[yellow]{msg}[/yellow]"))
    dashboard = start_dashboard(page, settings=settings, hooks=hooks)
    return page, dashboard


@app.command(name="list")
def list_operations() -> None:
    """Show the operation registry."""

    _console.print(build_operations_table(OPERATIONS))


@app.command()
def fetch(
    operations: list[str] | None = typer.Argument(
        None,
        help="Operation keys (dog, cat, joke, ...). All when omitted.",
    ),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the banner."),
) -> None:
    """Run operations concurrently and print one panel per output region."""

    keys = _parse_keys(operations)
    settings = AppSettings()
    page, dashboard = _start(settings)

    if banner:
        print_banner(_console)

    asyncio.run(dashboard.run(keys))

    for descriptor in _selected_descriptors(keys):
        region = page.regions.get(descriptor.output_id)
        _console.print(build_region_panel(descriptor.title, region.view if region else None))


@app.command()
def page(
    operations: list[str] | None = typer.Argument(
        None,
        help="Operation keys to run before exporting. All when omitted.",
    ),
    output: Path = typer.Option(
        Path("reports") / "apiboard.html",
        "--output",
        "-o",
        help="Destination HTML file.",
    ),
    run_operations: bool = typer.Option(
        True,
        "--run/--no-run",
        help="Run the operations first (otherwise only placeholders are exported).",
    ),
) -> None:
    """Export the whole page (every region) as a standalone HTML file."""

    keys = _parse_keys(operations)
    settings = AppSettings()
    host, dashboard = _start(settings)

    if run_operations:
        asyncio.run(dashboard.run(keys))

    path = export_page_html(page=host, descriptors=OPERATIONS, output_path=output)
    _console.print(f"[green]Page written to:[/green] {path}")


def run() -> None:
    app()
