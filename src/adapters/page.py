"""Página anfitriona en memoria.

Equivalente Python de la página del navegador:
- Elementos direccionables por id (botones y regiones de salida).
- `Button.click()` programa los handlers como tareas asyncio y no bloquea.
- La página completa se exporta como HTML con Jinja2.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from markupsafe import Markup

from adapters.markup import get_environment, render_view_html
from core.domain.models import OperationDescriptor, RegionView
from core.interfaces.region import ClickHandler


class HtmlRegion:
    """Región de salida que guarda el último `RegionView` y su markup."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        self.view: RegionView | None = None
        self.html: Markup = Markup("")

    def show(self, view: RegionView) -> None:
        self.view = view
        self.html = render_view_html(view)


class Button:
    """Trigger: cada click lanza una tarea por handler registrado."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        self._handlers: list[ClickHandler] = []
        # Referencias fuertes: el event loop solo guarda referencias débiles a las tareas.
        self._tasks: set[asyncio.Task[None]] = set()

    def on_click(self, handler: ClickHandler) -> None:
        self._handlers.append(handler)

    def click(self) -> list[asyncio.Task[None]]:
        """Requiere un event loop en marcha. Devuelve las tareas creadas."""

        tasks = [asyncio.create_task(handler()) for handler in self._handlers]
        for task in tasks:
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
        return tasks

    @property
    def pending(self) -> tuple[asyncio.Task[None], ...]:
        """Tareas lanzadas por clicks que aún no han terminado."""

        return tuple(self._tasks)


@dataclass
class Page:
    title: str = "Public API Playground"
    regions: dict[str, HtmlRegion] = field(default_factory=dict)
    buttons: dict[str, Button] = field(default_factory=dict)

    @classmethod
    def for_operations(cls, descriptors: Iterable[OperationDescriptor], **kwargs) -> "Page":
        """Crea una página con un botón y una región por operación."""

        page = cls(**kwargs)
        for descriptor in descriptors:
            page.add_region(descriptor.output_id)
            page.add_button(descriptor.button_id)
        return page

    def add_region(self, element_id: str) -> HtmlRegion:
        region = HtmlRegion(element_id)
        self.regions[element_id] = region
        return region

    def add_button(self, element_id: str) -> Button:
        button = Button(element_id)
        self.buttons[element_id] = button
        return button

    def get_element_by_id(self, element_id: str) -> HtmlRegion | Button | None:
        return self.regions.get(element_id) or self.buttons.get(element_id)

    def render_html(self, descriptors: Iterable[OperationDescriptor]) -> str:
        """Documento HTML autocontenido con una sección por operación."""

        panels = []
        for descriptor in descriptors:
            region = self.regions.get(descriptor.output_id)
            panels.append(
                {
                    "title": descriptor.title,
                    "button_id": descriptor.button_id if descriptor.button_id in self.buttons else None,
                    "output_id": descriptor.output_id,
                    "markup": region.html if region is not None else Markup(""),
                }
            )

        generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
        template = get_environment().get_template("page.html")
        return template.render(title=self.title, generated_at=generated_at, panels=panels)


def export_page_html(
    *,
    page: Page,
    descriptors: Iterable[OperationDescriptor],
    output_path: Path,
) -> Path:
    """Exporta la página como HTML UTF-8."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(page.render_html(descriptors), encoding="utf-8")
    return output_path
