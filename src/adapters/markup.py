"""Frontera de render HTML.

Por qué está en adapters:
- El markup es un detalle de infraestructura (Jinja2).
- El Core solo conoce `RegionView` y las tarjetas.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from core.domain.models import RegionView


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_view_html(view: RegionView) -> Markup:
    """Markup del contenido completo de una región."""

    template = get_environment().get_template("region.html")
    return Markup(template.render(view=view).strip())
