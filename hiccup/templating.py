"""Jinja integration: wrap rendered fragments in page templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .config import RenderOptions
from .render import render_to_string


def to_markup(nodes: Any, options: Optional[RenderOptions] = None) -> Markup:
    """Render nodes into a ``Markup`` string so autoescaping leaves it alone."""
    return Markup(render_to_string(nodes, options))


def jinja_env(templates_dir: Path) -> Environment:
    """Create a Jinja environment for page templates with a ``hiccup`` filter."""

    env = Environment(
        loader=FileSystemLoader([templates_dir]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters["hiccup"] = to_markup
    env.globals["hiccup"] = to_markup
    return env


def render_page(
    env: Environment,
    template_name: str,
    nodes: Any,
    options: Optional[RenderOptions] = None,
    **context: Any,
) -> str:
    template = env.get_template(template_name)
    return template.render(content=to_markup(nodes, options), **context)
