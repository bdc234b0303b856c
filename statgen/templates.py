"""Jinja2 environment for the standalone page template."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined

PAGE_TEMPLATE = "page.html"


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    # Title and body are already final HTML; escaping them here would double-encode the body.
    return Environment(
        loader=PackageLoader("statgen", "templates"),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_page(context: dict[str, Any]) -> str:
    """Render the page skeleton with ``context``."""
    template = template_environment().get_template(PAGE_TEMPLATE)
    return template.render(**context)
