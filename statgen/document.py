"""Assemble a complete standalone HTML page from Markdown."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

from .colors import validate_color
from .markdown import extract_title, render_markdown
from .sanitize import sanitize
from .templates import render_page
from .themes import DEFAULT_THEME, resolve_theme

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Static Site"
DEFAULT_FONT_SIZE = "16px"
DEFAULT_FONT_FAMILY = "sans-serif"
DEFAULT_ACCENT = "#3498db"

_FAVICON_TEMPLATE = (
    '<link rel="icon" href="data:image/svg+xml,'
    "<svg xmlns=%22http://www.w3.org/2000/svg%22 viewBox=%220 0 100 100%22>"
    '<text y=%22.9em%22 font-size=%2290%22>{emoji}</text></svg>">'
)


@dataclass(frozen=True, slots=True)
class RenderRequest:
    """Everything needed to turn one Markdown document into a page."""

    markdown_text: str
    font_size: str = DEFAULT_FONT_SIZE
    font_family: str = DEFAULT_FONT_FAMILY
    theme: str = DEFAULT_THEME
    accent_color: str = DEFAULT_ACCENT
    accent_light: str | None = None
    accent_dark: str | None = None
    favicon_emoji: str | None = None

    def accents(self) -> list[str]:
        """Return every accent token the request carries."""
        return [
            color
            for color in (self.accent_color, self.accent_light, self.accent_dark)
            if color is not None
        ]

    def validate(self) -> None:
        """Raise :class:`~statgen.colors.InvalidColor` for the first bad accent."""
        for color in self.accents():
            validate_color(color)


def favicon_link(emoji: str) -> str:
    """Build an icon ``<link>`` whose href is an inline SVG showing ``emoji``."""
    return _FAVICON_TEMPLATE.format(emoji=quote(emoji, safe=""))


def render_document(request: RenderRequest) -> str:
    """Render, sanitize, and wrap ``request.markdown_text`` into a full document.

    Accent colors are validated before anything is rendered. The extracted
    title is inserted as-is; only the body goes through :func:`sanitize`.
    """
    request.validate()

    body = sanitize(render_markdown(request.markdown_text))
    title = extract_title(request.markdown_text) or DEFAULT_TITLE
    theme = resolve_theme(
        request.theme,
        request.accent_color,
        accent_light=request.accent_light,
        accent_dark=request.accent_dark,
    )
    logger.debug("Rendering page %r with theme %s", title, theme.name)

    return render_page(
        {
            "title": title,
            "favicon_link": favicon_link(request.favicon_emoji) if request.favicon_emoji else "",
            "css_variables": theme.variables,
            "font_family": request.font_family,
            "font_size": request.font_size,
            "theme_script": theme.script,
            "body": body,
        }
    )


def generate(
    markdown_text: str,
    font_size: str = DEFAULT_FONT_SIZE,
    font_family: str = DEFAULT_FONT_FAMILY,
    theme: str = DEFAULT_THEME,
    accent_color: str = DEFAULT_ACCENT,
    accent_light: str | None = None,
    accent_dark: str | None = None,
    favicon_emoji: str | None = None,
) -> str:
    """Convert Markdown text into a standalone HTML page."""
    return render_document(
        RenderRequest(
            markdown_text=markdown_text,
            font_size=font_size,
            font_family=font_family,
            theme=theme,
            accent_color=accent_color,
            accent_light=accent_light,
            accent_dark=accent_dark,
            favicon_emoji=favicon_emoji,
        )
    )
