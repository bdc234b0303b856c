"""Markdown to standalone HTML pages with sanitized output and color themes."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as load_pkg_version
from pathlib import Path
import tomllib

from .colors import InvalidColor, validate_color
from .document import RenderRequest, generate, render_document
from .escapes import normalize_escapes
from .markdown import extract_title, render_markdown
from .sanitize import sanitize
from .themes import resolve_theme

__all__ = [
    "InvalidColor",
    "RenderRequest",
    "__version__",
    "extract_title",
    "generate",
    "normalize_escapes",
    "render_document",
    "render_markdown",
    "resolve_theme",
    "sanitize",
    "validate_color",
]


DISTRIBUTION_NAME = "statgen"
PYPROJECT_PATH = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _resolve_version() -> str:
    """Prefer installed metadata; a source checkout falls back to its pyproject.toml."""
    try:
        return load_pkg_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pass
    if not PYPROJECT_PATH.is_file():
        return "0.0.0"
    project = tomllib.loads(PYPROJECT_PATH.read_text(encoding="utf-8")).get("project", {})
    return str(project.get("version", "0.0.0"))


__version__ = _resolve_version()
