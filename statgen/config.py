"""Optional project configuration files and option precedence."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .colors import validate_color
from .document import (
    DEFAULT_ACCENT,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    RenderRequest,
)
from .themes import DEFAULT_THEME

logger = logging.getLogger(__name__)

CONFIG_FILENAMES: tuple[str, ...] = ("statgen.json", "statgen.yaml", "statgen.yml")
DEFAULT_OUTPUT_DIR = Path("dist")

SETTING_FIELDS: tuple[str, ...] = (
    "output",
    "font_size",
    "font",
    "theme",
    "accent",
    "accent_light",
    "accent_dark",
    "favicon",
)


class Config(BaseModel):
    """Values read from ``statgen.json`` / ``statgen.yaml``; every key is optional."""

    font_size: str | None = None
    font: str | None = None
    theme: str | None = None
    accent: str | None = None
    accent_light: str | None = None
    accent_dark: str | None = None
    output: str | None = None
    favicon: str | None = None

    @field_validator("*", mode="before")
    def _stringify_scalars(cls, value: Any) -> Any:
        # YAML reads `font_size: 18` as an int.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class Settings(BaseModel):
    """Fully resolved options for one run."""

    output: Path = Field(default=DEFAULT_OUTPUT_DIR)
    font_size: str = Field(default=DEFAULT_FONT_SIZE)
    font: str = Field(default=DEFAULT_FONT_FAMILY)
    theme: str = Field(default=DEFAULT_THEME)
    accent: str = Field(default=DEFAULT_ACCENT)
    accent_light: str | None = None
    accent_dark: str | None = None
    favicon: str | None = None
    font_is_custom: bool = Field(
        default=False,
        description="True when the font came from the command line or a config file.",
    )

    @field_validator("output", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    def validate_colors(self) -> None:
        """Raise :class:`~statgen.colors.InvalidColor` before any file is touched."""
        for color in (self.accent, self.accent_light, self.accent_dark):
            if color is not None:
                validate_color(color)

    def render_request(self, markdown_text: str) -> RenderRequest:
        return RenderRequest(
            markdown_text=markdown_text,
            font_size=self.font_size,
            font_family=self.font,
            theme=self.theme,
            accent_color=self.accent,
            accent_light=self.accent_light,
            accent_dark=self.accent_dark,
            favicon_emoji=self.favicon,
        )


def load_config(directory: str | Path = ".") -> Config | None:
    """Return the first usable config file found in ``directory``.

    Candidates are tried in :data:`CONFIG_FILENAMES` order. A file that cannot
    be read, parsed, or validated is reported and skipped; ``None`` means no
    candidate was usable.
    """
    base = Path(directory)
    for filename in CONFIG_FILENAMES:
        path = base / filename
        if not path.exists():
            continue
        try:
            config = _parse_config(path)
        except ValidationError as exc:
            logger.warning("Ignoring invalid config file %s: %s", path, exc)
            continue
        except (OSError, ValueError, yaml.YAMLError) as exc:
            logger.warning("Failed to parse config file %s: %s", path, exc)
            continue
        logger.debug("Loaded configuration from %s", path)
        return config
    return None


def _parse_config(path: Path) -> Config:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not define a mapping at the top level")
    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise ValueError(f"{path} has non-string keys: {bad_keys!r}")
    return Config.model_validate(data)


def resolve_settings(cli_values: Mapping[str, Any], config: Config | None = None) -> Settings:
    """Layer command-line values over config-file values over defaults.

    ``cli_values`` maps :data:`SETTING_FIELDS` names to values; ``None`` or a
    missing key means the option was not given.
    """
    resolved: dict[str, Any] = {}
    for name in SETTING_FIELDS:
        value = cli_values.get(name)
        if value is None and config is not None:
            value = getattr(config, name)
        if value is not None:
            resolved[name] = value
    resolved["font_is_custom"] = "font" in resolved
    return Settings(**resolved)
