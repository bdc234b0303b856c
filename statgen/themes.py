"""Theme palettes and the CSS custom properties derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from textwrap import dedent

DEFAULT_THEME = "auto"
AUTO_THEME = "auto"


@dataclass(frozen=True, slots=True)
class ThemePalette:
    """Seven base colors of a rendered page; the link color comes from the accent."""

    background: str
    text: str
    header: str
    code_background: str
    code_text: str
    blockquote_background: str
    border: str

    def variables(self, accent: str) -> dict[str, str]:
        """Map CSS custom property names to values, in declaration order."""
        return {
            "--bg-color": self.background,
            "--text-color": self.text,
            "--header-color": self.header,
            "--code-bg": self.code_background,
            "--code-color": self.code_text,
            "--link-color": accent,
            "--blockquote-bg": self.blockquote_background,
            "--border-color": self.border,
        }


LIGHT_PALETTE = ThemePalette(
    background="#f4f4f4",
    text="#333",
    header="#2c3e50",
    code_background="#e7e7e7",
    code_text="#333",
    blockquote_background="#f9f9f9",
    border="#e0e0e0",
)

DARK_PALETTE = ThemePalette(
    background="#1a1a1a",
    text="#e0e0e0",
    header="#ffffff",
    code_background="#2d2d2d",
    code_text="#cccccc",
    blockquote_background="#2a2a2a",
    border="#404040",
)

# "auto" renders light on the server; the embedded script switches in the browser.
PALETTES: dict[str, ThemePalette] = {
    "light": LIGHT_PALETTE,
    "dark": DARK_PALETTE,
    AUTO_THEME: LIGHT_PALETTE,
}

_SWITCH_SCRIPT = dedent(
    """
    <script>
      function applyTheme(theme) {
        const root = document.documentElement;
        if (theme === 'dark') {
    {dark}
        } else {
    {light}
        }
      }

      // Detect system theme
      const prefersDark = window.matchMedia('(prefers-color-scheme: dark)').matches;
      applyTheme(prefersDark ? 'dark' : 'light');

      // Listen for changes
      window.matchMedia('(prefers-color-scheme: dark)').addEventListener('change', (e) => {
        applyTheme(e.matches ? 'dark' : 'light');
      });
    </script>
    """
).strip()


@dataclass(frozen=True, slots=True)
class ResolvedTheme:
    """Server-side CSS variables plus the optional client-side switching script."""

    name: str
    palette: ThemePalette
    accent: str
    script: str = ""

    @property
    def variables(self) -> dict[str, str]:
        return self.palette.variables(self.accent)


def palette_for(theme: str) -> ThemePalette:
    """Return the palette for ``theme``; unknown names fall back to light."""
    return PALETTES.get(theme, LIGHT_PALETTE)


def resolve_theme(
    theme: str,
    accent: str,
    accent_light: str | None = None,
    accent_dark: str | None = None,
) -> ResolvedTheme:
    """Resolve a theme keyword and accents into variables and, for ``auto``, a script.

    The light/dark accent overrides only affect the ``auto`` script; both default
    to ``accent``.
    """
    script = ""
    if theme == AUTO_THEME:
        script = build_switch_script(accent_light or accent, accent_dark or accent)
    return ResolvedTheme(name=theme, palette=palette_for(theme), accent=accent, script=script)


def build_switch_script(light_accent: str, dark_accent: str) -> str:
    """Build the ``<script>`` that follows the viewer's ``prefers-color-scheme`` live."""
    return _SWITCH_SCRIPT.replace(
        "{dark}", _set_properties(DARK_PALETTE.variables(dark_accent))
    ).replace("{light}", _set_properties(LIGHT_PALETTE.variables(light_accent)))


def _set_properties(variables: dict[str, str]) -> str:
    indent = " " * 6
    return "\n".join(
        f"{indent}root.style.setProperty('{name}', '{value}');" for name, value in variables.items()
    )
