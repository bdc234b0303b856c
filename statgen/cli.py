"""CLI entrypoint for converting Markdown into standalone HTML pages."""

from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from . import __version__
from .colors import InvalidColor
from .config import Settings, load_config, resolve_settings
from .escapes import normalize_escapes
from .publish import INDEX_FILENAME, convert_directory, convert_file, write_page

console = Console()
app = typer.Typer(
    help="Convert Markdown to responsive, self-contained HTML pages.",
    add_completion=False,
)

POWERSHELL_NEWLINE = "`n"


class ThemeChoice(str, Enum):
    """Color schemes accepted by ``--theme``."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class FontChoice(str, Enum):
    """Font families accepted by ``--font``."""

    ARIAL = "Arial"
    HELVETICA = "Helvetica"
    TIMES_NEW_ROMAN = "Times New Roman"
    GEORGIA = "Georgia"
    VERDANA = "Verdana"
    COURIER_NEW = "Courier New"
    MONOSPACE = "monospace"
    SANS_SERIF = "sans-serif"
    SERIF = "serif"


ColorOption = Annotated[
    str | None,
    typer.Option(help="Hex code (#ff0000) or color name (red, blue, ...)."),
]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"statgen {__version__}")
        raise typer.Exit()


@app.command()
def main(  # noqa: PLR0913
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Markdown file (.md) to convert to index.html."),
    ] = None,
    directory: Annotated[
        Path | None,
        typer.Option(
            "--directory",
            "-d",
            help="Directory whose .md files are each converted to <name>.html.",
        ),
    ] = None,
    inline: Annotated[
        str | None,
        typer.Option(
            "--inline",
            "-i",
            help="Markdown given directly; use \\n (or `n in PowerShell) for newlines.",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Directory for generated HTML. Defaults to 'dist'."),
    ] = None,
    font_size: Annotated[
        str | None,
        typer.Option("--font-size", help="CSS font-size value (e.g. '16px', '1.2em', '14pt')."),
    ] = None,
    theme: Annotated[
        ThemeChoice | None,
        typer.Option("--theme", help="light, dark, or auto (follows the system preference)."),
    ] = None,
    accent: ColorOption = None,
    accent_light: ColorOption = None,
    accent_dark: ColorOption = None,
    font: Annotated[
        FontChoice | None,
        typer.Option("--font", "-F", help="Font family for the page."),
    ] = None,
    favicon: Annotated[
        str | None,
        typer.Option("--favicon", "-e", help="Emoji used as the page favicon."),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Convert Markdown from a file, a directory, or the command line into HTML."""
    cli_values: dict[str, Any] = {
        "output": output,
        "font_size": font_size,
        "font": font.value if font else None,
        "theme": theme.value if theme else None,
        "accent": accent,
        "accent_light": accent_light,
        "accent_dark": accent_dark,
        "favicon": favicon,
    }
    settings = resolve_settings(cli_values, load_config())

    if settings.font_is_custom:
        console.print(
            f"[bold yellow]Font[/]: make sure '{settings.font}' is installed on your system."
        )

    try:
        settings.validate_colors()
    except InvalidColor as exc:
        console.print(f"[bold red]Invalid color[/]: {exc}")
        raise typer.Exit(code=1) from exc

    try:
        settings.output.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        console.print(f"[bold red]Cannot create output directory[/] {_display_path(settings.output)}: {exc}")
        raise typer.Exit(code=1) from exc

    if directory is not None:
        _convert_batch(directory, settings)
    elif file is not None:
        _convert_single(file, settings)
    elif inline is not None:
        console.print("[bold blue]Converting[/]: inline markdown")
        markdown_text = normalize_escapes(inline).replace(POWERSHELL_NEWLINE, "\n")
        try:
            target = write_page(markdown_text, settings.output / INDEX_FILENAME, settings)
        except OSError as exc:
            console.print(f"[bold red]Cannot write page[/]: {exc}")
            raise typer.Exit(code=1) from exc
        console.print(f"[bold green]Generated[/]: {_display_path(target)}")
    else:
        console.print("[bold red]Nothing to convert[/]: provide --file, --directory, or --inline.")
        raise typer.Exit(code=1)


def _convert_single(source: Path, settings: Settings) -> None:
    console.print(f"[bold blue]Converting[/]: {_display_path(source)}")
    try:
        target = convert_file(source, settings.output, settings)
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[bold red]Cannot convert[/] {_display_path(source)}: {exc}")
        raise typer.Exit(code=1) from exc
    console.print(f"[bold green]Generated[/]: {_display_path(target)}")


def _convert_batch(source_dir: Path, settings: Settings) -> None:
    console.print(f"[bold blue]Converting[/]: every .md file in {_display_path(source_dir)}")
    try:
        result = convert_directory(source_dir, settings.output, settings)
    except OSError as exc:
        console.print(f"[bold red]Cannot read directory[/] {_display_path(source_dir)}: {exc}")
        raise typer.Exit(code=1) from exc

    for target in result.written:
        console.print(f"[bold green]Generated[/]: {_display_path(target)}")
    for source, message in result.failures:
        console.print(f"[bold red]Failed[/] {_display_path(source)}: {message}")

    if result.processed == 0 and not result.failures:
        console.print(f"[bold yellow]No .md files found[/] in {_display_path(source_dir)}")
    elif result.processed:
        console.print(f"[bold green]Converted[/] {result.processed} Markdown file(s).")


def _display_path(path: Path) -> str:
    try:
        return path.resolve().relative_to(Path.cwd()).as_posix()
    except ValueError:
        return path.as_posix()
