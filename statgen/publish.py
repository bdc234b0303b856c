"""Write rendered pages to disk, one file or a whole directory at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import Settings
from .document import render_document

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
INDEX_FILENAME = "index.html"


@dataclass
class BatchResult:
    """Outcome of converting every Markdown file in a directory."""

    written: list[Path] = field(default_factory=list)
    failures: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.written)


def write_page(markdown_text: str, destination: Path, settings: Settings) -> Path:
    """Render ``markdown_text`` with ``settings`` and write it to ``destination``."""
    html = render_document(settings.render_request(markdown_text))
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(html, encoding="utf-8")
    logger.debug("Wrote %s", destination)
    return destination


def convert_file(
    source: Path,
    output_dir: Path,
    settings: Settings,
    *,
    name: str = INDEX_FILENAME,
) -> Path:
    """Convert one Markdown file into ``output_dir / name``."""
    markdown_text = source.read_text(encoding="utf-8")
    return write_page(markdown_text, output_dir / name, settings)


def markdown_sources(source_dir: Path) -> list[Path]:
    """Return the ``.md`` files directly inside ``source_dir``, sorted by name."""
    return sorted(
        path for path in source_dir.iterdir() if path.is_file() and path.suffix == MARKDOWN_SUFFIX
    )


def convert_directory(source_dir: Path, output_dir: Path, settings: Settings) -> BatchResult:
    """Convert each Markdown file in ``source_dir`` to ``<stem>.html`` in ``output_dir``.

    A file that cannot be read or written is recorded in ``failures`` and the
    remaining files are still converted.
    """
    result = BatchResult()
    for source in markdown_sources(source_dir):
        try:
            destination = convert_file(source, output_dir, settings, name=f"{source.stem}.html")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to convert %s: %s", source, exc)
            result.failures.append((source, str(exc)))
            continue
        result.written.append(destination)
    return result
