"""Repair Markdown typed on the command line.

Shells hand inline content over with literal escape sequences (``\\n``) and
users tend to drop the space after heading markers. File-sourced Markdown is
never passed through here.
"""

from __future__ import annotations

CONTROL_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\n", "\n"),
    ("\\t", "\t"),
    ("\\r", "\r"),
)


def normalize_escapes(text: str) -> str:
    """Turn escaped control sequences into real ones and fix ``#Heading`` lines."""
    for literal, control in CONTROL_ESCAPES:
        text = text.replace(literal, control)
    # Must follow the control escapes so "\\n" is not read back as a newline.
    text = text.replace("\\\\", "\\")
    text = text.replace(" \n", "\n").replace("\n ", "\n")
    return "\n".join(_repair_heading(line) for line in _split_lines(text))


def _repair_heading(line: str) -> str:
    trimmed = line.lstrip()
    if not trimmed.startswith("#") or trimmed.startswith("# ") or len(trimmed) == 1:
        return line
    level = len(trimmed) - len(trimmed.lstrip("#"))
    rest = trimmed[level:].lstrip()
    return f"{'#' * level} {rest}"


def _split_lines(text: str) -> list[str]:
    # One trailing newline does not open an extra line; CRLF endings count as one break.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
