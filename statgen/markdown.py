"""Shared Markdown rendering helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import cast

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

TASK_ITEM_CLASS = "task-list-item"
TASK_CHECKBOX_PREFIX = '<input class="task-list-item-checkbox"'
UNCHECKED_BOX = '<input disabled="" type="checkbox">'
CHECKED_BOX = '<input disabled="" type="checkbox" checked="">'

# Longest run first so "---" is not read as "--" followed by "-".
PUNCTUATION_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("---", "\u2014"),
    ("--", "\u2013"),
    ("...", "\u2026"),
)


@lru_cache(maxsize=1)
def _renderer() -> MarkdownIt:
    """Configure and cache a CommonMark renderer with the GitHub-style extensions."""
    md = MarkdownIt("commonmark", {"html": True, "typographer": True})
    md.enable("table").enable("strikethrough")
    md.enable("smartquotes")
    md.core.ruler.before("smartquotes", "smart_dashes", _smart_dashes)
    md.use(footnote_plugin)
    md.use(tasklists_plugin)
    md.core.ruler.after("github-tasklists", "task_checkbox_markup", _task_checkbox_markup)
    return md


def _smart_dashes(state: StateCore) -> None:
    """Turn ``--``, ``---`` and ``...`` in prose into en dashes, em dashes and ellipses.

    Unlike markdown-it's ``replacements`` rule, ``(c)``, ``+-`` and repeated
    ``!``/``?`` are left as typed.
    """
    for token in state.tokens:
        if token.type != "inline" or not token.children:
            continue
        autolink_depth = 0
        for child in token.children:
            if child.type == "link_open" and child.markup == "autolink":
                autolink_depth += 1
            elif child.type == "link_close" and child.markup == "autolink":
                autolink_depth -= 1
            elif child.type == "text" and not autolink_depth:
                for plain, typographic in PUNCTUATION_REPLACEMENTS:
                    child.content = child.content.replace(plain, typographic)


def _task_checkbox_markup(state: StateCore) -> None:
    """Emit task-list checkboxes as bare ``<input disabled ...>`` tags.

    The sanitizer only re-admits inputs whose markup starts with ``<input disabled``.
    Only the checkbox the tasklists plugin put at the start of a task item is touched.
    """
    tokens = state.tokens
    for index in range(2, len(tokens)):
        token = tokens[index]
        if token.type != "inline" or not token.children:
            continue
        item = tokens[index - 2]
        if item.type != "list_item_open" or item.attrGet("class") != TASK_ITEM_CLASS:
            continue
        checkbox = token.children[0]
        if checkbox.type == "html_inline" and checkbox.content.startswith(TASK_CHECKBOX_PREFIX):
            checkbox.content = CHECKED_BOX if 'checked="checked"' in checkbox.content else UNCHECKED_BOX


def render_markdown(text: str) -> str:
    """Render Markdown to raw (unsanitized) HTML using the shared renderer."""
    if not text.strip():
        return ""
    return cast(str, _renderer().render(text))


def extract_title(markdown_text: str) -> str | None:
    """Return the text of the first ``# `` heading line, scanning the raw source.

    Fenced code blocks are not recognized, so a ``# comment`` inside one counts.
    """
    for line in markdown_text.splitlines():
        trimmed = line.strip()
        if trimmed.startswith("# "):
            return trimmed[2:].strip()
    return None
