"""GitHub-style sanitizing of rendered Markdown HTML.

Raw HTML written inside Markdown is kept, except for constructs that execute
code or pull in external resources. The pass is a fixed, ordered list of plain
substring replacements over the whole document, not a parse of the markup:

1. opening and closing tags of the blocked elements are escaped;
2. ``javascript:``, ``vbscript:`` and ``data:`` lose their colon;
3. a handful of space-prefixed event handler attributes are broken apart;
4. every ``<input`` is escaped;
5. the disabled checkboxes emitted for task lists are let back in.

Rules 4 and 5 must stay in that order: the re-admitted prefixes extend the
escaped ``&lt;input``. Matching is textual, so occurrences inside attribute
values or code samples are rewritten as well, and handlers such as
``onerror`` or ``onfocus``, ``srcdoc`` and SVG payloads are not covered. A
structural allow-list sanitizer would catch more but would change the output.
"""

from __future__ import annotations

BLOCKED_TAGS: tuple[str, ...] = (
    "script",
    "iframe",
    "object",
    "embed",
    "form",
    "meta",
    "link",
    "style",
)
BLOCKED_SCHEMES: tuple[str, ...] = ("javascript", "vbscript", "data")
BLOCKED_HANDLERS: tuple[str, ...] = (
    "onclick",
    "onload",
    "onmouseover",
    "onmouseout",
    "onkeydown",
    "onkeyup",
    "onsubmit",
)
READMITTED_INPUTS: tuple[str, ...] = (
    "<input disabled",
    '<input type="checkbox" disabled',
)

Rule = tuple[str, str]


def _build_rules() -> tuple[Rule, ...]:
    rules: list[Rule] = []
    for tag in BLOCKED_TAGS:
        rules.append((f"<{tag}", f"&lt;{tag}"))
        rules.append((f"</{tag}", f"&lt;/{tag}"))
    for scheme in BLOCKED_SCHEMES:
        rules.append((f"{scheme}:", f"{scheme}&colon;"))
    for handler in BLOCKED_HANDLERS:
        rules.append((f" {handler}", f" on&{handler[2:]}"))
    rules.append(("<input", "&lt;input"))
    for prefix in READMITTED_INPUTS:
        rules.append((prefix.replace("<", "&lt;", 1), prefix))
    return tuple(rules)


SANITIZATION_RULES: tuple[Rule, ...] = _build_rules()


def sanitize(html: str) -> str:
    """Apply every rule in ``SANITIZATION_RULES`` once, in order."""
    for pattern, replacement in SANITIZATION_RULES:
        html = html.replace(pattern, replacement)
    return html
