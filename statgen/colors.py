"""Color token validation for accent options."""

from __future__ import annotations

import string
from enum import Enum

HEX_LENGTHS = frozenset({3, 4, 6, 8})
HEX_DIGITS = frozenset(string.hexdigits)

NAMED_COLORS = frozenset(
    {
        "red",
        "orange",
        "yellow",
        "green",
        "blue",
        "purple",
        "pink",
        "brown",
        "black",
        "white",
        "gray",
        "grey",
        "cyan",
        "magenta",
        "lime",
        "navy",
        "teal",
        "maroon",
        "olive",
        "silver",
        "aqua",
        "fuchsia",
        "indigo",
        "violet",
        "gold",
        "coral",
        "salmon",
        "crimson",
        "tomato",
    }
)


class ColorErrorReason(Enum):
    """Why a color token was rejected."""

    BAD_LENGTH = "bad length"
    BAD_CHARACTER = "bad character"
    UNRECOGNIZED_NAME = "unrecognized name"


class InvalidColor(ValueError):
    """Raised when a color token is neither a hex code nor a known color name."""

    def __init__(self, token: str, reason: ColorErrorReason) -> None:
        super().__init__(_describe(token, reason))
        self.token = token
        self.reason = reason


def validate_color(token: str) -> None:
    """Check ``token`` is a hex color (``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``) or a named color.

    The token is never normalized; callers keep using the value they passed in.
    """
    if token.startswith("#"):
        digits = token[1:]
        if len(digits) not in HEX_LENGTHS:
            raise InvalidColor(token, ColorErrorReason.BAD_LENGTH)
        if not all(char in HEX_DIGITS for char in digits):
            raise InvalidColor(token, ColorErrorReason.BAD_CHARACTER)
        return

    if token.lower() not in NAMED_COLORS:
        raise InvalidColor(token, ColorErrorReason.UNRECOGNIZED_NAME)


def _describe(token: str, reason: ColorErrorReason) -> str:
    if reason is ColorErrorReason.BAD_LENGTH:
        return f"Invalid hex color length: {token}"
    if reason is ColorErrorReason.BAD_CHARACTER:
        return f"Invalid hex color: {token}"
    return f"Invalid color: {token}. Use hex codes (#ff0000) or named colors (red, blue, etc)"
