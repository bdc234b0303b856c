from __future__ import annotations

import pytest

from statgen.colors import ColorErrorReason, InvalidColor, validate_color


@pytest.mark.parametrize("token", ["#ff0000", "#ff00", "#fff", "#3498DBcc", "RED", "teal", "Crimson"])
def test_valid_colors_pass(token: str) -> None:
    validate_color(token)


@pytest.mark.parametrize(
    ("token", "reason"),
    [
        ("#fff000a", ColorErrorReason.BAD_LENGTH),
        ("#", ColorErrorReason.BAD_LENGTH),
        ("#ggg", ColorErrorReason.BAD_CHARACTER),
        ("#12345", ColorErrorReason.BAD_LENGTH),
        ("#12345z78", ColorErrorReason.BAD_CHARACTER),
        ("chartreuse", ColorErrorReason.UNRECOGNIZED_NAME),
        ("", ColorErrorReason.UNRECOGNIZED_NAME),
    ],
)
def test_invalid_colors_report_reason(token: str, reason: ColorErrorReason) -> None:
    with pytest.raises(InvalidColor) as excinfo:
        validate_color(token)

    assert excinfo.value.token == token
    assert excinfo.value.reason is reason


def test_error_messages_name_the_token() -> None:
    with pytest.raises(InvalidColor, match="Invalid hex color length: #fff000a"):
        validate_color("#fff000a")
    with pytest.raises(InvalidColor, match="Invalid hex color: #ggg"):
        validate_color("#ggg")
    with pytest.raises(InvalidColor, match=r"Invalid color: chartreuse\. Use hex codes"):
        validate_color("chartreuse")


def test_invalid_color_is_a_value_error() -> None:
    assert issubclass(InvalidColor, ValueError)
