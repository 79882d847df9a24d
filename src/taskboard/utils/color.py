"""Hex color parsing."""

import re

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]")


def parse_hex_color(value: str) -> tuple[int, int, int, int] | None:
    """
    Parse a hex color string into (red, green, blue, alpha).

    Accepts RRGGBB or AARRGGBB, with any non-alphanumeric decoration
    such as a leading '#'. Returns None for anything else.
    """
    digits = _NON_ALNUM.sub("", value)
    try:
        number = int(digits, 16)
    except ValueError:
        return None

    if len(digits) == 6:
        return (number >> 16 & 0xFF, number >> 8 & 0xFF, number & 0xFF, 255)
    if len(digits) == 8:
        return (number >> 16 & 0xFF, number >> 8 & 0xFF, number & 0xFF, number >> 24 & 0xFF)
    return None
