"""
Color Codes

Minecraft formatting helpers for '&'-style color markup.
"""

import re

SECTION_SIGN = "§"
COLOR_CODES = "0123456789abcdefklmnorx"

_STRIP_PATTERN = re.compile(f"{SECTION_SIGN}[{COLOR_CODES}]", re.IGNORECASE)


def translate_color_codes(text: str, alt_char: str = "&") -> str:
    """
    Replace alt_char color codes (e.g. "&b") with section-sign codes ("§b")

    Only recognised code characters are translated; a lone "&" is kept.
    """
    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == alt_char and chars[i + 1].lower() in COLOR_CODES:
            chars[i] = SECTION_SIGN
            chars[i + 1] = chars[i + 1].lower()
    return "".join(chars)


def strip_color(text: str) -> str:
    """Remove section-sign formatting codes"""
    return _STRIP_PATTERN.sub("", text)


# Chat colors
GRAY = SECTION_SIGN + "7"
GREEN = SECTION_SIGN + "a"
AQUA = SECTION_SIGN + "b"
RED = SECTION_SIGN + "c"
YELLOW = SECTION_SIGN + "e"
WHITE = SECTION_SIGN + "f"
