"""Brand palette and color helpers."""

import re

TESCO_BLUE = "#00539f"
TESCO_RED = "#d6001c"
CLUBCARD_YELLOW = "#ffdd00"
BLACK = "#000000"
WHITE = "#ffffff"
SLATE = "#333333"
LEGAL_GREY = "#666666"

_NAMED_COLORS = {"black": BLACK, "white": WHITE}
_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$")


def normalize_color(color: str | None) -> str | None:
    """Normalize a CSS color to lowercase #rrggbb.

    Handles the named colors the editor emits ("black", "white") and 3/6 digit
    hex. Anything else is returned lowercased and stripped, unchanged.
    """
    if color is None:
        return None
    value = color.strip().lower()
    if value in _NAMED_COLORS:
        return _NAMED_COLORS[value]
    match = _HEX_RE.match(value)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return f"#{digits}"
    return value
