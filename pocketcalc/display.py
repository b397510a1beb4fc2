"""Rendering floats onto the calculator display.

The display is a plain string: either a float literal or the "Error"
sentinel. Integral values drop their trailing ".0"; NaN and infinities
never reach the screen.
"""

from __future__ import annotations

import math
from typing import Optional

from pocketcalc.config import Settings
from pocketcalc.models import ERROR_DISPLAY


def format_number(value: float) -> str:
    """Render a float, showing integral values without the trailing '.0'.

    4.0 → '4', 2.5 → '2.5', -0.0 → '-0'
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def render_result(value: float) -> str:
    """Render a computed result, mapping NaN and ±inf to the Error sentinel."""
    if math.isnan(value) or math.isinf(value):
        return ERROR_DISPLAY
    return format_number(value)


def truncate(text: str, settings: Settings) -> str:
    """Hard-truncate an overlong decimal display. No rounding.

    Scientific-notation results are cut the same way and lose their exponent:
    '8.100000664200055e-08' becomes '8.10000066'.
    """
    if "." in text and len(text) > settings.display_limit:
        return text[:settings.truncate_width]
    return text


def parse_display(text: str) -> Optional[float]:
    """Read the display back as a float. Returns None for the Error sentinel."""
    if text == ERROR_DISPLAY:
        return None
    try:
        return float(text)
    except ValueError:
        return None
