"""Number parsing and formatting for SVG attributes and DXF values.

Both directions follow the browser conventions the barcode-art files were
produced with: attributes are read like ``parseFloat`` (longest numeric prefix,
NaN otherwise) and DXF values are written like ``Number.prototype.toString``
(shortest round-trip digits, ``2`` rather than ``2.0``).
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

_NUMBER_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Decimal exponent window outside which toString switches to exponent notation
_MIN_PLAIN_EXPONENT = -6
_MAX_PLAIN_EXPONENT = 21


def parse_number(text: str) -> float:
    """Parse the longest numeric prefix of ``text``. ``"10px"`` → 10.0, ``"abc"`` → NaN."""
    match = _NUMBER_PREFIX_RE.match(text.lstrip())
    if match is None:
        return math.nan
    return float(match.group(0))


def format_number(value: float, precision: int | None = None) -> str:
    """Format a float for a DXF value line.

    With ``precision`` set, finite values use fixed-point notation with that
    many decimals. Otherwise the shortest digits that round-trip are used.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # Drops the sign of -0.0
        value = 0.0
    if precision is not None:
        return f"{value:.{precision}f}"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, exponent = _shortest_digits(abs(value))
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits

    if k <= n <= _MAX_PLAIN_EXPONENT:
        return sign + digits + "0" * (n - k)
    if 0 < n <= _MAX_PLAIN_EXPONENT:
        return sign + digits[:n] + "." + digits[n:]
    if _MIN_PLAIN_EXPONENT < n <= 0:
        return sign + "0." + "0" * (-n) + digits

    e = n - 1
    suffix = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return sign + digits + suffix
    return sign + digits[0] + "." + digits[1:] + suffix


def _shortest_digits(value: float) -> tuple[str, int]:
    """Significant digits and exponent of the shortest repr of a positive float."""
    _, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    return "".join(str(d) for d in digit_tuple), int(exponent)
