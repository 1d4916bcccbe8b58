"""Number formatting and lenient parsing for the string type.

The formatters turn integers and floats into text the way the string
constructors and ``concat`` do. The parsers read a leading number from
text and ignore anything after it, giving zero when there is no number.
"""

from __future__ import annotations

import math
import re

__all__ = ["int_to_str", "float_to_str", "parse_long", "parse_double"]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# The characters C's isspace() accepts in the default locale.
_C_WHITESPACE = " \t\n\v\f\r"

_LONG_RE = re.compile(r"[+-]?[0-9]+")

_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)

_DEC_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def int_to_str(value: int, base: int = 10) -> str:
    """Render ``value`` in ``base`` (2 to 36) with lower-case digits.

    Negative values are written with a leading minus sign.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, not {base}")
    value = int(value)
    if base == 10:
        return str(value)
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, base)
        digits.append(_DIGITS[digit])
        if not magnitude:
            break
    return sign + "".join(reversed(digits))


def float_to_str(value: float, width: int = 4, precision: int = 2) -> str:
    """Render ``value`` with ``precision`` decimals, padded to ``width``.

    A positive width right-aligns the text; a negative width left-aligns it.
    """
    if precision < 0:
        raise ValueError(f"precision must not be negative, not {precision}")
    value = float(value)
    if math.isnan(value):
        body = "nan"
    elif math.isinf(value):
        body = "-inf" if value < 0 else "inf"
    else:
        body = f"{value:.{precision}f}"
    if width < 0:
        return body.ljust(-width)
    return body.rjust(width)


def parse_long(text: str | None) -> int:
    """Read a leading decimal integer from ``text``; zero if there is none."""
    if not text:
        return 0
    match = _LONG_RE.match(text.lstrip(_C_WHITESPACE))
    if match is None:
        return 0
    return int(match.group())


def parse_double(text: str | None) -> float:
    """Read a leading floating-point number from ``text``; zero if there is none.

    Accepts decimal and hexadecimal notation as well as ``inf`` and ``nan``.
    """
    if not text:
        return 0.0
    stripped = text.lstrip(_C_WHITESPACE)
    hex_match = _HEX_FLOAT_RE.match(stripped)
    if hex_match is not None:
        return float.fromhex(hex_match.group())
    match = _DEC_FLOAT_RE.match(stripped)
    if match is None:
        return 0.0
    return float(match.group())