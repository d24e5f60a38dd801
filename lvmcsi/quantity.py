"""Parsing of resource quantities such as ``10Gi``, ``500M`` or ``1e3``."""

from __future__ import annotations

import math
import re
from fractions import Fraction

_NUMBER = re.compile(r"([+-]?)(\d*)(?:\.(\d*))?(.*)", re.ASCII | re.DOTALL)
_EXPONENT = re.compile(r"[eE]([+-]?\d+)", re.ASCII)

_BINARY_SUFFIXES = {"Ki": 1, "Mi": 2, "Gi": 3, "Ti": 4, "Pi": 5, "Ei": 6}
_DECIMAL_SUFFIXES = {
    "n": -9,
    "u": -6,
    "m": -3,
    "": 0,
    "k": 3,
    "M": 6,
    "G": 9,
    "T": 12,
    "P": 15,
    "E": 18,
}

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
# Beyond this decimal exponent no non-zero value fits in 64 bits.
_EXPONENT_LIMIT = 1000


def _decimal_exponent(suffix: str) -> int | None:
    if suffix in _DECIMAL_SUFFIXES:
        return _DECIMAL_SUFFIXES[suffix]
    match = _EXPONENT.fullmatch(suffix)
    if match:
        return int(match.group(1))
    return None


def parse_quantity(text: str) -> int:
    """Parse a quantity string into an integer, rounding fractions up.

    Raises ValueError when the text is not a valid quantity or when its
    value does not fit in a signed 64-bit integer.
    """
    match = _NUMBER.fullmatch(text)
    if not text or match is None:
        raise ValueError(f"quantities must match the regular expression: {text!r}")
    sign, whole, frac, suffix = match.groups()
    frac = frac or ""
    if not whole and not frac:
        raise ValueError(f"quantities must match the regular expression: {text!r}")

    mantissa = Fraction(int(whole or "0") * 10 ** len(frac) + int(frac or "0"), 10 ** len(frac))
    if sign == "-":
        mantissa = -mantissa

    if suffix in _BINARY_SUFFIXES:
        value = mantissa * 1024 ** _BINARY_SUFFIXES[suffix]
    else:
        exponent = _decimal_exponent(suffix)
        if exponent is None:
            raise ValueError(f"unable to parse quantity's suffix: {text!r}")
        if mantissa == 0:
            return 0
        if exponent > _EXPONENT_LIMIT:
            raise ValueError(f"quantity {text!r} is out of range")
        if exponent < -_EXPONENT_LIMIT:
            return 1 if mantissa > 0 else 0
        value = mantissa * Fraction(10) ** exponent

    result = math.ceil(value)
    if not _INT64_MIN <= result <= _INT64_MAX:
        raise ValueError(f"quantity {text!r} is out of range")
    return result