"""Validation and decoding of the numeric fields of a scene description.

A vector field is three comma-separated decimal numbers ("x,y,z") and a
colour field is three comma-separated integers in [0, 255] ("r,g,b").
The last field of a line may still carry its newline.
"""

from __future__ import annotations

import re

from minirt.color import rgb_to_hex
from minirt.vec3 import Vec3

INT_MAX = 2147483647
INT_MIN = -2147483648

_DIGITS = "0123456789"
_VEC_CHARS = _DIGITS + "-."
_NUMBER_END = ("", ",", "\n")
_DECIMAL_LIMIT = 0.0000000000000001

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]*)")
_FLOAT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)(?:\.([0-9]*))?")


def _char_at(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else ""


def _skip(text: str, pos: int, allowed: str, limit: int | None = None) -> int:
    """Advance past characters from ``allowed``, stopping at index ``limit``."""
    stop = len(text) if limit is None else min(limit, len(text))
    while pos < stop and text[pos] in allowed:
        pos += 1
    return pos


def _atol(text: str) -> int:
    """Read a leading integer leniently; return 0 when there is none."""
    match = _INT_PREFIX.match(text)
    number = match.group(1) if match else ""
    if number in ("", "+", "-"):
        return 0
    return int(number)


def _atof(text: str) -> float:
    """Read a leading decimal number leniently; return 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    sign, whole, fraction = match.groups()
    if not whole and not fraction:
        return 0.0
    value = float(f"{whole or '0'}.{fraction or '0'}")
    return -value if sign == "-" else value


def parse_float(text: str) -> float:
    """Strictly read the decimal number at the start of ``text``.

    The number must be followed by the end of the text, a comma or a
    newline.  Raises ValueError when it is malformed, has no digit before
    the point, or has too many decimal places.
    """
    pos = 0
    sign = 1.0
    if _char_at(text, 0) in ("+", "-"):
        if text[0] == "-":
            sign = -1.0
        pos = 1
    if _char_at(text, pos) not in _DIGITS or pos >= len(text):
        raise ValueError(f"not a number: {text!r}")
    result = 0.0
    while pos < len(text) and text[pos] in _DIGITS and result <= INT_MAX:
        result = result * 10 + int(text[pos])
        pos += 1
    if _char_at(text, pos) == ".":
        pos += 1
        fraction = 0.0
        weight = 0.1
        while pos < len(text) and text[pos] in _DIGITS:
            fraction += int(text[pos]) * weight
            weight /= 10
            pos += 1
            if weight < _DECIMAL_LIMIT:
                raise ValueError(f"too many decimal places: {text!r}")
        result += fraction
    if _char_at(text, pos) not in _NUMBER_END:
        raise ValueError(f"not a number: {text!r}")
    return result * sign


def is_color(text: str) -> bool:
    """Return whether ``text`` is a valid "r,g,b" colour field."""
    pos = 0
    for limit, terminators in ((3, (",",)), (7, (",",)), (11, ("\n", ""))):
        value = _atol(text[pos:])
        pos = _skip(text, pos, _DIGITS, limit)
        if _char_at(text, pos) not in terminators or not 0 <= value <= 255:
            return False
        pos += 1
    return True


def get_color(text: str) -> int:
    """Decode an "r,g,b" field into a 0xRRGGBB integer; no validation is done."""
    channels = []
    pos = 0
    for _ in range(3):
        channels.append(_atol(text[pos:]) & 0xFF)
        pos = _skip(text, pos, _DIGITS) + 1
    return rgb_to_hex(*channels)


def is_vec(text: str) -> bool:
    """Return whether ``text`` is a valid "x,y,z" vector field."""
    pos = 0
    for terminators in ((",",), (",",), ("\n", "")):
        try:
            value = parse_float(text[pos:])
        except ValueError:
            return False
        pos = _skip(text, pos, _VEC_CHARS)
        if _char_at(text, pos) not in terminators or not INT_MIN <= value <= INT_MAX:
            return False
        pos += 1
    return True


def get_vec(text: str) -> Vec3:
    """Decode an "x,y,z" field into a vector; no validation is done."""
    coords = []
    pos = 0
    for _ in range(3):
        coords.append(_atof(text[pos:]))
        if _char_at(text, pos) == "-":
            pos += 1
        pos = _skip(text, pos, _VEC_CHARS) + 1
    return Vec3(*coords)