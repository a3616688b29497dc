"""printf-style formatting with the conversions ``c s p d i u x X f %``.

Integers are read as C ``int``/``unsigned int`` (32 bits), or as
``long``/``unsigned long`` (64 bits) when the ``l`` modifier is given.
Floating-point digits are truncated, not rounded.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from minirt.format_spec import BASE_10, BASE_16L, BASE_16U, Flags, FormatSpec, parse_spec

_INT_BITS = 32
_LONG_BITS = 64

_INTEGER_BASES = {
    "d": BASE_10,
    "i": BASE_10,
    "u": BASE_10,
    "x": BASE_16L,
    "X": BASE_16U,
}


def _wrap_signed(value: Any, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((int(value) + half) % (1 << bits)) - half


def _wrap_unsigned(value: Any, bits: int) -> int:
    return int(value) & ((1 << bits) - 1)


def _digits(value: int, base: str) -> str:
    """Return ``value`` (non-negative) written in the digit alphabet ``base``."""
    if value == 0:
        return base[0]
    out = []
    base_len = len(base)
    while value:
        value, digit = divmod(value, base_len)
        out.append(base[digit])
    return "".join(reversed(out))


def _trailing(spec: FormatSpec, size: int) -> str:
    """Return the padding written after a left-justified conversion."""
    if spec.flags & Flags.LEFT_JUSTIFY:
        return " " * max(spec.width - size, 0)
    return ""


def _format_char(spec: FormatSpec, arg: Any) -> str:
    char = arg[:1] if isinstance(arg, str) else chr(int(arg) & 0xFF)
    pad = " " * max(spec.width - 1, 0)
    if spec.flags & Flags.LEFT_JUSTIFY:
        return char + pad
    return pad + char


def _format_str(spec: FormatSpec, text: Optional[str]) -> str:
    if text is not None and not isinstance(text, str):
        raise TypeError(f"%s expects a string or None, got {type(text).__name__}")
    fill = " " * max(spec._str_padding(text), 0)
    has_precision = bool(spec.flags & Flags.PRECISION)
    if text is None:
        body = "" if has_precision and spec.precision < 6 else "(null)"
    elif not has_precision:
        body = text
    else:
        body = text[: min(spec.precision, len(text))]
    if spec.flags & Flags.LEFT_JUSTIFY:
        return body + fill
    return fill + body


def _format_pointer(spec: FormatSpec, arg: Any) -> str:
    address = 0 if arg is None else _wrap_unsigned(arg, _LONG_BITS)
    spec.flags |= Flags.ALTERNATIVE_FORM
    size = spec._pointer_size(address)
    prefix = spec.numeric_prefix(size, None, False)
    body = "(nil)" if not address else _digits(address, BASE_16L)
    return prefix + body + _trailing(spec, size)


def _format_integer(spec: FormatSpec, arg: Any) -> str:
    base = _INTEGER_BASES[spec.conversion]
    bits = _LONG_BITS if spec.flags & Flags.LONG_NUMBER else _INT_BITS
    if spec.conversion in ("d", "i"):
        value = _wrap_signed(arg, bits)
        size = spec._signed_size(value, len(base))
        negative = value < 0
    else:
        value = _wrap_unsigned(arg, bits)
        size = spec._unsigned_size(value, len(base))
        if value == 0:
            spec.flags &= ~Flags.ALTERNATIVE_FORM
        negative = False
    magnitude = abs(value)
    prefix = spec.numeric_prefix(size, base, negative)
    if spec.flags & Flags.PRECISION and spec.precision <= 0 and magnitude == 0:
        body = ""
    else:
        body = _digits(magnitude, base)
    return prefix + body + _trailing(spec, size)


def _format_double(spec: FormatSpec, arg: Any) -> str:
    value = float(arg)
    if spec.flags & Flags.PRECISION:
        precision = spec.precision
        spec.flags &= ~Flags.PRECISION
    else:
        precision = 6
    dot = bool(spec.flags & Flags.ALTERNATIVE_FORM)
    spec.flags &= ~Flags.ALTERNATIVE_FORM
    size = spec._double_size(value, precision, dot)
    parts = [spec.numeric_prefix(size, BASE_10, value < 0)]
    value = abs(value)
    parts.append(str(int(value)))
    if precision > 0 or dot:
        parts.append(".")
    for _ in range(precision):
        value -= int(value)
        value *= 10
        parts.append(str(int(value)))
    parts.append(_trailing(spec, size))
    return "".join(parts)


def _next_arg(pending: Iterator[Any]) -> Any:
    try:
        return next(pending)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: FormatSpec, pending: Iterator[Any]) -> str:
    conversion = spec.conversion
    if conversion == "%":
        return "%"
    arg = _next_arg(pending)
    if conversion == "c":
        return _format_char(spec, arg)
    if conversion == "s":
        return _format_str(spec, arg)
    if conversion == "p":
        return _format_pointer(spec, arg)
    if conversion == "f":
        return _format_double(spec, arg)
    return _format_integer(spec, arg)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversion specifications replaced by ``args``.

    A ``%`` that does not start a valid specification is copied as is.
    Raises TypeError when there are fewer arguments than conversions.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    pending = iter(args)
    out = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent == -1:
            out.append(fmt[pos:])
            break
        out.append(fmt[pos:percent])
        parsed = parse_spec(fmt, percent + 1)
        if parsed is None:
            out.append("%")
            pos = percent + 1
            continue
        spec, pos = parsed
        out.append(_convert(spec, pending))
    return "".join(out)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Format and write to ``stream``; return the number of characters written."""
    text = format_string(fmt, *args)
    stream.write(text)
    stream.flush()
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Format and write to standard output; return the number of characters written."""
    return fprintf(sys.stdout, fmt, *args)