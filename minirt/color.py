"""Packing and unpacking of 0xRRGGBB colour integers."""

from __future__ import annotations


def rgb_to_hex(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into a 0xRRGGBB integer."""
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def split_color(col: int) -> tuple[int, int, int]:
    """Return the (red, green, blue) channels of a colour, ignoring alpha."""
    col &= 0x00FFFFFF
    return col >> 16, (col >> 8) & 0xFF, col & 0xFF


def format_color(col: int) -> str:
    """Return a three-line, tab-separated description of a colour's channels."""
    red, green, blue = split_color(col)
    return f"red:\t{red}\ngreen:\t{green}\nblue:\t{blue}\n"