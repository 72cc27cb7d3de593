"""Shared helpers: packed ARGB colours and bounded number/string conversions."""

from __future__ import annotations

from enum import IntEnum

_DIGITS = "0123456789"
_TERMINATOR = "\0"


class Color(IntEnum):
    """Packed colour codes laid out as 0xAARRGGBB."""

    RED = 0xFFFF0000
    GREEN = 0xFF00FF00
    BLUE = 0xFF0000FF
    BLACK = 0xFF000000
    WHITE = 0xFFFFFFFF
    GREY = 0xFF888888
    DARKGREY = 0xFF333333

    BACKGROUND = 0xFF303030
    LIGHTER = 0xFF505050
    DARKER = 0xFF181818
    ACCENT = 0xFFA78BFA


def string_length(text: str) -> int:
    """Return the length of ``text`` counting a trailing terminator byte."""
    return len(text) + 1


def _channels(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _scale(channel: int, factor: float) -> int:
    # Channels are single bytes, so scaled values wrap like an 8-bit store.
    return int(channel * factor) & 0xFF


def _pack(opacity: int, red: int, green: int, blue: int) -> int:
    return (opacity << 24) | (red << 16) | (green << 8) | blue


def set_brightness(color: int, brightness: float) -> int:
    """Scale the RGB channels of ``color`` by ``brightness``, keeping opacity."""
    opacity = (color >> 24) & 0xFF
    red, green, blue = (_scale(c, brightness) for c in _channels(color))
    return _pack(opacity, red, green, blue)


def merge_colors(color1: int, opacity1: float, color2: int, opacity2: float) -> int:
    """Blend two colours by weight; the result is always fully opaque."""
    first = [_scale(c, opacity1) for c in _channels(color1)]
    second = [_scale(c, opacity2) for c in _channels(color2)]
    red, green, blue = ((a + b) & 0xFF for a, b in zip(first, second))
    return _pack(0xFF, red, green, blue)


def int_to_string(value: int, max_length: int) -> str:
    """Render ``value`` in decimal, requiring room for it plus a terminator."""
    if max_length < 2:
        raise ValueError(f"max_length {max_length} leaves no room for a number")
    text = str(value)
    if len(text) + 1 > max_length:
        raise ValueError(f"{value} does not fit in {max_length} characters")
    return text


def number_to_string(value: float, max_length: int, max_decimal_digits: int = 2) -> str:
    """Render ``value`` with a fixed number of truncated decimal digits."""
    if max_length < 2:
        raise ValueError(f"max_length {max_length} leaves no room for a number")

    negative = value < 0
    magnitude = -value if negative else value
    int_part = int(magnitude)

    if negative:
        text = "-" + int_to_string(int_part, max_length - 1)
    else:
        text = int_to_string(int_part, max_length)

    if max_decimal_digits <= 0:
        return text

    if len(text) + 1 + max_decimal_digits >= max_length:
        raise ValueError(
            f"{value} with {max_decimal_digits} decimals does not fit in {max_length} characters"
        )

    digits = []
    fraction = magnitude - int_part
    for _ in range(max_decimal_digits):
        fraction *= 10
        digit = int(fraction)
        fraction -= digit
        digits.append(_DIGITS[digit])

    return f"{text}.{''.join(digits)}"


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else _TERMINATOR


def string_to_number(text: str, max_length: int) -> float:
    """Parse an optionally signed decimal number, reading at most ``max_length`` characters."""
    index = 0
    negative = _char_at(text, 0) == "-"
    if negative:
        index += 1

    result = 0.0

    def finish() -> float:
        return -result if negative else result

    while index < max_length:
        char = _char_at(text, index)
        if char == _TERMINATOR:
            return finish()
        if char == ".":
            break
        if char not in _DIGITS:
            raise ValueError(f"invalid character {char!r} in number {text!r}")
        result = result * 10 + _DIGITS.index(char)
        index += 1

    index += 1
    place = 0.1
    while index < max_length:
        char = _char_at(text, index)
        if char == _TERMINATOR:
            return finish()
        if char not in _DIGITS:
            raise ValueError(f"invalid character {char!r} in number {text!r}")
        result += place * _DIGITS.index(char)
        place /= 10
        index += 1

    return finish()


def string_to_int(text: str, max_length: int) -> int:
    """Parse an optionally signed decimal integer, reading at most ``max_length`` characters."""
    index = 0
    negative = _char_at(text, 0) == "-"
    if negative:
        index += 1

    result = 0
    while index < max_length:
        char = _char_at(text, index)
        if char == _TERMINATOR:
            break
        if char not in _DIGITS:
            raise ValueError(f"invalid character {char!r} in integer {text!r}")
        result = result * 10 + _DIGITS.index(char)
        index += 1

    return -result if negative else result


def string_hex_to_int(text: str, max_length: int) -> int:
    """Parse a hexadecimal integer with an optional ``0x``/``0X`` prefix."""
    index = 0
    if _char_at(text, 0) == "0" and _char_at(text, 1) in ("x", "X"):
        index = 2

    result = 0
    while index < max_length:
        char = _char_at(text, index)
        if char == _TERMINATOR:
            break
        if "0" <= char <= "9":
            digit = ord(char) - ord("0")
        elif "A" <= char <= "F":
            digit = ord(char) - ord("A") + 10
        elif "a" <= char <= "f":
            digit = ord(char) - ord("a") + 10
        else:
            raise ValueError(f"invalid hex character {char!r} in {text!r}")
        result = result * 16 + digit
        index += 1

    return result


def floor(x: float) -> int:
    """Return the largest integer not greater than ``x``."""
    truncated = int(x)
    if x < 0 and x != truncated:
        truncated -= 1
    return truncated


def round_half_up(x: float) -> int:
    """Round to the nearest integer, with halves going up."""
    return floor(x + 0.5)