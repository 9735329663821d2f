"""Conversion between text and Unicode codepoints with UTF-16 surrogate awareness."""

from typing import Iterable

from ..exceptions import InvalidInputError

MAX_CODEPOINT = 0x10FFFF


def to_codepoints(text: str) -> list[int]:
    """Return the codepoints of ``text``, joining UTF-16 surrogate pairs.

    A high surrogate immediately followed by a low surrogate becomes one
    astral codepoint. Unpaired surrogates are kept as their raw 16-bit value.

    Args:
        text (str): Text that may contain surrogate pairs.

    Returns:
        list[int]: The codepoints in input order.
    """
    output: list[int] = []
    counter = 0
    length = len(text)
    while counter < length:
        value = ord(text[counter])
        counter += 1
        if 0xD800 <= value <= 0xDBFF and counter < length:
            extra = ord(text[counter])
            if 0xDC00 <= extra <= 0xDFFF:
                output.append(((value & 0x3FF) << 10) + (extra & 0x3FF) + 0x10000)
                counter += 1
                continue
        output.append(value)
    return output


def from_codepoints(codepoints: Iterable[int]) -> str:
    """Build UTF-16 style text from codepoints.

    Codepoints above U+FFFF are written as a high/low surrogate pair, so the
    result may contain surrogate characters. The input is never modified.
    """
    units: list[str] = []
    for value in codepoints:
        if value < 0 or value > MAX_CODEPOINT:
            raise InvalidInputError(f"invalid input, codepoint {value:#x} out of range")
        if value > 0xFFFF:
            value -= 0x10000
            units.append(chr(0xD800 + (value >> 10)))
            units.append(chr(0xDC00 + (value & 0x3FF)))
        else:
            units.append(chr(value))
    return "".join(units)


def from_scalars(codepoints: Iterable[int]) -> str:
    """Build a native Python string with one character per codepoint."""
    chars: list[str] = []
    for value in codepoints:
        if value < 0 or value > MAX_CODEPOINT:
            raise InvalidInputError(f"invalid input, codepoint {value:#x} out of range")
        chars.append(chr(value))
    return "".join(chars)
