"""Bootstring encoding and decoding with the Punycode parameters (RFC 3492).

The encoder and decoder share the threshold, bias adaptation and digit
mapping helpers below. Every accumulator is checked against ``MAX_INT`` so
that hostile input fails with ``CodecOverflowError`` instead of producing
values a 32-bit implementation would disagree with.

Usage:
    from punycode_mcp.codec.bootstring import bootstring_decode, bootstring_encode
    bootstring_encode([0x62, 0xFC, 0x63, 0x68, 0x65, 0x72])  # 'bcher-kva'
"""

from __future__ import annotations

from typing import Sequence

from ..exceptions import CodecOverflowError, InvalidInputError

# ----- Punycode parameters (RFC 3492, section 5) -----
BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 0x80
DELIMITER = "-"

MAX_INT = 0x7FFFFFFF
MAX_CODEPOINT = 0x10FFFF

BASE_MINUS_TMIN = BASE - TMIN


def threshold(k: int, bias: int) -> int:
    """Return the digit threshold for position ``k``, clamped to [TMIN, TMAX]."""
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def adapt(delta: int, num_points: int, first_time: bool) -> int:
    """Bias adaptation function from RFC 3492, section 6.1."""
    delta = delta // DAMP if first_time else delta >> 1
    delta += delta // num_points
    k = 0
    while delta > (BASE_MINUS_TMIN * TMAX) >> 1:
        delta //= BASE_MINUS_TMIN
        k += BASE
    return k + (BASE_MINUS_TMIN + 1) * delta // (delta + SKEW)


def digit_to_basic(digit: int) -> str:
    """Map a digit value 0..35 to its symbol: 0-25 to 'a'-'z', 26-35 to '0'-'9'."""
    if 0 <= digit < 26:
        return chr(digit + 0x61)
    if 26 <= digit < BASE:
        return chr(digit - 26 + 0x30)
    raise InvalidInputError(f"invalid input, digit {digit} out of range")


def basic_to_digit(code: int) -> int:
    """Return the digit value of a symbol, or BASE when it is not a digit.

    Upper and lower case letters decode to the same value.
    """
    if 0x30 <= code <= 0x39:
        return code - 22
    if 0x41 <= code <= 0x5A:
        return code - 0x41
    if 0x61 <= code <= 0x7A:
        return code - 0x61
    return BASE


def bootstring_encode(codepoints: Sequence[int]) -> str:
    """Encode a codepoint sequence into a Punycode string.

    Basic codepoints (< 0x80) are copied to the output in order and
    followed by the delimiter when there is at least one of them. The
    remaining codepoints are encoded as generalized variable-length
    integers after the delimiter.

    Args:
        codepoints (Sequence[int]): The codepoints of one label.

    Returns:
        str: The Punycode string, without any ACE prefix.

    Raises:
        CodecOverflowError: If a delta does not fit in ``MAX_INT``.
    """
    output = [chr(value) for value in codepoints if value < INITIAL_N]
    input_length = len(codepoints)
    basic_length = len(output)
    handled = basic_length

    if basic_length:
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS

    while handled < input_length:
        # Smallest codepoint not yet handled.
        m = min(value for value in codepoints if value >= n)

        handled_plus_one = handled + 1
        if m - n > (MAX_INT - delta) // handled_plus_one:
            raise CodecOverflowError()
        delta += (m - n) * handled_plus_one
        n = m

        for value in codepoints:
            if value < n:
                delta += 1
                if delta > MAX_INT:
                    raise CodecOverflowError()
            if value == n:
                q = delta
                k = BASE
                while True:
                    t = threshold(k, bias)
                    if q < t:
                        break
                    q_minus_t = q - t
                    base_minus_t = BASE - t
                    output.append(digit_to_basic(t + q_minus_t % base_minus_t))
                    q = q_minus_t // base_minus_t
                    k += BASE
                output.append(digit_to_basic(q))
                bias = adapt(delta, handled_plus_one, handled == basic_length)
                delta = 0
                handled += 1
                handled_plus_one = handled + 1

        delta += 1
        n += 1

    return "".join(output)


def bootstring_decode(text: str) -> list[int]:
    """Decode a Punycode string into a codepoint sequence.

    Everything before the last delimiter is taken literally as basic
    codepoints. A delimiter at position 0 does not start a basic section.

    Args:
        text (str): Punycode string, without any ACE prefix.

    Returns:
        list[int]: The decoded codepoints.

    Raises:
        InvalidInputError: If a basic codepoint is >= 0x80, a digit symbol is
            not in the alphabet, a digit group is truncated, or the result is
            not a valid codepoint.
        CodecOverflowError: If an accumulated value does not fit in ``MAX_INT``.
    """
    input_length = len(text)
    basic = text.rfind(DELIMITER)
    if basic < 0:
        basic = 0

    output: list[int] = []
    for char in text[:basic]:
        code = ord(char)
        if code >= 0x80:
            raise InvalidInputError("invalid input, illegal input >= 0x80 (not a basic code point)")
        output.append(code)

    n = INITIAL_N
    i = 0
    bias = INITIAL_BIAS
    index = basic + 1 if basic > 0 else 0

    while index < input_length:
        old_i = i
        w = 1
        k = BASE
        while True:
            if index >= input_length:
                raise InvalidInputError("invalid input, incomplete digit sequence")
            digit = basic_to_digit(ord(text[index]))
            index += 1
            if digit >= BASE:
                raise InvalidInputError()
            if digit > (MAX_INT - i) // w:
                raise CodecOverflowError()
            i += digit * w
            t = threshold(k, bias)
            if digit < t:
                break
            base_minus_t = BASE - t
            if w > MAX_INT // base_minus_t:
                raise CodecOverflowError()
            w *= base_minus_t
            k += BASE

        out = len(output) + 1
        bias = adapt(i - old_i, out, old_i == 0)

        if i // out > MAX_INT - n:
            raise CodecOverflowError()
        n += i // out
        i %= out
        if n > MAX_CODEPOINT:
            raise InvalidInputError(f"invalid input, codepoint {n:#x} out of range")

        output.insert(i, n)
        i += 1

    return output
