"""Unit tests for the Bootstring engine.

Tests cover:
- RFC 3492 section 7.1 sample strings in both directions
- Agreement with the standard library punycode codec
- Threshold and bias adaptation invariants
- Malformed input and overflow detection
"""

import pytest

from punycode_mcp.codec.bootstring import (
    BASE,
    MAX_INT,
    TMAX,
    TMIN,
    adapt,
    basic_to_digit,
    bootstring_decode,
    bootstring_encode,
    digit_to_basic,
    threshold,
)
from punycode_mcp.codec.ucs2 import to_codepoints
from punycode_mcp.exceptions import CodecOverflowError, InvalidInputError, PunycodeError
from vectors import STRING_VECTORS

IDS = [v[0] for v in STRING_VECTORS]


@pytest.mark.unit
@pytest.mark.codec
class TestBootstringEncode:
    """Test suite for Bootstring encoding."""

    @pytest.mark.parametrize("description, decoded, encoded", STRING_VECTORS, ids=IDS)
    def test_vectors(self, description, decoded, encoded):
        """Test every sample string encodes to its known answer."""
        assert bootstring_encode(to_codepoints(decoded)) == encoded

    @pytest.mark.parametrize("description, decoded, encoded", STRING_VECTORS, ids=IDS)
    def test_matches_stdlib_codec(self, description, decoded, encoded):
        """Test the encoder agrees with the standard library punycode codec."""
        assert bootstring_encode(to_codepoints(decoded)) == decoded.encode("punycode").decode(
            "ascii"
        )

    def test_empty_input(self):
        """Test empty input gives empty output."""
        assert bootstring_encode([]) == ""

    def test_basic_only_input_gets_delimiter(self):
        """Test all-basic input is copied and terminated with the delimiter."""
        assert bootstring_encode([0x61, 0x62, 0x63]) == "abc-"

    def test_repeated_codepoints(self):
        """Test a codepoint appearing several times round-trips."""
        codepoints = [0xFC, 0x61, 0xFC, 0xFC, 0x62]
        assert bootstring_decode(bootstring_encode(codepoints)) == codepoints

    def test_delta_overflow(self):
        """Test a delta beyond 32 bits raises an overflow error."""
        codepoints = [0x41] * 5000 + [0x10FFFF]
        with pytest.raises(CodecOverflowError):
            bootstring_encode(codepoints)


@pytest.mark.unit
@pytest.mark.codec
class TestBootstringDecode:
    """Test suite for Bootstring decoding."""

    @pytest.mark.parametrize("description, decoded, encoded", STRING_VECTORS, ids=IDS)
    def test_vectors(self, description, decoded, encoded):
        """Test every sample string decodes to its known answer."""
        assert bootstring_decode(encoded) == to_codepoints(decoded)

    def test_empty_input(self):
        """Test empty input gives no codepoints."""
        assert bootstring_decode("") == []

    def test_uppercase_digits(self):
        """Test uppercase digit symbols decode like lowercase ones."""
        assert bootstring_decode("ZZZ") == [0x7BA5]
        assert bootstring_decode("TDA") == bootstring_decode("tda")

    def test_non_basic_before_delimiter(self):
        """Test a code point >= 0x80 in the basic section is rejected."""
        with pytest.raises(InvalidInputError):
            bootstring_decode("\x81-")

    def test_non_digit_symbol(self):
        """Test a symbol outside the digit alphabet is rejected."""
        with pytest.raises(InvalidInputError):
            bootstring_decode("\x81")
        with pytest.raises(InvalidInputError):
            bootstring_decode("abc-d!e")

    def test_truncated_digit_sequence(self):
        """Test a digit group that never terminates is rejected."""
        with pytest.raises(InvalidInputError):
            bootstring_decode("abc-9")

    def test_leading_delimiter_is_not_a_split_point(self):
        """Test a delimiter at position 0 is read as a digit and rejected."""
        with pytest.raises(InvalidInputError):
            bootstring_decode("-abc")

    def test_weight_overflow(self):
        """Test a long run of high digits raises an overflow error."""
        with pytest.raises(CodecOverflowError):
            bootstring_decode("9" * 20)

    def test_overflow_is_builtin_overflow_error(self):
        """Test overflow errors can be caught as OverflowError and PunycodeError."""
        with pytest.raises(OverflowError):
            bootstring_decode("9" * 20)
        with pytest.raises(PunycodeError):
            bootstring_decode("9" * 20)

    def test_codepoint_beyond_unicode_range(self):
        """Test a decoded value above U+10FFFF is rejected."""
        with pytest.raises(InvalidInputError):
            bootstring_decode("9999z")


@pytest.mark.unit
@pytest.mark.codec
class TestBootstringHelpers:
    """Test suite for the shared numeric helpers."""

    @pytest.mark.parametrize("bias", [0, 1, 26, 72, 100, 500])
    def test_threshold_is_clamped(self, bias):
        """Test the threshold always lies within [TMIN, TMAX]."""
        for k in range(BASE, BASE * 20, BASE):
            assert TMIN <= threshold(k, bias) <= TMAX

    def test_adapt_first_time_uses_damp(self):
        """Test the first adaptation damps much harder than later ones."""
        assert adapt(700, 1, True) < adapt(700, 1, False)

    def test_adapt_is_non_negative(self):
        """Test adapted bias values are never negative."""
        for delta in (0, 1, 455, 10_000, MAX_INT):
            assert adapt(delta, 1, False) >= 0
            assert adapt(delta, 3, True) >= 0

    def test_digit_alphabet(self):
        """Test every digit maps to its symbol and back."""
        assert digit_to_basic(0) == "a"
        assert digit_to_basic(25) == "z"
        assert digit_to_basic(26) == "0"
        assert digit_to_basic(35) == "9"
        for digit in range(BASE):
            assert basic_to_digit(ord(digit_to_basic(digit))) == digit

    def test_non_digit_maps_to_base(self):
        """Test symbols outside the alphabet map to BASE."""
        assert basic_to_digit(ord("-")) == BASE
        assert basic_to_digit(0x81) == BASE

    def test_digit_out_of_range(self):
        """Test digit values outside 0..35 cannot be written."""
        with pytest.raises(InvalidInputError):
            digit_to_basic(36)
