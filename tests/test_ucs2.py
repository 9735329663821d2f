"""Unit tests for the UTF-16 aware codepoint converter.

Tests cover:
- Joining of surrogate pairs into astral codepoints
- Pass-through of unpaired surrogates at any position
- Splitting of astral codepoints into surrogate pairs
- Rejection of values outside the Unicode range
"""

import pytest

from punycode_mcp.codec.ucs2 import from_codepoints, from_scalars, to_codepoints
from punycode_mcp.exceptions import InvalidInputError
from vectors import UCS2_VECTORS


@pytest.mark.unit
@pytest.mark.codec
class TestToCodepoints:
    """Test suite for text to codepoint conversion."""

    @pytest.mark.parametrize(
        "description, codepoints, text", UCS2_VECTORS, ids=[v[0] for v in UCS2_VECTORS]
    )
    def test_vectors(self, description, codepoints, text):
        """Test the UCS-2 vectors decode to the expected codepoints."""
        assert to_codepoints(text) == codepoints, description

    def test_lone_high_surrogate_at_end(self):
        """Test a trailing high surrogate is kept as is."""
        assert to_codepoints("a\uD800") == [0x61, 0xD800]

    def test_native_astral_characters_pass_through(self):
        """Test astral characters already in a Python string are single codepoints."""
        assert to_codepoints("\U0001F4A9") == [0x1F4A9]

    def test_empty_text(self):
        """Test empty input gives no codepoints."""
        assert to_codepoints("") == []


@pytest.mark.unit
@pytest.mark.codec
class TestFromCodepoints:
    """Test suite for codepoint to text conversion."""

    @pytest.mark.parametrize(
        "description, codepoints, text", UCS2_VECTORS, ids=[v[0] for v in UCS2_VECTORS]
    )
    def test_vectors(self, description, codepoints, text):
        """Test the UCS-2 vectors encode to the expected text."""
        assert from_codepoints(codepoints) == text, description

    def test_does_not_mutate_argument(self):
        """Test the input list is left untouched."""
        codepoints = [0x61, 0x62, 0x63]
        result = from_codepoints(codepoints)

        assert result == "abc"
        assert codepoints == [0x61, 0x62, 0x63]

    def test_astral_codepoint_becomes_surrogate_pair(self):
        """Test an astral codepoint is written as two surrogate units."""
        assert from_codepoints([0x1F4A9]) == "\uD83D\uDCA9"

    def test_out_of_range_codepoint(self):
        """Test values above U+10FFFF are rejected."""
        with pytest.raises(InvalidInputError):
            from_codepoints([0x110000])


@pytest.mark.unit
@pytest.mark.codec
class TestFromScalars:
    """Test suite for codepoint to native string conversion."""

    def test_astral_codepoint_is_one_character(self):
        """Test astral codepoints stay single characters."""
        result = from_scalars([0x1F4A9, 0x2E, 0x6C, 0x61])

        assert result == "\U0001F4A9.la"
        assert len(result) == 4

    def test_negative_codepoint(self):
        """Test negative values are rejected."""
        with pytest.raises(InvalidInputError):
            from_scalars([-1])
