"""Tests for materializer.codec.binary_text."""

import pytest

from materializer.codec.binary_text import decode, encode
from materializer.errors import FormatError


# ============================================================================
# encode() tests
# ============================================================================


class TestEncode:

    def test_empty_buffer_encodes_to_empty_string(self):
        assert encode(b"") == ""

    def test_single_byte_msb_first_with_trailing_newline(self):
        assert encode(b"A") == "01000001\n"

    def test_tokens_joined_by_single_space(self):
        assert encode(b"\x00\xff\x05") == "00000000 11111111 00000101\n"

    def test_accepts_bytearray(self):
        assert encode(bytearray(b"hi")) == "01101000 01101001\n"


# ============================================================================
# decode() tests
# ============================================================================


class TestDecode:

    def test_single_token(self):
        assert decode("01000001") == b"A"

    def test_mixed_whitespace_separators(self):
        text = "\t 01000001\r\n\n01000010 \x0b01000011\x0c  \n"
        assert decode(text) == b"ABC"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\r\n", "\x0b\x0c"])
    def test_blank_input_decodes_to_empty(self, text):
        assert decode(text) == b""

    def test_accepts_bytes_input(self):
        assert decode(b"01101111 01101011\n") == b"ok"

    def test_round_trip_every_byte_value(self):
        data = bytes(range(256))
        assert decode(encode(data)) == data

    def test_round_trip_empty(self):
        assert decode(encode(b"")) == b""

    def test_round_trip_with_embedded_nulls(self):
        data = b"\x00abc\x00\x00\xfe"
        assert decode(encode(data)) == data


class TestDecodeErrors:

    def test_short_token_rejected(self):
        with pytest.raises(FormatError) as exc:
            decode("1010")
        assert "not 8 bits" in str(exc.value)
        assert exc.value.token == "1010"

    def test_invalid_char_rejected(self):
        with pytest.raises(FormatError) as exc:
            decode("101020101")
        assert exc.value.char == "2"
        assert "invalid char" in str(exc.value)

    def test_long_token_rejected(self):
        with pytest.raises(FormatError) as exc:
            decode("1111111111")
        assert "invalid token length" in str(exc.value)

    def test_ninth_char_is_a_length_error_even_if_invalid(self):
        with pytest.raises(FormatError) as exc:
            decode("111111112")
        assert exc.value.char is None
        assert "invalid token length" in str(exc.value)

    def test_error_reports_token_index(self):
        with pytest.raises(FormatError) as exc:
            decode("01000001 01000010 0100001x")
        assert exc.value.token_index == 2

    def test_short_final_token_rejected(self):
        with pytest.raises(FormatError):
            decode("01000001 0100\n")

    def test_non_ascii_char_rejected(self):
        with pytest.raises(FormatError):
            decode("0100000é")

    def test_format_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            decode("2")
