"""Tests for byte utilities: XOR, rotation and formatting."""

import secrets

import pytest

from aria_engine.utils import (
    bytes_to_hex,
    format_block_grid,
    format_block_words,
    hex_to_bytes,
    rotl,
    rotr,
    split_blocks,
    xor_bytes,
)


class TestXorBytes:
    """Tests for xor_bytes."""

    def test_equal_length(self) -> None:
        assert xor_bytes(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"

    def test_shorter_y_copies_tail_of_x(self) -> None:
        """Bytes of x past the end of y are copied unchanged."""
        assert xor_bytes(b"\x0f\xf0\xaa", b"\xff") == b"\xf0\xf0\xaa"

    def test_longer_y_is_truncated(self) -> None:
        assert xor_bytes(b"\x01", b"\x01\x02\x03") == b"\x00"

    def test_empty_y(self) -> None:
        x = bytes(range(16))
        assert xor_bytes(x, b"") == x

    def test_self_xor_is_zero(self) -> None:
        x = secrets.token_bytes(16)
        assert xor_bytes(x, x) == bytes(16)


class TestRotation:
    """Tests for rotl / rotr on byte strings."""

    def test_rotl_moves_msb_to_lsb(self) -> None:
        data = b"\x80" + bytes(15)
        assert rotl(data, 1) == bytes(15) + b"\x01"

    def test_rotl_whole_bytes(self) -> None:
        assert rotl(b"\x01\x02", 8) == b"\x02\x01"

    def test_rotl_crosses_byte_boundary(self) -> None:
        assert rotl(b"\x01\x02", 12) == b"\x20\x10"

    def test_rotr_by_four(self) -> None:
        assert rotr(b"\x01\x02", 4) == b"\x20\x10"

    def test_rotl_zero_is_identity(self) -> None:
        x = secrets.token_bytes(16)
        result = rotl(x, 0)
        assert result == x
        assert isinstance(result, bytes)

    @pytest.mark.parametrize("length", [1, 2, 16, 32])
    def test_rotl_full_width_is_identity(self, length: int) -> None:
        x = secrets.token_bytes(length)
        assert rotl(x, length * 8) == x

    @pytest.mark.parametrize("n", [1, 7, 8, 19, 31, 61, 97, 127, 128, 200])
    def test_rotr_inverts_rotl(self, n: int) -> None:
        x = secrets.token_bytes(16)
        assert rotr(rotl(x, n), n) == x

    def test_rotl_preserves_length_with_leading_zeros(self) -> None:
        x = bytes(16)
        assert rotl(x, 19) == x
        y = bytes(15) + b"\x01"
        assert len(rotl(y, 3)) == 16
        assert rotl(y, 3) == bytes(15) + b"\x08"

    def test_rotl_reduces_modulo_width(self) -> None:
        x = secrets.token_bytes(16)
        assert rotl(x, 128 + 19) == rotl(x, 19)


class TestHexAndFormatting:
    """Tests for hex helpers and block formatting."""

    def test_hex_round_trip(self) -> None:
        assert bytes_to_hex(hex_to_bytes("00112233")) == "00112233"

    def test_split_blocks(self) -> None:
        data = bytes(range(48))
        blocks = split_blocks(data)
        assert len(blocks) == 3
        assert blocks[1] == bytes(range(16, 32))

    def test_format_block_grid(self) -> None:
        grid = format_block_grid(hex_to_bytes("00112233445566778899aabbccddeeff"))
        assert grid.splitlines() == [
            "  00 11 22 33",
            "  44 55 66 77",
            "  88 99 aa bb",
            "  cc dd ee ff",
        ]

    def test_format_block_grid_rejects_wrong_size(self) -> None:
        with pytest.raises(ValueError, match="Expected 16 bytes"):
            format_block_grid(bytes(15))

    def test_format_block_words(self) -> None:
        words = format_block_words(hex_to_bytes("00112233445566778899aabbccddeeff"))
        assert words == "00112233 44556677 8899aabb ccddeeff"
