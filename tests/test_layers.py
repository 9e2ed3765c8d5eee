"""Tests for substitution, diffusion and round functions."""

import secrets

import pytest

from aria_engine.errors import InternalInvariantViolation
from aria_engine.layers import (
    DIFFUSION_MATRIX,
    diffusion_layer,
    even_round,
    final_round,
    odd_round,
    substitution_type1,
    substitution_type2,
)
from aria_engine.tables import SB1, SB2, SB3, SB4


class TestSubstitution:
    """Tests for SL1 and SL2."""

    def test_sl1_position_pattern(self) -> None:
        block = bytes([0x23] * 16)
        out = substitution_type1(block)
        for i in range(16):
            expected = (SB1, SB2, SB3, SB4)[i % 4][0x23]
            assert out[i] == expected

    def test_sl2_position_pattern(self) -> None:
        block = bytes([0xef] * 16)
        out = substitution_type2(block)
        for i in range(16):
            expected = (SB3, SB4, SB1, SB2)[i % 4][0xef]
            assert out[i] == expected

    def test_sl2_inverts_sl1(self) -> None:
        for _ in range(50):
            x = secrets.token_bytes(16)
            assert substitution_type2(substitution_type1(x)) == x
            assert substitution_type1(substitution_type2(x)) == x


class TestDiffusion:
    """Tests for the diffusion layer A."""

    def test_matrix_shape(self) -> None:
        assert len(DIFFUSION_MATRIX) == 16
        for row in DIFFUSION_MATRIX:
            assert len(row) == 7
            assert len(set(row)) == 7

    def test_matrix_is_symmetric(self) -> None:
        for i, row in enumerate(DIFFUSION_MATRIX):
            for j in row:
                assert i in DIFFUSION_MATRIX[j]

    def test_single_byte_spreads_to_seven_outputs(self) -> None:
        block = b"\x01" + bytes(15)
        out = diffusion_layer(block)
        ones = [i for i, b in enumerate(out) if b == 0x01]
        assert ones == [3, 4, 6, 8, 9, 13, 14]
        assert sum(1 for b in out if b) == 7

    def test_zero_block(self) -> None:
        assert diffusion_layer(bytes(16)) == bytes(16)

    def test_involution(self) -> None:
        for _ in range(100):
            x = secrets.token_bytes(16)
            assert diffusion_layer(diffusion_layer(x)) == x

    def test_linear(self) -> None:
        x = secrets.token_bytes(16)
        y = secrets.token_bytes(16)
        xy = bytes(a ^ b for a, b in zip(x, y))
        ax = diffusion_layer(x)
        ay = diffusion_layer(y)
        assert diffusion_layer(xy) == bytes(a ^ b for a, b in zip(ax, ay))

    @pytest.mark.parametrize("size", [0, 15, 17, 24, 32])
    def test_rejects_wrong_size(self, size: int) -> None:
        with pytest.raises(InternalInvariantViolation, match="16-byte block"):
            diffusion_layer(bytes(size))


class TestRoundFunctions:
    """Tests for FO, FE and the final round."""

    def test_odd_round_composition(self) -> None:
        d = secrets.token_bytes(16)
        rk = secrets.token_bytes(16)
        xored = bytes(a ^ b for a, b in zip(d, rk))
        assert odd_round(d, rk) == diffusion_layer(substitution_type1(xored))

    def test_even_round_composition(self) -> None:
        d = secrets.token_bytes(16)
        rk = secrets.token_bytes(16)
        xored = bytes(a ^ b for a, b in zip(d, rk))
        assert even_round(d, rk) == diffusion_layer(substitution_type2(xored))

    def test_diffusion_and_sl2_undo_odd_round(self) -> None:
        """SL2(A(FO(D, RK))) == D ^ RK."""
        d = secrets.token_bytes(16)
        rk = secrets.token_bytes(16)
        restored = substitution_type2(diffusion_layer(odd_round(d, rk)))
        assert restored == bytes(a ^ b for a, b in zip(d, rk))

    def test_final_round_has_no_diffusion(self) -> None:
        d = secrets.token_bytes(16)
        rk = secrets.token_bytes(16)
        last = secrets.token_bytes(16)
        xored = bytes(a ^ b for a, b in zip(d, rk))
        expected = bytes(a ^ b for a, b in zip(substitution_type2(xored), last))
        assert final_round(d, rk, last) == expected
