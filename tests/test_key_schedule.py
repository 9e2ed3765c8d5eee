"""Tests for the ARIA key schedule and variant configuration."""

import secrets
from dataclasses import FrozenInstanceError

import pytest

from aria_engine.errors import InvalidKeyLength
from aria_engine.interfaces import VARIANTS, VariantConfig, get_variant, list_variants
from aria_engine.key_schedule import (
    EK_SCHEDULE,
    decryption_round_keys,
    encryption_round_keys,
    feistel_words,
    schedule_key,
)
from aria_engine.layers import diffusion_layer, even_round, odd_round
from aria_engine.tables import C1, C2, C3
from aria_engine.utils import rotl, rotr, xor_bytes


class TestVariants:
    """Tests for VariantConfig and the variant registry."""

    @pytest.mark.parametrize("key_bytes,rounds,name", [
        (16, 12, "ARIA-128"),
        (24, 14, "ARIA-192"),
        (32, 16, "ARIA-256"),
    ])
    def test_registry(self, key_bytes: int, rounds: int, name: str) -> None:
        variant = get_variant(key_bytes)
        assert variant.rounds == rounds
        assert variant.name == name
        assert variant.num_round_keys == rounds + 1
        assert variant.key_bits == key_bytes * 8

    def test_constant_order(self) -> None:
        assert VARIANTS[16].constants == (C1, C2, C3)
        assert VARIANTS[24].constants == (C2, C3, C1)
        assert VARIANTS[32].constants == (C3, C1, C2)

    @pytest.mark.parametrize("length", [0, 8, 15, 17, 20, 31, 33, 64])
    def test_get_variant_invalid(self, length: int) -> None:
        with pytest.raises(InvalidKeyLength, match=f"got {length}"):
            get_variant(length)

    def test_config_validation(self) -> None:
        with pytest.raises(ValueError, match="rounds must be 12"):
            VariantConfig(key_bytes=16, rounds=10, constants=(C1, C2, C3))
        with pytest.raises(InvalidKeyLength):
            VariantConfig(key_bytes=20, rounds=13, constants=(C1, C2, C3))
        with pytest.raises(ValueError, match="constants"):
            VariantConfig(key_bytes=16, rounds=12, constants=(C1, C2))

    def test_config_is_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            VARIANTS[16].rounds = 10  # type: ignore[misc]

    def test_list_variants(self) -> None:
        names = [v["name"] for v in list_variants()]
        assert names == ["ARIA-128", "ARIA-192", "ARIA-256"]


class TestFeistelWords:
    """Tests for W0..W3 derivation."""

    def test_w0_is_left_key_half(self) -> None:
        key = bytes(range(32))
        w0, _, _, _ = feistel_words(key, VARIANTS[32])
        assert w0 == key[:16]

    def test_128_bit_key_uses_zero_kr(self) -> None:
        key = bytes(range(16))
        w0, w1, w2, w3 = feistel_words(key, VARIANTS[16])
        assert w1 == odd_round(w0, C1)
        assert w2 == xor_bytes(even_round(w1, C2), w0)
        assert w3 == xor_bytes(odd_round(w2, C3), w1)

    def test_192_bit_key_pads_kr(self) -> None:
        key = bytes(range(24))
        kr = key[16:] + bytes(8)
        w0, w1, _, _ = feistel_words(key, VARIANTS[24])
        assert w1 == xor_bytes(odd_round(w0, C2), kr)

    def test_256_bit_key_uses_every_kr_byte(self) -> None:
        """The last key byte feeds W1."""
        key = bytes(range(32))
        other = key[:31] + b"\xff"
        _, w1, _, _ = feistel_words(key, VARIANTS[32])
        _, w1_other, _, _ = feistel_words(other, VARIANTS[32])
        assert w1 != w1_other
        assert xor_bytes(w1, w1_other) == bytes(15) + bytes([0x1f ^ 0xff])


class TestRoundKeys:
    """Tests for encryption and decryption round keys."""

    def test_seventeen_candidate_keys(self) -> None:
        assert len(EK_SCHEDULE) == 17
        words = feistel_words(bytes(16), VARIANTS[16])
        assert len(encryption_round_keys(words)) == 17

    def test_encryption_key_formulas(self) -> None:
        w0, w1, w2, w3 = feistel_words(bytes(range(16)), VARIANTS[16])
        ek = encryption_round_keys((w0, w1, w2, w3))
        assert ek[0] == xor_bytes(w0, rotr(w1, 19))
        assert ek[3] == xor_bytes(rotr(w0, 19), w3)
        assert ek[4] == xor_bytes(w0, rotr(w1, 31))
        assert ek[8] == xor_bytes(w0, rotl(w1, 61))
        assert ek[11] == xor_bytes(rotl(w0, 61), w3)
        assert ek[12] == xor_bytes(w0, rotl(w1, 31))
        assert ek[15] == xor_bytes(rotl(w0, 31), w3)
        assert ek[16] == xor_bytes(w0, rotl(w1, 19))

    @pytest.mark.parametrize("key_bytes,count", [(16, 13), (24, 15), (32, 17)])
    def test_round_key_cardinality(self, key_bytes: int, count: int) -> None:
        schedule = schedule_key(secrets.token_bytes(key_bytes))
        assert schedule.rounds == count - 1
        assert len(schedule.encryption_keys) == count
        assert len(schedule.decryption_keys) == count
        assert all(len(k) == 16 for k in schedule.encryption_keys)

    @pytest.mark.parametrize("key_bytes", [16, 24, 32])
    def test_decryption_key_relation(self, key_bytes: int) -> None:
        schedule = schedule_key(secrets.token_bytes(key_bytes))
        ek, dk, n = schedule.encryption_keys, schedule.decryption_keys, schedule.rounds
        assert dk[0] == ek[n]
        assert dk[n] == ek[0]
        for i in range(1, n):
            assert dk[i] == diffusion_layer(ek[n - i])

    def test_decryption_round_keys_direct(self) -> None:
        ek = [bytes([i]) * 16 for i in range(13)]
        dk = decryption_round_keys(ek, 12)
        assert len(dk) == 13
        assert dk[0] == ek[12]
        assert dk[12] == ek[0]

    def test_schedule_is_deterministic(self) -> None:
        key = bytes(range(32))
        assert schedule_key(key) == schedule_key(key)

    @pytest.mark.parametrize("length", [0, 15, 20, 33])
    def test_invalid_key_length(self, length: int) -> None:
        with pytest.raises(InvalidKeyLength):
            schedule_key(bytes(length))
