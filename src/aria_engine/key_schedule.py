"""
ARIA key schedule (RFC 5794, Section 2.2).

Initialization runs a 3-round 256-bit Feistel network over KL || KR to
obtain W0..W3; the encryption round keys are then built from rotated
pairs of these words. Decryption keys are the encryption keys in reverse
order, with the diffusion layer applied to all but the first and last.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .interfaces import VariantConfig, get_variant
from .layers import diffusion_layer, even_round, odd_round
from .utils import BLOCK_SIZE, rotl, rotr, xor_bytes

logger = logging.getLogger(__name__)


# (plain word, rotated word, rotation) for ek1..ek17: ek = W[a] ^ (W[b] rot n).
# n > 0 rotates left, n < 0 rotates right.
EK_SCHEDULE = (
    (0, 1, -19), (1, 2, -19), (2, 3, -19), (3, 0, -19),
    (0, 1, -31), (1, 2, -31), (2, 3, -31), (3, 0, -31),
    (0, 1, 61), (1, 2, 61), (2, 3, 61), (3, 0, 61),
    (0, 1, 31), (1, 2, 31), (2, 3, 31), (3, 0, 31),
    (0, 1, 19),
)


@dataclass(frozen=True)
class KeySchedule:
    """Round keys derived from one master key."""

    variant: VariantConfig
    encryption_keys: tuple[bytes, ...]
    decryption_keys: tuple[bytes, ...]

    @property
    def rounds(self) -> int:
        return self.variant.rounds


def _rotate(word: bytes, amount: int) -> bytes:
    return rotl(word, amount) if amount > 0 else rotr(word, -amount)


def feistel_words(key: bytes, variant: VariantConfig) -> tuple[bytes, bytes, bytes, bytes]:
    """
    Compute W0..W3 from the master key.

    Args:
        key: Master key (16, 24 or 32 bytes)
        variant: Variant selected by len(key)

    Returns:
        Tuple (W0, W1, W2, W3) of 16-byte values
    """
    ck1, ck2, ck3 = variant.constants

    kl = bytes(key[:BLOCK_SIZE])
    kr = bytes(key[BLOCK_SIZE:]).ljust(BLOCK_SIZE, b"\x00")

    w0 = kl
    w1 = xor_bytes(odd_round(w0, ck1), kr)
    w2 = xor_bytes(even_round(w1, ck2), w0)
    w3 = xor_bytes(odd_round(w2, ck3), w1)
    return w0, w1, w2, w3


def encryption_round_keys(words: tuple[bytes, bytes, bytes, bytes]) -> list[bytes]:
    """Build all 17 candidate encryption round keys ek1..ek17."""
    keys = []
    for left, right, amount in EK_SCHEDULE:
        keys.append(xor_bytes(words[left], _rotate(words[right], amount)))
    return keys


def decryption_round_keys(ek: tuple[bytes, ...] | list[bytes], rounds: int) -> list[bytes]:
    """
    Derive decryption keys from encryption keys.

    DK[0] = EK[rounds], DK[rounds] = EK[0] and DK[i] = A(EK[rounds - i])
    for 0 < i < rounds.
    """
    dk = [ek[rounds]]
    for i in range(1, rounds):
        dk.append(diffusion_layer(ek[rounds - i]))
    dk.append(ek[0])
    return dk


def schedule_key(key: bytes) -> KeySchedule:
    """
    Derive encryption and decryption round keys from a master key.

    Args:
        key: Master key of 16, 24 or 32 bytes

    Returns:
        KeySchedule with rounds + 1 encryption and decryption keys

    Raises:
        InvalidKeyLength: If key is not 16, 24 or 32 bytes
    """
    variant = get_variant(len(key))

    words = feistel_words(key, variant)
    ek = encryption_round_keys(words)[:variant.num_round_keys]
    dk = decryption_round_keys(ek, variant.rounds)

    logger.debug(
        "Scheduled %s key: %d rounds, %d round keys",
        variant.name, variant.rounds, len(ek),
    )
    return KeySchedule(
        variant=variant,
        encryption_keys=tuple(ek),
        decryption_keys=tuple(dk),
    )
