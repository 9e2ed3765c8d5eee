"""
ARIA round building blocks.

Contains:
- substitution_type1 / substitution_type2: S-box layers SL1 and SL2
- diffusion_layer: the 16x16 binary involution A
- odd_round / even_round: round functions FO and FE

Every function takes and returns 16-byte ``bytes`` values.
"""

from Crypto.Util.strxor import strxor

from .errors import InternalInvariantViolation
from .tables import SL1_ORDER, SL2_ORDER
from .utils import BLOCK_SIZE


# Input byte indices XORed into each output byte of A (RFC 5794, 2.4.3)
DIFFUSION_MATRIX = (
    (3, 4, 6, 8, 9, 13, 14),
    (2, 5, 7, 8, 9, 12, 15),
    (1, 4, 6, 10, 11, 12, 15),
    (0, 5, 7, 10, 11, 13, 14),
    (0, 2, 5, 8, 11, 14, 15),
    (1, 3, 4, 9, 10, 14, 15),
    (0, 2, 7, 9, 10, 12, 13),
    (1, 3, 6, 8, 11, 12, 13),
    (0, 1, 4, 7, 10, 13, 15),
    (0, 1, 5, 6, 11, 12, 14),
    (2, 3, 5, 6, 8, 13, 15),
    (2, 3, 4, 7, 9, 12, 14),
    (1, 2, 6, 7, 9, 11, 12),
    (0, 3, 6, 7, 8, 10, 13),
    (0, 3, 4, 5, 9, 11, 14),
    (1, 2, 4, 5, 8, 10, 15),
)


def _substitute(block: bytes, order: tuple[bytes, bytes, bytes, bytes]) -> bytes:
    return bytes(order[i % 4][b] for i, b in enumerate(block))


def substitution_type1(block: bytes) -> bytes:
    """SL1: SB1, SB2, SB3, SB4 applied to byte positions 0,1,2,3 (mod 4)."""
    return _substitute(block, SL1_ORDER)


def substitution_type2(block: bytes) -> bytes:
    """SL2: SB3, SB4, SB1, SB2 applied to byte positions 0,1,2,3 (mod 4).

    SL2 is the inverse of SL1.
    """
    return _substitute(block, SL2_ORDER)


def diffusion_layer(block: bytes) -> bytes:
    """
    Apply the diffusion layer A.

    Each output byte is the XOR of seven input bytes. A is an involution:
    diffusion_layer(diffusion_layer(x)) == x.

    Raises:
        InternalInvariantViolation: If block is not 16 bytes
    """
    if len(block) != BLOCK_SIZE:
        raise InternalInvariantViolation(
            f"Diffusion layer takes a {BLOCK_SIZE}-byte block, got {len(block)}"
        )
    result = bytearray(BLOCK_SIZE)
    for i, taps in enumerate(DIFFUSION_MATRIX):
        acc = 0
        for j in taps:
            acc ^= block[j]
        result[i] = acc
    return bytes(result)


def odd_round(data: bytes, round_key: bytes) -> bytes:
    """FO(D, RK) = A(SL1(D ^ RK))."""
    return diffusion_layer(substitution_type1(strxor(data, round_key)))


def even_round(data: bytes, round_key: bytes) -> bytes:
    """FE(D, RK) = A(SL2(D ^ RK))."""
    return diffusion_layer(substitution_type2(strxor(data, round_key)))


def final_round(data: bytes, round_key: bytes, last_key: bytes) -> bytes:
    """Last round: SL2(D ^ RK) ^ K_last, without diffusion."""
    return strxor(substitution_type2(strxor(data, round_key)), last_key)
