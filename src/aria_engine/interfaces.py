"""Per-key-length ARIA parameters."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidKeyLength
from .tables import C1, C2, C3


@dataclass(frozen=True)
class VariantConfig:
    """Parameters of one ARIA variant.

    Selected by master key length; drives the round count and the order
    in which the key schedule consumes the round constants.
    """

    # Master key length in bytes (16, 24 or 32)
    key_bytes: int

    # Number of rounds (12, 14 or 16)
    rounds: int

    # Round constants (CK1, CK2, CK3) for the key schedule Feistel
    constants: tuple[bytes, bytes, bytes]

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.key_bytes not in (16, 24, 32):
            raise InvalidKeyLength(self.key_bytes)
        if self.rounds != 12 + (self.key_bytes - 16) // 4:
            raise ValueError(
                f"rounds must be {12 + (self.key_bytes - 16) // 4} for a "
                f"{self.key_bytes}-byte key, got {self.rounds}"
            )
        if len(self.constants) != 3 or any(len(c) != 16 for c in self.constants):
            raise ValueError("constants must be three 16-byte values")

    @property
    def key_bits(self) -> int:
        return self.key_bytes * 8

    @property
    def name(self) -> str:
        """Variant name, e.g. ARIA-128."""
        return f"ARIA-{self.key_bits}"

    @property
    def num_round_keys(self) -> int:
        """Round keys consumed per block (rounds + 1)."""
        return self.rounds + 1


# Registry of variants keyed by master key length
VARIANTS: dict[int, VariantConfig] = {
    16: VariantConfig(key_bytes=16, rounds=12, constants=(C1, C2, C3)),
    24: VariantConfig(key_bytes=24, rounds=14, constants=(C2, C3, C1)),
    32: VariantConfig(key_bytes=32, rounds=16, constants=(C3, C1, C2)),
}


def get_variant(key_length: int) -> VariantConfig:
    """Get the variant for a master key length.

    Raises:
        InvalidKeyLength: If key_length is not 16, 24 or 32
    """
    if key_length not in VARIANTS:
        raise InvalidKeyLength(key_length)
    return VARIANTS[key_length]


def list_variants() -> list[dict[str, int | str]]:
    """List supported variants with their key sizes and round counts."""
    return [
        {"name": v.name, "key_bytes": v.key_bytes, "rounds": v.rounds}
        for v in VARIANTS.values()
    ]
