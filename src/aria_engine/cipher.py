"""
ARIA block cipher (RFC 5794).

Round schedule for one 16-byte block with n rounds:
- Round 1: FO with round key 0
- Rounds 2..n-1: FE with odd key indices, FO with even key indices
- Round n: SL2(state ^ key[n-1]) ^ key[n], no diffusion layer

Decryption runs the same schedule with the decryption round keys.
"""

from __future__ import annotations

import logging

from .errors import InvalidBlockLength, InvalidInputLength
from .interfaces import VariantConfig
from .key_schedule import KeySchedule, schedule_key
from .layers import even_round, final_round, odd_round
from .trace import TraceRecorder
from .utils import BLOCK_SIZE, split_blocks

logger = logging.getLogger(__name__)


class AriaCipher:
    """
    ARIA cipher instance bound to one master key.

    Round keys are computed once in the constructor and never modified,
    so an instance can be shared between threads.
    """

    def __init__(self, key: bytes):
        """
        Schedule the master key.

        Args:
            key: 16, 24 or 32-byte master key

        Raises:
            TypeError: If key is not bytes-like
            InvalidKeyLength: If key has any other length
        """
        if not isinstance(key, (bytes, bytearray, memoryview)):
            raise TypeError(f"Key must be bytes-like, got {type(key).__name__}")
        self._schedule: KeySchedule = schedule_key(bytes(key))

    @property
    def variant(self) -> VariantConfig:
        return self._schedule.variant

    @property
    def rounds(self) -> int:
        """Number of rounds (12, 14 or 16)."""
        return self._schedule.rounds

    @property
    def key_length(self) -> int:
        """Master key length in bytes."""
        return self._schedule.variant.key_bytes

    @property
    def encryption_keys(self) -> tuple[bytes, ...]:
        return self._schedule.encryption_keys

    @property
    def decryption_keys(self) -> tuple[bytes, ...]:
        return self._schedule.decryption_keys

    def encrypt(self, plaintext: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """
        Encrypt every 16-byte block of plaintext independently.

        Blocks are always 16 bytes, so the length must also be a whole
        number of blocks: with a 24-byte key that means a multiple of 48
        bytes. Use encrypt_block() for single blocks under any key size.

        Args:
            plaintext: Buffer whose length is a positive multiple of the
                key length and of the block size
            tracer: Optional trace recorder

        Returns:
            Ciphertext of the same length

        Raises:
            InvalidInputLength: If the buffer length is not accepted
        """
        return self._crypt(plaintext, self._schedule.encryption_keys, tracer)

    def decrypt(self, ciphertext: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """Decrypt a buffer produced by encrypt(); same length rules apply."""
        return self._crypt(ciphertext, self._schedule.decryption_keys, tracer)

    def encrypt_block(self, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """Encrypt a single 16-byte block, whatever the key length."""
        self._check_block(block)
        return self._crypt_block(bytes(block), self._schedule.encryption_keys, tracer)

    def decrypt_block(self, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """Decrypt a single 16-byte block, whatever the key length."""
        self._check_block(block)
        return self._crypt_block(bytes(block), self._schedule.decryption_keys, tracer)

    def _check_block(self, block: bytes) -> None:
        if len(block) != BLOCK_SIZE:
            raise InvalidBlockLength(len(block))

    def _check_length(self, length: int) -> None:
        if (
            length == 0
            or length % self.key_length != 0
            or length % BLOCK_SIZE != 0
        ):
            raise InvalidInputLength(length, self.key_length)

    def _crypt(
        self,
        data: bytes,
        keys: tuple[bytes, ...],
        tracer: TraceRecorder | None,
    ) -> bytes:
        self._check_length(len(data))

        blocks = split_blocks(data)
        logger.debug("%s: processing %d block(s)", self.variant.name, len(blocks))

        output = bytearray()
        for index, block in enumerate(blocks):
            output += self._crypt_block(block, keys, tracer, index)
        return bytes(output)

    def _crypt_block(
        self,
        block: bytes,
        keys: tuple[bytes, ...],
        tracer: TraceRecorder | None = None,
        index: int = 0,
    ) -> bytes:
        rounds = self.rounds

        state = odd_round(block, keys[0])
        if tracer:
            tracer.record(block=index, round=1, operation="odd_round",
                          state=state, round_key=keys[0])

        for j in range(1, rounds - 1):
            if j % 2 == 0:
                state = odd_round(state, keys[j])
                operation = "odd_round"
            else:
                state = even_round(state, keys[j])
                operation = "even_round"
            if tracer:
                tracer.record(block=index, round=j + 1, operation=operation,
                              state=state, round_key=keys[j])

        state = final_round(state, keys[rounds - 1], keys[rounds])
        if tracer:
            tracer.record(block=index, round=rounds, operation="final_round",
                          state=state, round_key=keys[rounds - 1])
        return state

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(variant={self.variant.name!r})"


def aria_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Convenience function: encrypt plaintext under key."""
    return AriaCipher(key).encrypt(plaintext)


def aria_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Convenience function: decrypt ciphertext under key."""
    return AriaCipher(key).decrypt(ciphertext)
