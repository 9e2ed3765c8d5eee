"""Exceptions raised by the ARIA engine."""


class AriaError(Exception):
    """Base class for all ARIA engine errors."""


class InvalidKeyLength(AriaError, ValueError):
    """Master key is not 16, 24 or 32 bytes long."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Key must be 16, 24 or 32 bytes, got {length}")


class InvalidInputLength(AriaError, ValueError):
    """Buffer passed to encrypt/decrypt cannot be split into whole blocks."""

    def __init__(self, length: int, key_length: int):
        self.length = length
        self.key_length = key_length
        super().__init__(
            f"Input length must be a positive multiple of the key length "
            f"({key_length} bytes) and of the 16-byte block, got {length}"
        )


class InternalInvariantViolation(AriaError, AssertionError):
    """An internal layer received a value that is not a 16-byte block."""


class InvalidBlockLength(InvalidInputLength):
    """Block passed to encrypt_block/decrypt_block is not 16 bytes."""

    def __init__(self, length: int):
        self.length = length
        self.key_length = None
        AriaError.__init__(self, f"Block must be 16 bytes, got {length}")
