"""
ARIA Block Cipher Engine

Table-driven ARIA (RFC 5794) for 128, 192 and 256-bit keys:
1. Key schedule (3-round Feistel over the master key)
2. Block encryption/decryption with alternating FO/FE round functions
"""

__version__ = "1.0.0"

# Default ARIA-128 test values from RFC 5794 Appendix A.1
DEFAULT_KEY_HEX = "000102030405060708090a0b0c0d0e0f"
DEFAULT_PT_HEX = "00112233445566778899aabbccddeeff"
DEFAULT_CT_HEX = "d718fbd6ab644c739da95f3be6451778"

from .errors import (
    AriaError,
    InvalidKeyLength,
    InvalidInputLength,
    InvalidBlockLength,
    InternalInvariantViolation,
)
from .interfaces import VariantConfig, VARIANTS, get_variant
from .key_schedule import KeySchedule, schedule_key
from .cipher import AriaCipher, aria_encrypt, aria_decrypt
from .trace import TraceRecorder

__all__ = [
    "AriaError",
    "InvalidKeyLength",
    "InvalidInputLength",
    "InvalidBlockLength",
    "InternalInvariantViolation",
    "VariantConfig",
    "VARIANTS",
    "get_variant",
    "KeySchedule",
    "schedule_key",
    "AriaCipher",
    "aria_encrypt",
    "aria_decrypt",
    "TraceRecorder",
]
