"""Golden reference ARIA vectors from RFC 5794, Appendix A."""

from __future__ import annotations


# RFC 5794 Appendix A test vectors (one block each)
RFC_5794_TEST_VECTORS = [
    # A.1 - 128-bit key
    {
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("d718fbd6ab644c739da95f3be6451778"),
    },
    # A.2 - 192-bit key
    {
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f1011121314151617"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("26449c1805dbe7aa25a468ce263a9e79"),
    },
    # A.3 - 256-bit key
    {
        "key": bytes.fromhex(
            "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
        ),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("f92bd7c79fb72e2f2b8f80c1972d24fc"),
    },
]


def golden_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Look up the known-answer ciphertext for a key/plaintext pair.

    Args:
        key: 16, 24 or 32-byte key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext block

    Raises:
        KeyError: If the pair is not one of the RFC 5794 vectors
    """
    for vec in RFC_5794_TEST_VECTORS:
        if vec["key"] == key and vec["plaintext"] == plaintext:
            return vec["ciphertext"]
    raise KeyError(
        f"No known answer for key={key.hex()} plaintext={plaintext.hex()}"
    )


def validate_against_golden(
    key: bytes, plaintext: bytes, candidate_ciphertext: bytes
) -> tuple[bool, str]:
    """Validate a candidate ciphertext against the golden reference.

    Args:
        key: Key from RFC_5794_TEST_VECTORS
        plaintext: Matching 16-byte plaintext block
        candidate_ciphertext: 16-byte ciphertext to validate

    Returns:
        Tuple of (is_correct, error_detail)
    """
    expected = golden_encrypt(key, plaintext)
    if candidate_ciphertext == expected:
        return True, ""
    else:
        return False, (
            f"Ciphertext mismatch: expected {expected.hex()}, "
            f"got {candidate_ciphertext.hex()}"
        )
