"""
Utility functions for byte-string XOR, bit rotation and hex formatting.

ARIA treats every 128-bit value as a big-endian byte string: byte 0 holds
the most significant bits, so rotations move bits from byte i+1 into
byte i when rotating left.
"""

from Crypto.Util.number import bytes_to_long, long_to_bytes

BLOCK_SIZE = 16


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string (32 chars for one block)

    Returns:
        bytes
    """
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to hex string.

    Args:
        data: bytes

    Returns:
        Lowercase hex string
    """
    return data.hex()


def xor_bytes(x: bytes, y: bytes) -> bytes:
    """
    XOR y into x byte by byte.

    The result always has the length of x. When y is shorter, the bytes
    of x past the end of y are copied unchanged; extra bytes of y are
    ignored.
    """
    n = min(len(x), len(y))
    return bytes(a ^ b for a, b in zip(x[:n], y[:n])) + bytes(x[n:])


def rotl(data: bytes, n_bits: int) -> bytes:
    """
    Rotate a byte string left by n_bits.

    n_bits is reduced modulo the bit length of data, so rotating by 0 or
    by a multiple of the bit length returns an equal copy.

    Args:
        data: Byte string to rotate (any length)
        n_bits: Rotation amount in bits

    Returns:
        Rotated byte string of the same length
    """
    width = len(data) * 8
    if width == 0:
        return bytes(data)
    n_bits %= width
    if n_bits == 0:
        return bytes(data)

    value = bytes_to_long(data)
    mask = (1 << width) - 1
    rotated = ((value << n_bits) | (value >> (width - n_bits))) & mask
    return long_to_bytes(rotated, len(data))


def rotr(data: bytes, n_bits: int) -> bytes:
    """Rotate a byte string right by n_bits (left by bitlength - n_bits)."""
    return rotl(data, len(data) * 8 - n_bits)


def split_blocks(data: bytes, size: int = BLOCK_SIZE) -> list[bytes]:
    """Split data into consecutive chunks of `size` bytes."""
    return [bytes(data[i:i + size]) for i in range(0, len(data), size)]


def format_block_grid(block: bytes) -> str:
    """
    Format 16 bytes as a readable 4x4 grid (row-major, 4 bytes per line).

    Returns multi-line string like:
      00 11 22 33
      44 55 66 77
      88 99 aa bb
      cc dd ee ff
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Expected {BLOCK_SIZE} bytes, got {len(block)}")
    lines = []
    for row in range(4):
        row_hex = [f"{b:02x}" for b in block[row * 4:row * 4 + 4]]
        lines.append("  " + " ".join(row_hex))
    return "\n".join(lines)


def format_block_words(block: bytes) -> str:
    """Format a byte string as space-separated 32-bit words."""
    return " ".join(block[i:i + 4].hex() for i in range(0, len(block), 4))
