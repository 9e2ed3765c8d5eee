"""Command-line interface for the ARIA engine.

Usage:
    aria-engine encrypt --key <hex> --pt <hex> --verbose
    aria-engine decrypt --key <hex> --ct <hex> --trace trace.jsonl
    aria-engine validate --n 100 --seed 42
    aria-engine demo
"""

from __future__ import annotations

import logging
import math
import random
import secrets
import sys
from typing import Callable, TextIO

import click

from . import DEFAULT_KEY_HEX, DEFAULT_PT_HEX, __version__
from .cipher import AriaCipher
from .errors import AriaError
from .golden import RFC_5794_TEST_VECTORS, validate_against_golden
from .interfaces import VARIANTS, list_variants
from .trace import TraceRecorder, print_header, print_result
from .utils import BLOCK_SIZE, bytes_to_hex, format_block_grid, hex_to_bytes, split_blocks


@click.group()
@click.version_option(version=__version__, prog_name="aria-engine")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """ARIA (RFC 5794) block cipher engine.

    Encrypt and decrypt raw 16-byte blocks with 128, 192 or 256-bit keys.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@main.command(name="list")
def list_cmd() -> None:
    """List supported ARIA variants."""
    click.echo("Supported variants:")
    click.echo("")
    for variant in list_variants():
        click.echo(f"  {variant['name']}")
        click.echo(f"    key: {variant['key_bytes']} bytes, rounds: {variant['rounds']}")
        click.echo("")


def _parse_hex(value: str, what: str) -> bytes:
    try:
        return hex_to_bytes(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {what} hex: {e}", err=True)
        sys.exit(1)


def _run_blocks(
    direction: str,
    key_hex: str,
    data_hex: str,
    verbose: bool,
    trace_path: str | None,
) -> None:
    """Shared body of the encrypt and decrypt commands."""
    key = _parse_hex(key_hex, "key")
    data = _parse_hex(data_hex, "input")

    if not data or len(data) % BLOCK_SIZE != 0:
        click.echo(
            f"Error: Input must be a positive multiple of {BLOCK_SIZE} bytes, "
            f"got {len(data)}",
            err=True,
        )
        sys.exit(1)

    try:
        cipher = AriaCipher(key)
    except AriaError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    print_header(f"{cipher.variant.name} {direction}")
    print(f"Key:   {key_hex}")
    print(f"Input: {data_hex}")

    trace_file: TextIO | None = None
    if trace_path:
        try:
            trace_file = open(trace_path, "w")
        except OSError as e:
            click.echo(f"Error: Cannot open trace file: {e}", err=True)
            sys.exit(1)

    tracer = TraceRecorder(verbose=verbose, trace_file=trace_file)
    crypt_block = cipher.encrypt_block if direction == "encrypt" else cipher.decrypt_block

    try:
        output = b"".join(crypt_block(block, tracer) for block in split_blocks(data))
    finally:
        if trace_file:
            trace_file.close()

    passed = None
    if direction == "encrypt" and len(data) == BLOCK_SIZE:
        try:
            passed, detail = validate_against_golden(key, data, output)
        except KeyError:
            passed = None
        else:
            if not passed:
                print(detail)

    label = "Ciphertext" if direction == "encrypt" else "Plaintext"
    print_result(label, bytes_to_hex(output), cipher.rounds, passed)

    if passed is False:
        sys.exit(1)


@main.command()
@click.option("--key", "key_hex", type=str, default=DEFAULT_KEY_HEX,
              help="Key as hex (32, 48 or 64 chars, default: RFC 5794 A.1)")
@click.option("--pt", "pt_hex", type=str, default=DEFAULT_PT_HEX,
              help="Plaintext as hex, whole 16-byte blocks (default: RFC 5794 A.1)")
@click.option("--verbose", "-v", is_flag=True, help="Print the state after every round")
@click.option("--trace", "trace_path", type=click.Path(dir_okay=False), default=None,
              help="Write a JSON Lines round trace to this file")
def encrypt(key_hex: str, pt_hex: str, verbose: bool, trace_path: str | None) -> None:
    """Encrypt one or more 16-byte blocks."""
    _run_blocks("encrypt", key_hex, pt_hex, verbose, trace_path)


@main.command()
@click.option("--key", "key_hex", type=str, default=DEFAULT_KEY_HEX,
              help="Key as hex (32, 48 or 64 chars, default: RFC 5794 A.1)")
@click.option("--ct", "ct_hex", type=str, required=True,
              help="Ciphertext as hex, whole 16-byte blocks")
@click.option("--verbose", "-v", is_flag=True, help="Print the state after every round")
@click.option("--trace", "trace_path", type=click.Path(dir_okay=False), default=None,
              help="Write a JSON Lines round trace to this file")
def decrypt(key_hex: str, ct_hex: str, verbose: bool, trace_path: str | None) -> None:
    """Decrypt one or more 16-byte blocks."""
    _run_blocks("decrypt", key_hex, ct_hex, verbose, trace_path)


@main.command()
@click.option("--n", "num_tests", type=int, default=100,
              help="Random round-trip tests per key size (default: 100)")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
def validate(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Validate against RFC 5794 vectors and random round-trips."""
    click.echo("Running RFC 5794 KAT tests...")
    kat_passed = 0

    for i, vec in enumerate(RFC_5794_TEST_VECTORS):
        cipher = AriaCipher(vec["key"])
        ct = cipher.encrypt_block(vec["plaintext"])
        correct, detail = validate_against_golden(vec["key"], vec["plaintext"], ct)
        if correct and cipher.decrypt_block(ct) == vec["plaintext"]:
            kat_passed += 1
            if verbose:
                click.echo(f"  KAT {i+1} ({cipher.variant.name}): PASS")
        else:
            click.echo(f"  KAT {i+1} ({cipher.variant.name}): FAIL - {detail or 'decrypt mismatch'}")

    click.echo(f"RFC 5794 tests: {kat_passed}/{len(RFC_5794_TEST_VECTORS)} passed")

    click.echo(f"\nRunning {num_tests} random round-trip tests per key size...")

    random_bytes: Callable[[int], bytes]
    if seed is not None:
        rng = random.Random(seed)
        random_bytes = lambda n: bytes(rng.randint(0, 255) for _ in range(n))
    else:
        random_bytes = secrets.token_bytes

    random_passed = 0
    random_total = 0
    for key_bytes in VARIANTS:
        # Smallest buffer that is a whole number of keys and of blocks
        unit = key_bytes * BLOCK_SIZE // math.gcd(key_bytes, BLOCK_SIZE)
        for i in range(num_tests):
            key = random_bytes(key_bytes)
            pt = random_bytes(unit * (1 + i % 3))
            cipher = AriaCipher(key)
            random_total += 1
            if cipher.decrypt(cipher.encrypt(pt)) == pt:
                random_passed += 1
            elif verbose:
                click.echo(f"  Random test {i+1} ({cipher.variant.name}): FAIL")

    click.echo(f"Random tests: {random_passed}/{random_total} passed")

    total_passed = kat_passed + random_passed
    total_tests = len(RFC_5794_TEST_VECTORS) + random_total

    click.echo("")
    if total_passed == total_tests:
        click.echo(f"VALIDATION PASSED: All {total_tests} tests passed")
        sys.exit(0)
    else:
        click.echo(f"VALIDATION FAILED: {total_tests - total_passed} failures")
        sys.exit(1)


@main.command()
def demo() -> None:
    """Encrypt the sample block, decrypt it back and print both."""
    key = hex_to_bytes(DEFAULT_KEY_HEX)
    plaintext = hex_to_bytes(DEFAULT_PT_HEX)

    cipher = AriaCipher(key)
    ciphertext = cipher.encrypt(plaintext)
    recovered = cipher.decrypt(ciphertext)

    click.echo(f"Key:        {bytes_to_hex(key)}")
    click.echo(f"Plaintext:  {bytes_to_hex(plaintext)}")
    click.echo(f"Ciphertext: {bytes_to_hex(ciphertext)}")
    click.echo(format_block_grid(ciphertext))
    click.echo(f"Decrypted:  {bytes_to_hex(recovered)}")


if __name__ == "__main__":
    main()
