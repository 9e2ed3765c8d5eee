"""
Trace recording and pretty printing for ARIA operations.

Contains:
- TraceRecorder: JSON Lines trace + compact verbose stdout, one entry per round
- print_header / print_result: shared formatting helpers
"""

import json
from typing import Any, TextIO

from .utils import format_block_words


class TraceRecorder:
    """
    Records and outputs round-by-round traces of ARIA execution.

    Supports:
    - JSON Lines file output  (when trace_file is set)
    - Compact verbose stdout  (when verbose is set)

    A recorder is passed per encrypt/decrypt call and is never stored on
    the cipher, so one cipher can serve concurrent callers.
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry and emit it to the enabled outputs."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        # Round states and keys go out as hex strings
        line = {
            k: v.hex() if isinstance(v, (bytes, bytearray)) else v
            for k, v in record.items()
        }
        self.trace_file.write(json.dumps(line) + "\n")
        self.trace_file.flush()

    def _print_verbose(self, record: dict[str, Any]) -> None:
        """One compact line per round."""
        block = record.get("block", 0)
        round_num = record.get("round", 0)
        operation = record.get("operation", "unknown")

        if "state" in record:
            words = format_block_words(record["state"])
            print(f"B{block:04d} R{round_num:02d}  {operation:12s} STATE:{words}")

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Shared formatting functions
# ------------------------------------------------------------------

def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_result(label: str, output_hex: str, rounds: int,
                 passed: bool | None = None) -> None:
    """Print final encryption/decryption result.

    passed is None when there is no known answer to compare against.
    """
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"{label}: {output_hex}")
    print(f"Rounds: {rounds}")

    if passed is not None:
        status = "PASS" if passed else "FAIL"
        marker = "[OK]" if passed else "[ERROR]"
        print(f"Verification: {marker} {status}")
    print(f"{'='*70}")
