"""Synthetic Modbus TCP frames for the traffic log.

Frames are display tokens only: an MBAP-style header, unit id, function
code and four random payload bytes, e.g.

    00 01 00 00 00 06 01 03 A4 3F 00 12
"""

from __future__ import annotations

from enum import Enum

HEADER = "00 01 00 00 00"
LENGTH = "06"
UNIT_ID = "01"
PAYLOAD_BYTES = 4


class FunctionCode(str, Enum):
    READ = "03"     # read holding registers
    WRITE = "05"    # write single coil


def modbus_frame(function: FunctionCode, rng) -> str:
    """Build one frame with a fresh random payload."""
    payload = " ".join(f"{int(b):02X}" for b in rng.integers(0, 256, size=PAYLOAD_BYTES))
    return f"{HEADER} {LENGTH} {UNIT_ID} {FunctionCode(function).value} {payload}"


def read_frame(rng) -> str:
    return modbus_frame(FunctionCode.READ, rng)


def write_frame(rng) -> str:
    return modbus_frame(FunctionCode.WRITE, rng)
