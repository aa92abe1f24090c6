"""
Fixed-width integer I/O on binary streams.
"""

import struct
from typing import BinaryIO

INT_FORMAT = '>i'
INT_SIZE = struct.calcsize(INT_FORMAT)


def write_int(stream: BinaryIO, value: int):
    """Write a big-endian signed 32-bit integer."""
    stream.write(struct.pack(INT_FORMAT, value))


def read_int(stream: BinaryIO) -> int:
    """
    Read a big-endian signed 32-bit integer.

    Raises:
        EOFError: If the stream ends before a full integer is read
    """
    data = stream.read(INT_SIZE)
    if len(data) < INT_SIZE:
        raise EOFError(f"Expected {INT_SIZE} bytes, got {len(data)}")
    return struct.unpack(INT_FORMAT, data)[0]
