"""
Length-prefixed UTF-8 record codec.

Each record is a 2-byte big-endian unsigned length followed by that many
bytes of UTF-8 text. Reading past the last complete record raises EOFError,
which is how the end-of-stream scenario is reached.
"""

import struct
from typing import BinaryIO, Iterable, List

HEADER = struct.Struct(">H")
MAX_RECORD_BYTES = 0xFFFF

SAMPLE_RECORDS = (
    "checked faults depend on the environment",
    "unchecked faults come from the program itself",
)


def encode_record(text: str) -> bytes:
    """
    Encode one record.

    Raises:
        ValueError: If the encoded text does not fit the 2-byte length header
    """
    payload = text.encode("utf-8")
    if len(payload) > MAX_RECORD_BYTES:
        raise ValueError(f"record too long: {len(payload)} bytes (max {MAX_RECORD_BYTES})")
    return HEADER.pack(len(payload)) + payload


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def read_record(stream: BinaryIO) -> str:
    """
    Read one record from a binary stream.

    Raises:
        EOFError: If the stream ends before a complete record
        UnicodeDecodeError: If the payload is not valid UTF-8
    """
    (length,) = HEADER.unpack(_read_exact(stream, HEADER.size))
    return _read_exact(stream, length).decode("utf-8")


def write_records(stream: BinaryIO, records: Iterable[str]) -> int:
    """Write records to a binary stream. Returns the number written."""
    count = 0
    for text in records:
        stream.write(encode_record(text))
        count += 1
    return count


def read_all_records(stream: BinaryIO) -> List[str]:
    """Read records until the stream is exhausted, dropping any truncated tail."""
    records = []
    while True:
        try:
            records.append(read_record(stream))
        except EOFError:
            return records
