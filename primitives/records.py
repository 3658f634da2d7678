"""Count-prefixed arrays and matrices of fixed-width byte records.

Layout:
    array:  [count: u32] [record_0] ... [record_{count-1}]
    matrix: [rows: u32] [array_0] ... [array_{rows-1}]

Every record in an array (and in every row of a matrix) has the same width,
which the caller supplies; it is never written to the buffer.
"""

from collections.abc import Sequence

from primitives.encoding import encode_uint, ensure_available, read_bytes, read_uint
from primitives.errors import CodecError

COUNT_SIZE = 4
"""Bytes used for array counts and matrix row counts."""


# --- Sizes ---

def size_of_array(records: Sequence[bytes], record_size: int) -> int:
    """Encoded length of an array of `len(records)` records."""
    return COUNT_SIZE + len(records) * record_size


def size_of_matrix(rows: Sequence[Sequence[bytes]], record_size: int) -> int:
    """Encoded length of a matrix (row count plus each row as an array)."""
    return COUNT_SIZE + sum(size_of_array(row, record_size) for row in rows)


# --- Arrays ---

def encode_array(records: Sequence[bytes], record_size: int) -> bytes:
    """Encode records as a count followed by their concatenation."""
    out = bytearray(encode_uint(len(records), COUNT_SIZE, "array length"))
    for i, record in enumerate(records):
        if len(record) != record_size:
            raise CodecError(f"record {i} is {len(record)} bytes, expected {record_size}")
        out += record
    return bytes(out)


def decode_array(
    data: bytes, offset: int, record_size: int, name: str = "array"
) -> tuple[list[bytes], int]:
    """Decode an array written by encode_array, returning (records, new_offset)."""
    count, offset = read_uint(data, offset, COUNT_SIZE, f"{name} length")
    # Zero-width records would let any count pass the length check below
    if count > 0 and record_size <= 0:
        raise CodecError(f"{name} declares {count} record(s) of width {record_size}")
    # Checked up front so a corrupt count never drives a huge allocation
    ensure_available(data, offset, count * record_size, name)
    records = []
    for _ in range(count):
        record, offset = read_bytes(data, offset, record_size, name)
        records.append(record)
    return records, offset


# --- Matrices ---

def encode_matrix(rows: Sequence[Sequence[bytes]], record_size: int) -> bytes:
    """Encode a row count, then every row as its own array."""
    out = bytearray(encode_uint(len(rows), COUNT_SIZE, "matrix row count"))
    for row in rows:
        out += encode_array(row, record_size)
    return bytes(out)


def decode_matrix(
    data: bytes, offset: int, record_size: int, name: str = "matrix"
) -> tuple[list[list[bytes]], int]:
    """Decode a matrix written by encode_matrix, returning (rows, new_offset)."""
    row_count, offset = read_uint(data, offset, COUNT_SIZE, f"{name} row count")
    # Each row carries at least its own count prefix
    ensure_available(data, offset, row_count * COUNT_SIZE, name)
    rows = []
    for i in range(row_count):
        row, offset = decode_array(data, offset, record_size, f"{name}[{i}]")
        rows.append(row)
    return rows, offset
