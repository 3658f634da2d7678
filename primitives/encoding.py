"""Fixed-width big-endian encoding of field elements and counters."""

from typing import Any

from primitives.errors import CodecError, EncodingOverflowError, TruncatedBufferError
from primitives.field import as_int


# --- Field Elements ---

def encode_element(value: Any, width: int) -> bytes:
    """Encode a field element as exactly `width` big-endian bytes.

    Raises:
        EncodingOverflowError: If the value needs more than `width` bytes.
    """
    n = as_int(value)
    if n < 0:
        raise CodecError(f"field elements must be non-negative, got {n}")
    if n.bit_length() > 8 * width:
        raise EncodingOverflowError(n, width, "field element")
    return n.to_bytes(width, "big")


def decode_element(data: bytes) -> int:
    """Decode a big-endian byte string to a non-negative integer."""
    return int.from_bytes(data, "big")


# --- Unsigned Counters ---

def encode_uint(value: int, size: int, what: str = "count") -> bytes:
    """Encode an unsigned counter in `size` big-endian bytes."""
    if value < 0 or value.bit_length() > 8 * size:
        raise EncodingOverflowError(value, size, what)
    return value.to_bytes(size, "big")


def read_uint(data: bytes, offset: int, size: int, name: str) -> tuple[int, int]:
    """Read an unsigned big-endian counter, returning (value, new_offset)."""
    raw, offset = read_bytes(data, offset, size, name)
    return int.from_bytes(raw, "big"), offset


# --- Raw Reads ---

def ensure_available(data: bytes, offset: int, needed: int, name: str) -> None:
    """Raise TruncatedBufferError unless `needed` bytes remain after offset."""
    available = max(len(data) - offset, 0)
    if needed > available:
        raise TruncatedBufferError(name, offset, needed, available)


def read_bytes(data: bytes, offset: int, size: int, name: str) -> tuple[bytes, int]:
    """Slice `size` bytes at offset, returning (bytes, new_offset)."""
    ensure_available(data, offset, size, name)
    end = offset + size
    return bytes(data[offset:end]), end
