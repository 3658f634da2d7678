"""Evaluation rows: the values revealed at one queried position.

A row is laid out as

    [state values] [secret input values] [boundary values] [constraint values]

with every value encoded as a field_element_size big-endian element.
"""

from collections.abc import Sequence
from typing import Any, NamedTuple

from primitives.encoding import decode_element, encode_element, ensure_available
from primitives.errors import CodecError, TrailingBytesError
from protocol.config import CodecConfig


class EvaluationRow(NamedTuple):
    """Values of one row, grouped by register kind."""
    state: list[int]
    secret: list[int]
    boundary: list[int]
    constraint: list[int]


# Per-kind value columns indexed [register][position]; lists, numpy or galois arrays
RowColumns = tuple[Sequence[Any], Sequence[Any], Sequence[Any], Sequence[Any]]


def _take(columns: Sequence[Any], count: int, position: int, kind: str) -> list[Any]:
    if len(columns) < count:
        raise CodecError(f"expected {count} {kind} register(s), got {len(columns)}")
    return [columns[register][position] for register in range(count)]


def row_at(config: CodecConfig, columns: RowColumns, b_count: int, position: int) -> EvaluationRow:
    """Pick out the row at `position` from full value columns."""
    p_values, s_values, b_values, d_values = columns
    return EvaluationRow(
        state=_take(p_values, config.state_width, position, "state"),
        secret=_take(s_values, config.secret_input_count, position, "secret input"),
        boundary=_take(b_values, b_count, position, "boundary"),
        constraint=_take(d_values, config.constraint_count, position, "constraint"),
    )


def encode_row(config: CodecConfig, row: EvaluationRow) -> bytes:
    """Concatenate the encoded elements of a row in canonical order."""
    expected = (
        ("state", config.state_width),
        ("secret", config.secret_input_count),
        ("constraint", config.constraint_count),
    )
    for kind, count in expected:
        if len(getattr(row, kind)) != count:
            raise CodecError(f"row has {len(getattr(row, kind))} {kind} value(s), expected {count}")

    width = config.field_element_size
    out = bytearray()
    for group in row:
        for value in group:
            out += encode_element(value, width)
    return bytes(out)


def merge_row(config: CodecConfig, columns: RowColumns, b_count: int, position: int) -> bytes:
    """Encode the row at `position` into one contiguous buffer.

    Reference: Serializer.mergeValues() in bin/lib/Serializer.js

    Args:
        config: Codec configuration
        columns: (state, secret input, boundary, constraint) value columns
        b_count: Number of boundary registers to include
        position: Row index into every column

    Returns:
        config.row_size(b_count) bytes
    """
    return encode_row(config, row_at(config, columns, b_count, position))


def split_row(config: CodecConfig, data: bytes, b_count: int) -> EvaluationRow:
    """Inverse of merge_row: decode a row buffer back into grouped values.

    The buffer must be exactly config.row_size(b_count) bytes; extra bytes
    raise TrailingBytesError rather than being ignored.

    Reference: Serializer.parseValues() in bin/lib/Serializer.js
    """
    size = config.row_size(b_count)
    ensure_available(data, 0, size, "evaluation row")
    if len(data) != size:
        raise TrailingBytesError(size, len(data))

    width = config.field_element_size
    counts = (config.state_width, config.secret_input_count, b_count, config.constraint_count)
    groups = []
    offset = 0
    for count in counts:
        group = []
        for _ in range(count):
            group.append(decode_element(data[offset:offset + width]))
            offset += width
        groups.append(group)
    return EvaluationRow(*groups)
