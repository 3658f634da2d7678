"""Tests for evaluation row merging and splitting."""

import numpy as np
import pytest

from primitives.errors import CodecError, EncodingOverflowError, TrailingBytesError, TruncatedBufferError
from primitives.field import FF
from protocol.config import CodecConfig
from protocol.rows import EvaluationRow, encode_row, merge_row, row_at, split_row


def _elements(values: list[int], width: int = 32) -> bytes:
    return b"".join(v.to_bytes(width, "big") for v in values)


class TestMergeRow:
    """Row encoding."""

    def test_single_position(self, config: CodecConfig) -> None:
        """State, secret, boundary and constraint values in that order."""
        columns = ([[5], [9]], [[3]], [[7]], [[11]])
        merged = merge_row(config, columns, b_count=1, position=0)
        assert merged == _elements([5, 9, 3, 7, 11])
        assert len(merged) == config.row_size(1)

    def test_selects_position(self, config: CodecConfig) -> None:
        columns = ([[1, 2, 3], [4, 5, 6]], [[7, 8, 9]], [[10, 11, 12]], [[13, 14, 15]])
        assert merge_row(config, columns, 1, 2) == _elements([3, 6, 9, 12, 15])

    def test_uses_first_b_count_boundary_registers(self, config: CodecConfig) -> None:
        columns = ([[1], [2]], [[3]], [[4], [5], [6]], [[7]])
        assert merge_row(config, columns, 2, 0) == _elements([1, 2, 3, 4, 5, 7])
        assert merge_row(config, columns, 0, 0) == _elements([1, 2, 3, 7])

    def test_missing_registers(self, config: CodecConfig) -> None:
        columns = ([[1]], [[3]], [[4]], [[7]])
        with pytest.raises(CodecError):
            merge_row(config, columns, 1, 0)

    def test_overflowing_value(self) -> None:
        config = CodecConfig(field_element_size=1, state_width=1)
        with pytest.raises(EncodingOverflowError):
            merge_row(config, ([[256]], [], [], []), 0, 0)

    def test_numpy_columns(self) -> None:
        config = CodecConfig(field_element_size=8, state_width=2, constraint_count=1)
        p_values = np.array([[1, 2], [3, 4]], dtype=np.uint64)
        d_values = np.array([[5, 6]], dtype=np.uint64)
        merged = merge_row(config, (p_values, [], [], d_values), 0, 1)
        assert merged == _elements([2, 4, 6], 8)

    def test_galois_columns(self) -> None:
        config = CodecConfig.from_field(FF, state_width=2, constraint_count=1)
        p_values = FF([[10, 20], [30, 40]])
        d_values = FF([[50, 60]])
        b_values = FF([[70, 80]])
        merged = merge_row(config, (p_values, [], b_values, d_values), 1, 0)
        assert merged == _elements([10, 30, 70, 50], 8)

    def test_encode_row_checks_group_lengths(self, config: CodecConfig) -> None:
        with pytest.raises(CodecError):
            encode_row(config, EvaluationRow([1], [2], [], [3]))


class TestSplitRow:
    """Row decoding."""

    def test_concrete_row(self, config: CodecConfig) -> None:
        row = split_row(config, _elements([5, 9, 3, 7, 11]), b_count=1)
        assert row == ([5, 9], [3], [7], [11])
        assert row.state == [5, 9]
        assert row.boundary == [7]

    def test_inverts_merge(self, config: CodecConfig) -> None:
        columns = (
            [[1, 2**255], [3, 4]],
            [[2**256 - 1, 0]],
            [[8, 9], [10, 11], [12, 13]],
            [[14, 15]],
        )
        for position in range(2):
            for b_count in range(4):
                merged = merge_row(config, columns, b_count, position)
                assert split_row(config, merged, b_count) == row_at(config, columns, b_count, position)

    def test_short_buffer(self, config: CodecConfig) -> None:
        with pytest.raises(TruncatedBufferError):
            split_row(config, _elements([5, 9, 3, 7, 11])[:-1], b_count=1)

    def test_long_buffer(self, config: CodecConfig) -> None:
        with pytest.raises(TrailingBytesError):
            split_row(config, _elements([5, 9, 3, 7, 11, 0]), b_count=1)

    def test_extra_byte_not_ignored(self) -> None:
        """A single-element row followed by one stray byte is rejected."""
        config = CodecConfig(field_element_size=1, state_width=1)
        with pytest.raises(TrailingBytesError) as exc_info:
            split_row(config, b"\x05\x06", 0)
        assert exc_info.value.consumed == 1
        assert exc_info.value.total == 2
