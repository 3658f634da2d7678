"""Error types raised by the proof codecs.

All errors derive from ValueError so callers that already treat malformed
proofs as ValueError keep working.
"""


class CodecError(ValueError):
    """Base class for encoding and decoding failures."""


class EncodingOverflowError(CodecError):
    """A value does not fit in its fixed-width encoding."""

    def __init__(self, value: int, width: int, what: str = "value") -> None:
        self.value = value
        self.width = width
        super().__init__(f"{what} {value} does not fit in {width} byte(s)")


class TruncatedBufferError(CodecError):
    """A read would run past the end of the buffer.

    Attributes:
        name: Field being read when the buffer ran out
        offset: Buffer offset at which the read started
        needed: Number of bytes the read required
        available: Number of bytes left from offset
    """

    def __init__(self, name: str, offset: int, needed: int, available: int) -> None:
        self.name = name
        self.offset = offset
        self.needed = needed
        self.available = available
        super().__init__(
            f"buffer too short reading {name} at offset {offset}: "
            f"need {needed} byte(s), {available} available"
        )


class TrailingBytesError(CodecError):
    """Decoding finished before consuming the whole buffer."""

    def __init__(self, consumed: int, total: int) -> None:
        self.consumed = consumed
        self.total = total
        super().__init__(f"consumed {consumed} byte(s), buffer holds {total}")
