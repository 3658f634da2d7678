"""Codec configuration: element width and register counts."""

import json
from dataclasses import dataclass
from typing import Any

import galois

from primitives.field import element_size


@dataclass(frozen=True)
class CodecConfig:
    """Shape parameters shared by every encode/decode call.

    Attributes:
        field_element_size: Bytes per field element
        state_width: Number of execution trace registers
        secret_input_count: Number of secret input registers
        constraint_count: Number of transition constraints
    """

    field_element_size: int
    state_width: int
    secret_input_count: int = 0
    constraint_count: int = 0

    def __post_init__(self) -> None:
        if self.field_element_size < 1:
            raise ValueError(f"field_element_size must be >= 1, got {self.field_element_size}")
        for name in ("state_width", "secret_input_count", "constraint_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")

    # --- Factory Methods ---

    @classmethod
    def from_field(
        cls,
        field: type[galois.FieldArray],
        state_width: int,
        secret_input_count: int = 0,
        constraint_count: int = 0,
    ) -> "CodecConfig":
        """Build a config whose element width fits every element of `field`."""
        return cls(element_size(field), state_width, secret_input_count, constraint_count)

    @classmethod
    def from_dict(cls, j: dict[str, Any]) -> "CodecConfig":
        """Build a config from camelCase keys (fieldElementSize, stateWidth, ...)."""
        return cls(
            field_element_size=j["fieldElementSize"],
            state_width=j["stateWidth"],
            secret_input_count=j.get("secretInputCount", 0),
            constraint_count=j.get("constraintCount", 0),
        )

    @classmethod
    def from_json(cls, path: str) -> "CodecConfig":
        """Load a config from a JSON file."""
        with open(path) as f:
            return cls.from_dict(json.load(f))

    # --- Derived Sizes ---

    def row_element_count(self, b_count: int) -> int:
        """Elements in one evaluation row carrying `b_count` boundary values."""
        return self.state_width + self.secret_input_count + b_count + self.constraint_count

    def row_size(self, b_count: int) -> int:
        return self.row_element_count(b_count) * self.field_element_size

    def value_count(self, bpc: int) -> int:
        """Elements in one committed evaluation leaf."""
        return self.state_width + self.constraint_count + bpc

    def value_size(self, bpc: int) -> int:
        return self.value_count(bpc) * self.field_element_size
