"""Shared fixtures for the proof codec tests."""

import pytest

from protocol.config import CodecConfig


@pytest.fixture
def config() -> CodecConfig:
    """32-byte elements, 2 state registers, 1 secret input, 1 constraint."""
    return CodecConfig(
        field_element_size=32, state_width=2, secret_input_count=1, constraint_count=1
    )
