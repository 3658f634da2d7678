"""Field element helpers.

Field arithmetic itself happens elsewhere; the codecs only need to know how
wide an element is and how to turn whatever scalar type the prover hands
over (int, numpy integer, galois element) into a plain int.
"""

from typing import Any

import galois
import numpy as np

# --- Field Construction ---

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

FF = galois.GF(GOLDILOCKS_PRIME)
"""Base field GF(p) - Goldilocks prime field."""


def element_size(field: type[galois.FieldArray]) -> int:
    """Number of bytes needed to hold any element of a prime field."""
    if field.degree != 1:
        raise ValueError(f"extension fields are not supported, got degree {field.degree}")
    return max(1, ((field.order - 1).bit_length() + 7) // 8)


# --- Scalar Conversion ---

def as_int(value: Any) -> int:
    """Convert an int, numpy integer or galois scalar to a Python int."""
    if isinstance(value, bool):
        raise TypeError("bool is not a field element")
    if isinstance(value, int):
        return value
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, galois.FieldArray):
        if value.ndim != 0:
            raise TypeError(f"expected a scalar field element, got shape {value.shape}")
        if type(value).degree > 1:
            raise TypeError("extension field elements must be split into coefficients")
        return int(value)
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return as_int(value.item())
    raise TypeError(f"cannot use {type(value).__name__} as a field element")
