"""Digest widths of the hash functions used for Merkle commitments."""

import hashlib

# Algorithm name -> hashlib constructor name
_HASHLIB_NAMES = {
    "sha256": "sha256",
    "blake2s256": "blake2s",
}


def get_hash_digest_size(hash_algorithm: str) -> int:
    """Return the digest size in bytes of a supported hash algorithm."""
    try:
        hashlib_name = _HASHLIB_NAMES[hash_algorithm]
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {hash_algorithm!r}") from None
    return hashlib.new(hashlib_name).digest_size


def resolve_digest_size(hash_algorithm: str | int) -> int:
    """Accept an algorithm name or an explicit digest width in bytes."""
    if isinstance(hash_algorithm, str):
        return get_hash_digest_size(hash_algorithm)
    if isinstance(hash_algorithm, bool) or not isinstance(hash_algorithm, int):
        raise TypeError(f"hash_algorithm must be a name or a width, got {hash_algorithm!r}")
    if hash_algorithm <= 0:
        raise ValueError(f"digest width must be positive, got {hash_algorithm}")
    return hash_algorithm
