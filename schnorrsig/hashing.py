"""Challenge derivation from a commitment and a message."""

from __future__ import annotations

import hashlib

from .arith import bytes_to_int, int_to_bytes
from .constants import HASH_NAME


def validate_hash_name(name: str) -> str:
    """Return ``name`` normalised, or raise if hashlib cannot serve it."""

    normalised = name.lower()
    if normalised not in hashlib.algorithms_available:
        raise ValueError(f"Unsupported hash algorithm '{name}'")
    if normalised.startswith("shake"):
        raise ValueError("Variable length digests cannot be used for challenges")
    return normalised


def challenge_hash(commitment: int, message: bytes, hash_name: str = HASH_NAME) -> int:
    # A fresh hash object per call keeps signing operations independent.
    hasher = hashlib.new(hash_name)
    hasher.update(int_to_bytes(commitment))
    hasher.update(message)
    return bytes_to_int(hasher.digest())


__all__ = ["challenge_hash", "validate_hash_name"]
