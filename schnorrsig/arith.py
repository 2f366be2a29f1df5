"""Big integer helpers backed by Python ints and pycryptodome primality."""

from __future__ import annotations

import secrets

from Crypto.Math.Primality import generate_probable_safe_prime
from Crypto.Util.number import isPrime

from .errors import GenerationError


def int_to_bytes(value: int) -> bytes:
    length = max(1, (value.bit_length() + 7) // 8)
    return value.to_bytes(length, "big")


def bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, "big")


def random_below(bound: int) -> int:
    """Draw a uniform integer from ``[0, bound)``."""

    try:
        return secrets.randbelow(bound)
    except ValueError as exc:
        raise GenerationError(f"Cannot sample below {bound}") from exc


def generate_safe_prime(bits: int) -> int:
    """Generate a probable safe prime with exactly ``bits`` bits.

    The top bit is always set, so ``result.bit_length() == bits``. pycryptodome
    refuses sizes it considers too small to be meaningful; that refusal, like
    any other engine failure, is reported as :class:`GenerationError`.
    """

    try:
        candidate = generate_probable_safe_prime(exact_bits=bits)
    except (ValueError, MemoryError) as exc:
        raise GenerationError(f"Unable to generate a {bits}-bit safe prime: {exc}") from exc
    return int(candidate)


def is_probable_prime(value: int) -> bool:
    if value < 2:
        return False
    return bool(isPrime(value))


__all__ = [
    "bytes_to_int",
    "generate_safe_prime",
    "int_to_bytes",
    "is_probable_prime",
    "random_below",
]
