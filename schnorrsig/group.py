"""Construction of the prime-order subgroup used for signing."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .arith import generate_safe_prime, is_probable_prime, random_below
from .errors import GenerationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupParameters:
    """Safe prime ``prime``, subgroup ``order`` and a ``generator`` of that order.

    Instances are shared read-only by every keypair derived from them.
    """

    prime: int
    order: int
    generator: int

    @property
    def bits(self) -> int:
        return self.prime.bit_length()

    def is_valid(self) -> bool:
        """Check every invariant of a safe-prime group with an order-q generator."""

        p, q, g = self.prime, self.order, self.generator
        if p < 5 or q != (p - 1) // 2:
            return False
        if not (is_probable_prime(p) and is_probable_prime(q)):
            return False
        if not 1 < g < p:
            return False
        return pow(g, q, p) == 1


def _find_generator(prime: int) -> int:
    attempts = 0
    while True:
        attempts += 1
        # Squares modulo a safe prime lie in the order-q subgroup.
        candidate = pow(random_below(prime), 2, prime)
        if candidate not in (0, 1):
            logger.debug("Found generator after %d attempt(s)", attempts)
            return candidate


def build_group(bits: int) -> GroupParameters:
    """Generate fresh group parameters around a ``bits``-bit safe prime."""

    if bits <= 0:
        raise ValueError("Bit length must be positive")

    logger.info("Generating %d-bit safe prime group", bits)
    prime = generate_safe_prime(bits)
    if prime.bit_length() != bits or prime % 2 == 0:
        raise GenerationError(f"Prime engine returned a value that is not an odd {bits}-bit number")
    order = (prime - 1) // 2
    if not is_probable_prime(order):
        raise GenerationError("Subgroup order (p - 1) / 2 is not prime")

    generator = _find_generator(prime)
    return GroupParameters(prime=prime, order=order, generator=generator)


__all__ = ["GroupParameters", "build_group"]
