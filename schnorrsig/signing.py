"""Schnorr signing and verification over a safe-prime subgroup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .arith import random_below
from .constants import HASH_NAME
from .group import GroupParameters
from .hashing import challenge_hash

if TYPE_CHECKING:
    from .keys import KeyPair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Signature:
    """Signed message together with its challenge and response.

    The challenge is the full hash digest read as an integer; it is not
    reduced modulo the subgroup order, and verification recomputes it the
    same way.
    """

    message: bytes
    challenge: int
    response: int


def _as_bytes(message: bytes) -> bytes:
    if isinstance(message, str):
        raise TypeError("Message must be bytes, not str")
    return bytes(message)


def sign(key: "KeyPair", message: bytes) -> Signature:
    """Sign ``message`` with ``key`` using a freshly drawn nonce."""

    data = _as_bytes(message)
    params = key.params
    nonce = random_below(params.order)
    commitment = pow(params.generator, nonce, params.prime)
    challenge = challenge_hash(commitment, data, key.hash_name)
    response = (key.private_key * challenge + nonce) % params.order
    logger.debug("Signed %d byte message", len(data))
    return Signature(message=data, challenge=challenge, response=response)


def verify(
    params: GroupParameters,
    signature: Signature,
    public_key: int,
    *,
    hash_name: str = HASH_NAME,
) -> bool:
    """Return ``True`` when ``signature`` was produced by the owner of ``public_key``."""

    p = params.prime
    try:
        commitment = (
            pow(params.generator, signature.response, p)
            * pow(public_key, signature.challenge, p)
        ) % p
    except ValueError:
        # Negative exponent on a base with no inverse modulo p.
        logger.debug("Rejected signature with non-invertible exponentiation")
        return False
    expected = challenge_hash(commitment, _as_bytes(signature.message), hash_name)
    valid = expected == signature.challenge
    logger.debug("Signature verification result: %s", valid)
    return valid


class SchnorrSigner:
    """Signer bound to a single keypair."""

    def __init__(self, key: "KeyPair") -> None:
        self.key = key

    @property
    def public_key(self) -> int:
        return self.key.public_key

    def sign(self, message: bytes) -> Signature:
        return sign(self.key, message)


class SchnorrVerifier:
    """Verifier that checks signatures against one public key."""

    def __init__(
        self,
        params: GroupParameters,
        public_key: int,
        *,
        hash_name: str = HASH_NAME,
    ) -> None:
        self.params = params
        self.public_key = public_key
        self.hash_name = hash_name

    def verify(self, signature: Signature) -> bool:
        return verify(self.params, signature, self.public_key, hash_name=self.hash_name)


__all__ = ["SchnorrSigner", "SchnorrVerifier", "Signature", "sign", "verify"]
