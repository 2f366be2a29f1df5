"""Keypair derivation and the factory that shares one group across keys."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .arith import random_below
from .config import SchnorrSettings
from .constants import HASH_NAME
from .group import GroupParameters, build_group
from .signing import Signature, sign, verify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair:
    """A private exponent and the matching public element of the group."""

    private_key: int = field(repr=False, compare=False)
    public_key: int
    params: GroupParameters
    hash_name: str = HASH_NAME

    def sign(self, message: bytes) -> Signature:
        return sign(self, message)

    def verify(self, signature: Signature, public_key: int) -> bool:
        """Verify ``signature`` against another party's ``public_key`` in this group."""

        return verify(self.params, signature, public_key, hash_name=self.hash_name)


def generate_keypair(params: GroupParameters, *, hash_name: str = HASH_NAME) -> KeyPair:
    """Derive a fresh keypair where ``public = g^(q - private) mod p``."""

    private_key = random_below(params.order)
    exponent = params.order - private_key
    public_key = pow(params.generator, exponent, params.prime)
    logger.debug("Derived keypair in %d-bit group", params.bits)
    return KeyPair(
        private_key=private_key,
        public_key=public_key,
        params=params,
        hash_name=hash_name,
    )


class KeyFactory:
    """Build one set of group parameters and hand out keypairs over it."""

    def __init__(self, settings: SchnorrSettings | None = None, **overrides: object) -> None:
        if settings is None:
            settings = SchnorrSettings(**overrides)
        elif overrides:
            settings = SchnorrSettings(**{**settings.model_dump(), **overrides})
        self.settings = settings
        self.params = build_group(settings.bits)

    @classmethod
    def from_params(cls, params: GroupParameters, *, hash_name: str = HASH_NAME) -> "KeyFactory":
        factory = cls.__new__(cls)
        factory.settings = SchnorrSettings(bits=params.bits, hash_name=hash_name)
        factory.params = params
        return factory

    def generate_keys(self) -> KeyPair:
        return generate_keypair(self.params, hash_name=self.settings.hash_name)


__all__ = ["KeyFactory", "KeyPair", "generate_keypair"]
