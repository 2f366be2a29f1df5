"""Schnorr digital signatures over a safe-prime subgroup."""

from .config import SchnorrSettings
from .constants import DEFAULT_BITS, HASH_NAME
from .errors import GenerationError
from .group import GroupParameters, build_group
from .keys import KeyFactory, KeyPair, generate_keypair
from .signing import SchnorrSigner, SchnorrVerifier, Signature, sign, verify

__all__ = [
    "DEFAULT_BITS",
    "HASH_NAME",
    "GenerationError",
    "GroupParameters",
    "KeyFactory",
    "KeyPair",
    "SchnorrSettings",
    "SchnorrSigner",
    "SchnorrVerifier",
    "Signature",
    "build_group",
    "generate_keypair",
    "sign",
    "verify",
]
