"""Default parameters shared across the signature package."""

DEFAULT_BITS = 256
HASH_NAME = "sha3_512"
DEMO_MESSAGE = b"Hello World"

__all__ = ["DEFAULT_BITS", "HASH_NAME", "DEMO_MESSAGE"]
