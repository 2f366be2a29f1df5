"""Exception types raised by the signature package."""


class GenerationError(RuntimeError):
    """The arithmetic, entropy or prime generation provider failed."""


__all__ = ["GenerationError"]
