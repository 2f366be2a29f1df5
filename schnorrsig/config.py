"""Validated settings for group and key generation."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_BITS, HASH_NAME
from .hashing import validate_hash_name


class SchnorrSettings(BaseModel):
    bits: int = Field(default=DEFAULT_BITS, gt=0)
    hash_name: str = HASH_NAME

    @field_validator("hash_name")
    @classmethod
    def _check_hash_name(cls, value: str) -> str:
        return validate_hash_name(value)


__all__ = ["SchnorrSettings"]
