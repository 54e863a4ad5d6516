"""A pointer to a block in the chain."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_BLOCK_HASH_RE = re.compile(r"^0x[0-9a-f]{64}$")


class BlockPointer(BaseModel):
    """Block at which a query was executed.

    Ordering is by ``number``, then ``hash``.
    """

    number: int = Field(..., ge=0)
    hash: str

    model_config = ConfigDict(frozen=True)

    @field_validator("hash", mode="before")
    @classmethod
    def validate_hash(cls, v: Any) -> str:
        """Normalize the block hash to a lowercase 32-byte 0x-prefixed hex string."""
        if isinstance(v, (bytes, bytearray)):
            if len(v) != 32:
                raise ValueError("block hash must be 32 bytes long")
            return "0x" + bytes(v).hex()
        if not isinstance(v, str):
            raise ValueError("block hash must be a hex string")
        value = v.lower()
        if not value.startswith("0x"):
            value = "0x" + value
        if not _BLOCK_HASH_RE.match(value):
            raise ValueError(f"invalid block hash: {v!r}")
        return value

    def _key(self) -> tuple[int, str]:
        return (self.number, self.hash)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BlockPointer):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BlockPointer):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BlockPointer):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BlockPointer):
            return NotImplemented
        return self._key() >= other._key()

    def __str__(self) -> str:
        return f"#{self.number} ({self.hash})"


class Meta(BaseModel):
    """The ``_meta`` selection of a subgraph response."""

    block: BlockPointer

    model_config = ConfigDict(frozen=True)
