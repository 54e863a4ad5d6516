"""Block constraint of a subgraph query.

Architecture:
    ``BlockHeight`` mirrors graph-node's ``Block_height`` input object. It is
    a tagged variant: at most one of ``hash``, ``number`` or ``number_gte`` is
    set, or none for the latest block.

Examples:
    >>> BlockHeight.latest().to_variables()
    {}
    >>> BlockHeight.number_gte(100).to_variables()
    {'number_gte': 100}
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .block_pointer import BlockPointer


class BlockHeightKind(str, Enum):
    """Which field of the ``Block_height`` input object is set."""

    LATEST = "latest"
    HASH = "hash"
    NUMBER = "number"
    NUMBER_GTE = "number_gte"


@dataclass(frozen=True)
class BlockHeight:
    """The block at which a query should be executed.

    Attributes:
        kind: Variant tag
        value: Block hash for ``HASH``, block number for ``NUMBER`` and
            ``NUMBER_GTE``, ``None`` for ``LATEST``
    """

    kind: BlockHeightKind = BlockHeightKind.LATEST
    value: int | str | None = None

    def __post_init__(self) -> None:
        """Validate the variant payload."""
        if self.kind == BlockHeightKind.LATEST:
            if self.value is not None:
                raise ValueError("BlockHeight LATEST cannot carry a value")
        elif self.kind == BlockHeightKind.HASH:
            if not isinstance(self.value, str) or not self.value:
                raise ValueError("BlockHeight HASH requires a block hash")
        else:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise ValueError(f"BlockHeight {self.kind.value.upper()} requires a block number")
            if self.value < 0:
                raise ValueError("block number must be >= 0")

    @classmethod
    def latest(cls) -> BlockHeight:
        return cls()

    @classmethod
    def of_hash(cls, block_hash: str) -> BlockHeight:
        return cls(BlockHeightKind.HASH, block_hash)

    @classmethod
    def of_number(cls, number: int) -> BlockHeight:
        return cls(BlockHeightKind.NUMBER, number)

    @classmethod
    def number_gte(cls, number: int) -> BlockHeight:
        return cls(BlockHeightKind.NUMBER_GTE, number)

    @classmethod
    def of_block(cls, block: BlockPointer) -> BlockHeight:
        """Pin a query to the exact block of a previous response."""
        return cls.of_hash(block.hash)

    def to_variables(self) -> dict[str, Any]:
        """Serialize as a GraphQL ``Block_height`` input object."""
        if self.kind == BlockHeightKind.LATEST:
            return {}
        return {self.kind.value: self.value}
