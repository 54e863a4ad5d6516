"""Data models for subgraph queries.

All pydantic models are immutable (frozen=True). ``BlockHeight`` is a frozen
dataclass since it is only ever serialized, never parsed.
"""

from .block_height import BlockHeight, BlockHeightKind
from .block_pointer import BlockPointer, Meta

__all__ = [
    "BlockHeight",
    "BlockHeightKind",
    "BlockPointer",
    "Meta",
]
