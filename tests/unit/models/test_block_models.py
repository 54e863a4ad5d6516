"""Unit tests for BlockPointer and BlockHeight."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from thegraph.subgraphs.models import BlockHeight, BlockHeightKind, BlockPointer

HASH_A = "0x" + "ab" * 32
HASH_B = "0x" + "cd" * 32


class TestBlockPointer:
    """Test BlockPointer validation and ordering."""

    def test_from_graph_node_json(self):
        block = BlockPointer.model_validate({"number": 18627000, "hash": "0x" + "AB" * 32})

        assert block.number == 18627000
        assert block.hash == HASH_A

    def test_hash_without_prefix(self):
        assert BlockPointer(number=1, hash="ab" * 32).hash == HASH_A

    def test_hash_from_bytes(self):
        assert BlockPointer(number=1, hash=bytes.fromhex("ab" * 32)).hash == HASH_A

    @pytest.mark.parametrize("value", ["0x1234", "0x" + "zz" * 32, b"\x00" * 31, 12])
    def test_invalid_hash(self, value):
        with pytest.raises(ValidationError):
            BlockPointer(number=1, hash=value)

    def test_negative_number(self):
        with pytest.raises(ValidationError):
            BlockPointer(number=-1, hash=HASH_A)

    def test_ordering_by_number(self):
        low = BlockPointer(number=1, hash=HASH_B)
        high = BlockPointer(number=2, hash=HASH_A)

        assert low < high
        assert max([high, low]) == high
        assert sorted([high, low]) == [low, high]

    def test_frozen(self):
        block = BlockPointer(number=1, hash=HASH_A)
        with pytest.raises(ValidationError):
            block.number = 2


class TestBlockHeight:
    """Test BlockHeight variants and their serialization."""

    def test_latest(self):
        assert BlockHeight.latest().to_variables() == {}
        assert BlockHeight() == BlockHeight.latest()

    def test_hash(self):
        assert BlockHeight.of_hash(HASH_A).to_variables() == {"hash": HASH_A}

    def test_number(self):
        assert BlockHeight.of_number(10).to_variables() == {"number": 10}

    def test_number_gte(self):
        height = BlockHeight.number_gte(100)

        assert height.kind == BlockHeightKind.NUMBER_GTE
        assert height.to_variables() == {"number_gte": 100}

    def test_of_block(self):
        block = BlockPointer(number=5, hash=HASH_B)

        assert BlockHeight.of_block(block) == BlockHeight.of_hash(HASH_B)

    @pytest.mark.parametrize(
        "kind,value",
        [
            (BlockHeightKind.LATEST, 1),
            (BlockHeightKind.HASH, None),
            (BlockHeightKind.NUMBER, "10"),
            (BlockHeightKind.NUMBER_GTE, -1),
            (BlockHeightKind.NUMBER, True),
        ],
    )
    def test_invalid_payload(self, kind, value):
        with pytest.raises(ValueError):
            BlockHeight(kind, value)
