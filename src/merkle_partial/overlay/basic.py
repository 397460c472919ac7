"""Overlays for fixed-width scalar ("basic") types."""
from __future__ import annotations

from dataclasses import dataclass

from ..constants import USIZE_BITS
from .field import Basic, BasicLeaf, Node, Unattached


@dataclass(frozen=True)
class BasicOverlay:
    """A scalar occupies a single leaf and has no sub-structure."""

    name: str
    bit_width: int

    @property
    def type_name(self) -> str:
        return self.name

    @property
    def byte_size(self) -> int:
        return self.bit_width // 8

    def height(self) -> int:
        return 0

    def first_leaf(self) -> int:
        return 0

    def last_leaf(self) -> int:
        return 0

    def get_node(self, index: int) -> Node:
        if index == 0:
            return BasicLeaf((Basic(ident="", index=index, size=self.byte_size, offset=0),))
        return Unattached(index)


BOOL = BasicOverlay("bool", 8)
UINT8 = BasicOverlay("uint8", 8)
UINT16 = BasicOverlay("uint16", 16)
UINT32 = BasicOverlay("uint32", 32)
UINT64 = BasicOverlay("uint64", 64)
UINT128 = BasicOverlay("uint128", 128)
UINT256 = BasicOverlay("uint256", 256)
USIZE = BasicOverlay("usize", USIZE_BITS)

BASIC_TYPES: tuple[BasicOverlay, ...] = (BOOL, UINT8, UINT16, UINT32, UINT64, UINT128, UINT256, USIZE)
