"""Merkle tree overlays: generalized-index classification per SSZ type."""

from .base import MerkleTreeOverlay
from .basic import (
    BASIC_TYPES,
    BOOL,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINT128,
    UINT256,
    USIZE,
    BasicOverlay,
)
from .composite import CompositeOverlay, ContainerOverlay, ListOverlay, VectorOverlay
from .field import (
    Basic,
    BasicLeaf,
    Composite,
    Intermediate,
    Leaf,
    LengthLeaf,
    Node,
    PaddingLeaf,
    Unattached,
    replace_index,
)
from .registry import get_basic_overlay, parse_type, register_composite

__all__ = [
    "MerkleTreeOverlay",
    "BasicOverlay",
    "CompositeOverlay",
    "ListOverlay",
    "VectorOverlay",
    "ContainerOverlay",
    "BASIC_TYPES",
    "BOOL",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT128",
    "UINT256",
    "USIZE",
    "Basic",
    "BasicLeaf",
    "Composite",
    "Intermediate",
    "Leaf",
    "LengthLeaf",
    "Node",
    "PaddingLeaf",
    "Unattached",
    "replace_index",
    "get_basic_overlay",
    "parse_type",
    "register_composite",
]
