"""merkle_partial: generalized-index overlays over SSZ merkle trees.

Answer "what is node N of type T's merkle tree?" without building the tree,
as a basis for partial merkle proofs.
"""

from .exceptions import (
    MerklePartialError,
    OverlayContractError,
    SSZDecodeError,
    UnknownFieldError,
    UnknownTypeError,
)
from .overlay import (
    BOOL,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINT128,
    UINT256,
    USIZE,
    Basic,
    BasicLeaf,
    BasicOverlay,
    Composite,
    ContainerOverlay,
    Intermediate,
    LengthLeaf,
    ListOverlay,
    MerkleTreeOverlay,
    Node,
    PaddingLeaf,
    Unattached,
    VectorOverlay,
    parse_type,
)

__version__ = "0.1.0"

__all__ = [
    "MerklePartialError",
    "OverlayContractError",
    "SSZDecodeError",
    "UnknownFieldError",
    "UnknownTypeError",
    "MerkleTreeOverlay",
    "BasicOverlay",
    "ListOverlay",
    "VectorOverlay",
    "ContainerOverlay",
    "BOOL",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT128",
    "UINT256",
    "USIZE",
    "Node",
    "Basic",
    "BasicLeaf",
    "Composite",
    "Intermediate",
    "LengthLeaf",
    "PaddingLeaf",
    "Unattached",
    "parse_type",
]
