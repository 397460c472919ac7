"""Contract implemented by every merkle tree overlay."""
from __future__ import annotations

from typing import Protocol

from .field import Node


class MerkleTreeOverlay(Protocol):
    """Maps generalized indices of a type's merkle tree to node classifications.

    Overlays answer from the type alone: no value is needed and no tree is
    built. ``get_node`` is total; an index with no node for the type yields
    ``Unattached`` rather than an error.
    """

    @property
    def type_name(self) -> str: ...

    def height(self) -> int: ...
    def first_leaf(self) -> int: ...
    def last_leaf(self) -> int: ...
    def get_node(self, index: int) -> Node: ...
