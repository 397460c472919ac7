"""Overlays for composite SSZ types: lists, vectors and containers.

The full specification of the merkle tree structure can be found in the SSZ
documentation:
https://github.com/ethereum/consensus-specs/blob/dev/ssz/simple-serialize.md#merkleization

A variable-length list mixes its length in next to the data root::

                root(0)
              /         \\
         data_root(1)  len(2)
           /   \\
         . . . . .  <= intermediate nodes
         / \\   / \\
        x   x x   x <= leaf nodes

Vectors and containers have no length branch: their root is the data root.

Indices that fall below a data leaf belong to the element stored there and
are answered by the element's own overlay, after translating the index
into the element's local numbering.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from ..constants import BYTES_PER_CHUNK, LENGTH_IDENT, LENGTH_LEAF_SIZE
from ..exceptions import OverlayContractError, UnknownFieldError
from .base import MerkleTreeOverlay
from .field import (
    Basic,
    BasicLeaf,
    Composite,
    Intermediate,
    LengthLeaf,
    Node,
    PaddingLeaf,
    Unattached,
    replace_index,
)
from .tree_math import (
    general_index_to_subtree,
    log_base_two,
    next_power_of_two,
    relative_depth,
    root_from_depth,
)


def _element_root(element: MerkleTreeOverlay) -> Node:
    root = element.get_node(0)
    if isinstance(root, (BasicLeaf, Composite)):
        return root
    # A composite whose data fits one chunk (or none) is rooted at that chunk.
    if isinstance(element, CompositeOverlay) and isinstance(root, PaddingLeaf):
        return root
    raise OverlayContractError(
        f"{element.type_name}: element root must be a basic leaf or a composite, "
        f"got {type(root).__name__}"
    )


def _packed_size(element: MerkleTreeOverlay) -> Optional[int]:
    """Byte size of ``element`` if it packs into chunks, None if it takes whole chunks."""
    root = _element_root(element)
    if isinstance(root, BasicLeaf) and not isinstance(element, CompositeOverlay):
        return root.values[0].size
    return None


def _embedded_root(element: MerkleTreeOverlay, ident: str, index: int) -> Node:
    """Root of a chunk-sized ``element`` placed at ``index`` of its parent."""
    root = _element_root(element)
    if isinstance(root, Composite):
        return Composite(ident=ident, index=index, height=root.height)
    # Single-chunk composite: its root is its data leaf.
    return replace_index(root, index)


class CompositeOverlay(ABC):
    """Shared leaf classification and index delegation for composite types.

    Subclasses describe how many chunks their data occupies and what sits in
    each chunk; this class turns that into the leaf range of the data subtree
    and answers indices that lie below the leaves.
    """

    @property
    @abstractmethod
    def type_name(self) -> str: ...

    @abstractmethod
    def chunk_count(self) -> int:
        """Number of leaf chunks actually backed by data."""

    @abstractmethod
    def height(self) -> int: ...

    @abstractmethod
    def get_node(self, index: int) -> Node: ...

    @abstractmethod
    def _chunk_node(self, position: int, index: int) -> Node:
        """Node for the occupied chunk at ``position``, placed at ``index``."""

    @abstractmethod
    def _chunk_overlay(self, position: int) -> MerkleTreeOverlay:
        """Overlay of the value rooted at chunk ``position``."""

    def data_height(self) -> int:
        return log_base_two(next_power_of_two(self.chunk_count()))

    def first_leaf(self) -> int:
        return (1 << self.height()) - 1

    def last_leaf(self) -> int:
        return self.first_leaf() + (1 << self.data_height()) - 1

    def _root_node(self) -> Node:
        if self.data_height() == 0:
            # The single data chunk is the root itself.
            return self._leaf_node(0)
        return Composite(ident="", index=0, height=self.height())

    def _leaf_node(self, index: int) -> Node:
        position = index - self.first_leaf()
        if position >= self.chunk_count():
            return PaddingLeaf(index)
        return self._chunk_node(position, index)

    def _descendant_node(self, index: int) -> Node:
        # `index` is either below one of our data leaves or not attached at all.
        first_leaf = self.first_leaf()
        subtree_root = root_from_depth(index, relative_depth(first_leaf, index))
        if not first_leaf <= subtree_root <= self.last_leaf():
            return Unattached(index)

        position = subtree_root - first_leaf
        if position >= self.chunk_count():
            # Padding chunks have no children.
            return Unattached(index)

        subtree_index = general_index_to_subtree(subtree_root, index)
        return replace_index(self._chunk_overlay(position).get_node(subtree_index), index)


class _HomogeneousOverlay(CompositeOverlay):
    """Lists and vectors: ``capacity`` elements of one type, basic ones packed."""

    element: MerkleTreeOverlay
    capacity: int

    def _check_capacity(self) -> None:
        if self.capacity < 0:
            raise ValueError("capacity must be non-negative")

    def chunk_count(self) -> int:
        size = _packed_size(self.element)
        if size is not None:
            return (self.capacity * size + BYTES_PER_CHUNK - 1) // BYTES_PER_CHUNK
        return self.capacity

    def _chunk_node(self, position: int, index: int) -> Node:
        item_size = _packed_size(self.element)
        if item_size is not None:
            items_per_chunk = BYTES_PER_CHUNK // item_size
            first_item = position * items_per_chunk
            return BasicLeaf(
                tuple(
                    Basic(
                        ident=str(first_item + i),
                        index=index,
                        size=item_size,
                        offset=i * item_size,
                    )
                    for i in range(items_per_chunk)
                    if first_item + i < self.capacity
                )
            )
        return _embedded_root(self.element, str(position), index)

    def _chunk_overlay(self, position: int) -> MerkleTreeOverlay:
        return self.element


@dataclass(frozen=True)
class ListOverlay(_HomogeneousOverlay):
    """``List[T, N]``: up to ``capacity`` elements plus a length leaf."""

    element: MerkleTreeOverlay
    capacity: int

    def __post_init__(self) -> None:
        self._check_capacity()

    @property
    def type_name(self) -> str:
        return f"List[{self.element.type_name}, {self.capacity}]"

    def height(self) -> int:
        # Add one to account for the data root and the length of the list.
        return self.data_height() + 1

    def last_leaf(self) -> int:
        # last_leaf = 2^h + (2^h / 2) - 2
        #
        # The data tree only occupies the left side of the full tree; leaves
        # further right are below the length node and are unattached.
        h = self.height()
        return (1 << h) + (1 << (h - 1)) - 2

    def get_node(self, index: int) -> Node:
        first_internal = 3
        last_internal = (1 << self.height()) - 2
        first_leaf = self.first_leaf()
        last_leaf = self.last_leaf()

        if index == 0:
            return Composite(ident="", index=0, height=self.height())
        if index == 1 and self.data_height() > 0:
            return Intermediate(index)
        if index == 2:
            return LengthLeaf(Basic(ident=LENGTH_IDENT, index=index, size=LENGTH_LEAF_SIZE, offset=0))
        if first_internal <= index <= last_internal:
            return Intermediate(index)
        if first_leaf <= index <= last_leaf:
            return self._leaf_node(index)
        return self._descendant_node(index)


@dataclass(frozen=True)
class VectorOverlay(_HomogeneousOverlay):
    """``Vector[T, N]``: exactly ``capacity`` elements, no length leaf."""

    element: MerkleTreeOverlay
    capacity: int

    def __post_init__(self) -> None:
        self._check_capacity()

    @property
    def type_name(self) -> str:
        return f"Vector[{self.element.type_name}, {self.capacity}]"

    def height(self) -> int:
        return self.data_height()

    def get_node(self, index: int) -> Node:
        first_leaf = self.first_leaf()
        if index == 0:
            return self._root_node()
        if 1 <= index < first_leaf:
            return Intermediate(index)
        if first_leaf <= index <= self.last_leaf():
            return self._leaf_node(index)
        return self._descendant_node(index)


@dataclass(frozen=True)
class ContainerOverlay(CompositeOverlay):
    """A record of named fields, each stored in its own chunk (no packing)."""

    name: str
    fields: Sequence[tuple[str, MerkleTreeOverlay]]

    def __post_init__(self) -> None:
        fields = tuple((str(ident), overlay) for ident, overlay in self.fields)
        names = [ident for ident, _ in fields]
        if len(set(names)) != len(names):
            raise OverlayContractError(f"{self.name}: duplicate field names")
        object.__setattr__(self, "fields", fields)

    @property
    def type_name(self) -> str:
        return self.name

    def chunk_count(self) -> int:
        return len(self.fields)

    def height(self) -> int:
        return self.data_height()

    def field_index(self, name: str) -> int:
        """Generalized index of the root of field ``name``."""
        position = self._field_position(name)
        if position is None:
            raise UnknownFieldError(f"{self.name} has no field {name!r}")
        return self.first_leaf() + position

    def _field_position(self, name: str) -> Optional[int]:
        for position, (ident, _) in enumerate(self.fields):
            if ident == name:
                return position
        return None

    def get_node(self, index: int) -> Node:
        first_leaf = self.first_leaf()
        if index == 0:
            return self._root_node()
        if 1 <= index < first_leaf:
            return Intermediate(index)
        if first_leaf <= index <= self.last_leaf():
            return self._leaf_node(index)
        return self._descendant_node(index)

    def _chunk_node(self, position: int, index: int) -> Node:
        ident, overlay = self.fields[position]
        size = _packed_size(overlay)
        if size is not None:
            return BasicLeaf((Basic(ident=ident, index=index, size=size, offset=0),))
        return _embedded_root(overlay, ident, index)

    def _chunk_overlay(self, position: int) -> MerkleTreeOverlay:
        return self.fields[position][1]
