"""Node model returned by merkle tree overlays.

Every node is an immutable snapshot; overlays build a fresh value for each
query and callers never mutate a live tree.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Basic:
    """A scalar value packed into a leaf chunk.

    - ident: field name, or the flattened element position as text.
    - index: generalized index of the enclosing leaf.
    - size: byte width of the value (never more than one chunk).
    - offset: byte offset of the value inside its chunk.
    """

    ident: str
    index: int
    size: int
    offset: int


class Node:
    """Base class of every node classification."""

    index: int


class Leaf(Node):
    """Base class of the leaf variants."""


@dataclass(frozen=True)
class Composite(Node):
    """Root of a composite type's subtree; ``height`` is the depth of its data."""

    ident: str
    index: int
    height: int


@dataclass(frozen=True)
class Intermediate(Node):
    index: int


@dataclass(frozen=True)
class Unattached(Node):
    """No node exists at ``index`` for the queried type."""

    index: int


@dataclass(frozen=True)
class BasicLeaf(Leaf):
    """Data leaf holding one or more packed scalars."""

    values: tuple[Basic, ...]

    @property
    def index(self) -> int:  # type: ignore[override]
        return self.values[0].index


@dataclass(frozen=True)
class LengthLeaf(Leaf):
    """Leaf mixing in the element count of a variable-length list."""

    value: Basic

    @property
    def index(self) -> int:  # type: ignore[override]
        return self.value.index


@dataclass(frozen=True)
class PaddingLeaf(Leaf):
    """Zero-filled leaf slot with no data behind it."""

    index: int


def replace_index(node: Node, index: int) -> Node:
    """Return a copy of ``node`` with all of its index values changed to ``index``."""
    if isinstance(node, BasicLeaf):
        return BasicLeaf(tuple(replace(b, index=index) for b in node.values))
    if isinstance(node, LengthLeaf):
        return LengthLeaf(replace(node.value, index=index))
    if isinstance(node, (Composite, Intermediate, Unattached, PaddingLeaf)):
        return replace(node, index=index)
    raise TypeError(f"unknown node type: {type(node).__name__}")
