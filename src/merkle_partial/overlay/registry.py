"""Build overlays from textual type descriptions.

Accepted grammar::

    type := <basic name> | List[type, N] | Vector[type, N]

Basic names are those of :data:`merkle_partial.overlay.basic.BASIC_TYPES`.
Further composite kinds can be added with :func:`register_composite`.
"""
from __future__ import annotations

import re
from typing import Callable

from ..exceptions import UnknownTypeError
from .base import MerkleTreeOverlay
from .basic import BASIC_TYPES, BasicOverlay
from .composite import ListOverlay, VectorOverlay

_BASIC_OVERLAYS: dict[str, BasicOverlay] = {t.name: t for t in BASIC_TYPES}
_COMPOSITE_FACTORIES: dict[str, Callable[[MerkleTreeOverlay, int], MerkleTreeOverlay]] = {
    "List": ListOverlay,
    "Vector": VectorOverlay,
}

_PARAMETERIZED_RE = re.compile(r"^(\w+)\s*\[(.*)\]$", re.DOTALL)
_CAPACITY_RE = re.compile(r"^\s*([0-9]+)\s*$")


def register_composite(
    kind: str, factory: Callable[[MerkleTreeOverlay, int], MerkleTreeOverlay]
) -> None:
    """Register a ``kind[element, N]`` constructor by its stable name."""
    _COMPOSITE_FACTORIES[kind] = factory


def get_basic_overlay(name: str) -> BasicOverlay:
    try:
        return _BASIC_OVERLAYS[name]
    except KeyError:
        raise UnknownTypeError(f"Unknown type: {name}") from None


def parse_type(text: str) -> MerkleTreeOverlay:
    """Resolve ``text`` (e.g. ``"List[List[uint256, 2], 4]"``) to an overlay."""
    text = text.strip()
    if text in _BASIC_OVERLAYS:
        return _BASIC_OVERLAYS[text]

    m = _PARAMETERIZED_RE.match(text)
    if m is None:
        raise UnknownTypeError(f"Unknown type: {text}")
    kind, params = m.group(1), m.group(2)
    factory = _COMPOSITE_FACTORIES.get(kind)
    if factory is None:
        raise UnknownTypeError(f"Unknown composite kind: {kind}")

    # The capacity is always the last parameter; the element may contain commas.
    element_text, sep, capacity_text = params.rpartition(",")
    capacity = _CAPACITY_RE.match(capacity_text)
    if not sep or capacity is None:
        raise UnknownTypeError(f"Malformed type parameters: {text}")
    return factory(parse_type(element_text), int(capacity.group(1)))
