"""Generalized index arithmetic.

Generalized indices address nodes of an implicit complete binary tree in
which the whole-value root is 0 and the children of node ``i`` are
``2i + 1`` and ``2i + 2``. Every level ``d`` therefore spans the indices
``[2^d - 1, 2^(d+1) - 2]``.

Python integers are unbounded, so none of these functions can overflow;
indices of arbitrarily deep nesting stay exact.
"""


def _require_index(x: int) -> None:
    if x < 0:
        raise ValueError(f"generalized index must be non-negative, got {x}")


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n. ``next_power_of_two(0) == 1``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def log_base_two(p: int) -> int:
    """Exponent ``e`` such that ``2^e == p``."""
    if p <= 0 or p & (p - 1) != 0:
        raise ValueError(f"{p} is not a power of two")
    return p.bit_length() - 1


def depth(index: int) -> int:
    """Level of ``index`` below the whole-value root (the root is level 0)."""
    _require_index(index)
    return (index + 1).bit_length() - 1


def relative_depth(ancestor_index: int, index: int) -> int:
    """Number of levels separating ``index`` from ``ancestor_index``."""
    d = depth(index) - depth(ancestor_index)
    if d < 0:
        raise ValueError(f"{index} lies above {ancestor_index}")
    return d


def root_from_depth(index: int, depth: int) -> int:
    """Ancestor of ``index`` exactly ``depth`` levels above it."""
    _require_index(index)
    for _ in range(depth):
        if index == 0:
            raise ValueError("root node has no parent")
        index = (index - 1) // 2
    return index


def general_index_to_subtree(subtree_root: int, index: int) -> int:
    """Re-base ``index`` into the local numbering of the subtree at ``subtree_root``.

    The result uses the same convention with ``subtree_root`` mapped to 0.
    ``index`` must be a descendant of (or equal to) ``subtree_root``.
    """
    d = relative_depth(subtree_root, index)
    return index - subtree_root * (1 << d)


def subtree_to_general_index(subtree_root: int, index: int) -> int:
    """Inverse of :func:`general_index_to_subtree`."""
    return index + subtree_root * (1 << depth(index))
