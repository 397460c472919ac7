import unittest

from merkle_partial.overlay.field import (
    Basic,
    BasicLeaf,
    Composite,
    Intermediate,
    LengthLeaf,
    PaddingLeaf,
    Unattached,
    replace_index,
)


class TestUnitField(unittest.TestCase):
    def test_replace_index_every_variant(self):
        self.assertEqual(replace_index(Composite("3", 4, 2), 40), Composite("3", 40, 2))
        self.assertEqual(replace_index(Intermediate(1), 9), Intermediate(9))
        self.assertEqual(replace_index(Unattached(5), 45), Unattached(45))
        self.assertEqual(replace_index(PaddingLeaf(6), 60), PaddingLeaf(60))
        self.assertEqual(
            replace_index(LengthLeaf(Basic("len", 2, 32, 0)), 22),
            LengthLeaf(Basic("len", 22, 32, 0)),
        )

    def test_replace_index_keeps_packed_descriptors(self):
        leaf = BasicLeaf((Basic("4", 3, 8, 0), Basic("5", 3, 8, 8)))
        moved = replace_index(leaf, 11)
        self.assertEqual(moved, BasicLeaf((Basic("4", 11, 8, 0), Basic("5", 11, 8, 8))))
        # The original snapshot is untouched.
        self.assertEqual(leaf.index, 3)
        self.assertEqual(moved.index, 11)

    def test_replace_index_rejects_unknown(self):
        with self.assertRaises(TypeError):
            replace_index(object(), 1)  # type: ignore[arg-type]

    def test_nodes_are_immutable(self):
        node = Composite("", 0, 3)
        with self.assertRaises(AttributeError):
            node.index = 1  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
