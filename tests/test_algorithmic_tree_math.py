import unittest

from merkle_partial.overlay.tree_math import (
    depth,
    general_index_to_subtree,
    log_base_two,
    next_power_of_two,
    relative_depth,
    root_from_depth,
    subtree_to_general_index,
)


class TestAlgorithmicTreeMath(unittest.TestCase):
    def test_next_power_of_two(self):
        self.assertEqual(next_power_of_two(0), 1)
        self.assertEqual(next_power_of_two(1), 1)
        self.assertEqual(next_power_of_two(2), 2)
        self.assertEqual(next_power_of_two(3), 4)
        self.assertEqual(next_power_of_two(8), 8)
        self.assertEqual(next_power_of_two(9), 16)
        self.assertEqual(next_power_of_two(2**40 + 1), 2**41)

    def test_log_base_two(self):
        for exp in range(0, 70):
            self.assertEqual(log_base_two(1 << exp), exp)
        for bad in (0, 3, 6, 12):
            with self.assertRaises(ValueError):
                log_base_two(bad)

    def test_depth(self):
        self.assertEqual(depth(0), 0)
        self.assertEqual(depth(1), 1)
        self.assertEqual(depth(2), 1)
        self.assertEqual(depth(3), 2)
        self.assertEqual(depth(6), 2)
        self.assertEqual(depth(7), 3)
        self.assertEqual(depth(14), 3)
        with self.assertRaises(ValueError):
            depth(-1)

    def test_relative_depth(self):
        self.assertEqual(relative_depth(7, 7), 0)
        self.assertEqual(relative_depth(7, 32), 2)
        self.assertEqual(relative_depth(15, 22), 0)
        self.assertEqual(relative_depth(7, 176), 4)
        with self.assertRaises(ValueError):
            relative_depth(15, 3)

    def test_root_from_depth(self):
        self.assertEqual(root_from_depth(32, 0), 32)
        self.assertEqual(root_from_depth(32, 2), 7)
        self.assertEqual(root_from_depth(176, 4), 10)
        self.assertEqual(root_from_depth(177, 4), 10)
        self.assertEqual(root_from_depth(45, 2), 10)
        with self.assertRaises(ValueError):
            root_from_depth(2, 2)

    def test_general_index_to_subtree(self):
        self.assertEqual(general_index_to_subtree(7, 7), 0)
        self.assertEqual(general_index_to_subtree(7, 15), 1)
        self.assertEqual(general_index_to_subtree(7, 16), 2)
        self.assertEqual(general_index_to_subtree(7, 32), 4)
        self.assertEqual(general_index_to_subtree(10, 176), 16)
        self.assertEqual(general_index_to_subtree(3, 16), 4)

    def test_subtree_translation_is_a_bijection(self):
        for subtree_root in (0, 1, 5, 10, 22):
            seen = set()
            for local in range(0, 63):
                general = subtree_to_general_index(subtree_root, local)
                self.assertEqual(root_from_depth(general, depth(local)), subtree_root)
                self.assertEqual(general_index_to_subtree(subtree_root, general), local)
                seen.add(general)
            self.assertEqual(len(seen), 63)


if __name__ == "__main__":
    unittest.main()
