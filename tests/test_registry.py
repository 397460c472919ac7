import unittest

from merkle_partial.exceptions import UnknownTypeError
from merkle_partial.overlay.basic import UINT8, UINT256, USIZE
from merkle_partial.overlay.composite import ListOverlay, VectorOverlay
from merkle_partial.overlay.field import Composite
from merkle_partial.overlay import registry
from merkle_partial.overlay.registry import get_basic_overlay, parse_type, register_composite


class TestRegistry(unittest.TestCase):
    def test_basic_names(self):
        self.assertIs(get_basic_overlay("uint8"), UINT8)
        self.assertIs(get_basic_overlay("usize"), USIZE)
        with self.assertRaises(UnknownTypeError):
            get_basic_overlay("uint7")

    def test_parse_nested(self):
        t = parse_type("List[List[List[uint256, 2], 2], 4]")
        self.assertEqual(t, ListOverlay(ListOverlay(ListOverlay(UINT256, 2), 2), 4))
        self.assertEqual(t.get_node(32), Composite("1", 32, 2))

    def test_parse_vector_and_whitespace(self):
        self.assertEqual(parse_type("  Vector[ uint8 ,16 ] "), VectorOverlay(UINT8, 16))

    def test_type_name_round_trip(self):
        text = "Vector[List[uint64, 8], 3]"
        self.assertEqual(parse_type(text).type_name, text)

    def test_malformed(self):
        for text in ("", "uint", "List[uint8]", "List[uint8, x]", "Set[uint8, 2]", "List[uint8, 2"):
            with self.assertRaises(UnknownTypeError, msg=text):
                parse_type(text)

    def test_capacity_must_be_ascii_digits(self):
        for text in ("List[uint8, \u00b2]", "Vector[uint8, \u0663]", "List[uint8, -1]", "List[uint8, 1_0]"):
            with self.assertRaises(UnknownTypeError, msg=text):
                parse_type(text)

    def test_register_composite(self):
        register_composite("Bitlist", ListOverlay)
        self.addCleanup(registry._COMPOSITE_FACTORIES.pop, "Bitlist")
        self.assertEqual(parse_type("Bitlist[bool, 8]").type_name, "List[bool, 8]")


if __name__ == "__main__":
    unittest.main()
