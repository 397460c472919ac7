import contextlib
import io
import json
import os
import tempfile
import unittest

from merkle_partial.interop.cli import main


def run(argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue().strip(), err.getvalue()


class TestInteropCLI(unittest.TestCase):
    def test_shape(self):
        code, out, _ = run(["shape", "List[uint256, 8]"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "height=4 first_leaf=15 last_leaf=22")

    def test_node(self):
        code, out, _ = run(["node", "List[List[List[uint256, 2], 2], 4]", "32"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "Composite(ident='1', index=32, height=2)")
        code, out, _ = run(["node", "List[uint256, 8]", "23"])
        self.assertEqual(out, "Unattached(index=23)")

    def test_unknown_type(self):
        code, _, err = run(["node", "List[uint7, 8]", "1"])
        self.assertEqual(code, 2)
        self.assertIn("uint7", err)

    def test_vectors_missing_directory(self):
        with tempfile.TemporaryDirectory() as d:
            missing = os.path.join(d, "absent")
            code, out, err = run(["vectors", missing])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("error: "))
        self.assertIn("absent", err)

    def test_vectors(self):
        with tempfile.TemporaryDirectory() as d:
            with open(os.path.join(d, "v.json"), "w", encoding="utf-8") as f:
                json.dump(
                    {
                        "type": "ssz_generic",
                        "test_cases": [
                            {"type": "uint8", "valid": True, "value": "1", "ssz": "0x01"},
                            {"type": "uint8", "valid": True, "value": "2", "ssz": "0x01"},
                        ],
                    },
                    f,
                )
            code, out, _ = run(["vectors", d])
        self.assertEqual(code, 1)
        self.assertEqual(json.loads(out), {"failed": 1, "passed": 1, "skipped": 0, "total": 2})


if __name__ == "__main__":
    unittest.main()
