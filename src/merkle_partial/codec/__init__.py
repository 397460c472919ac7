"""SSZ scalar encoding used by the conformance harness."""
