"""Conformance vectors and command-line access to the overlays."""
