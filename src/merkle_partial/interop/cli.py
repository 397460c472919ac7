from __future__ import annotations

import argparse
import json
import logging
import sys

from ..exceptions import MerklePartialError
from ..overlay.registry import parse_type
from .test_vectors_runner import ingest_and_run_vectors

logger = logging.getLogger(__name__)


def _generalized_index(text: str) -> int:
    value = int(text, 0)
    if value < 0:
        raise argparse.ArgumentTypeError("generalized index must be non-negative")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="merkle-partial")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)
    shape = sub.add_parser("shape")
    shape.add_argument("type")  # e.g. "List[uint256, 8]"
    node = sub.add_parser("node")
    node.add_argument("type")
    node.add_argument("index", type=_generalized_index)
    vectors = sub.add_parser("vectors")
    vectors.add_argument("directory")  # directory of ssz_generic JSON files
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.cmd == "shape":
            overlay = parse_type(args.type)
            print(
                f"height={overlay.height()} "
                f"first_leaf={overlay.first_leaf()} last_leaf={overlay.last_leaf()}"
            )
            return 0
        if args.cmd == "node":
            overlay = parse_type(args.type)
            print(repr(overlay.get_node(args.index)))
            return 0
    except MerklePartialError as exc:
        logger.debug("query failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.cmd == "vectors":
        try:
            summary = ingest_and_run_vectors(args.directory)
        except OSError as exc:
            logger.debug("cannot read vectors", exc_info=True)
            print(f"error: {exc}", file=sys.stderr)
            return 2
        print(json.dumps(summary, sort_keys=True))
        return 1 if summary["failed"] else 0
    return 2
