#!/usr/bin/env python3
from __future__ import annotations

"""Check two stream dumps (e.g. from different implementations) for bit-exact agreement."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from xorshift_rng.log_setup import LOG_LEVELS, setup_logging


logger = logging.getLogger(__name__)


def load_json(path: Path) -> Dict[str, Any]:
    """Read a JSON file and return the parsed dictionary."""
    with path.open() as f:
        return json.load(f)


def compare_values(lhs: List[Any], rhs: List[Any]) -> None:
    """Check every sample of two streams, stopping at the first difference.

    JSON round-trips doubles exactly, so floats are compared with ``==`` too.
    """
    if len(lhs) != len(rhs):
        raise AssertionError(f"values length mismatch: {len(lhs)} vs {len(rhs)}")
    for i, (lv, rv) in enumerate(zip(lhs, rhs)):
        if type(lv) is not type(rv) or lv != rv:
            raise AssertionError(f"values[{i}] mismatch: {lv!r} vs {rv!r}")


def compare_dumps(lhs: Dict[str, Any], rhs: Dict[str, Any]) -> None:
    for field in ("kind", "count", "initialState"):
        if lhs.get(field) != rhs.get(field):
            raise AssertionError(f"{field} mismatch: {lhs.get(field)} vs {rhs.get(field)}")
    compare_values(lhs.get("values", []), rhs.get("values", []))
    logger.info("Compared %d value(s) of kind %s", len(lhs.get("values", [])), lhs.get("kind"))


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare two xorshift stream dumps.")
    parser.add_argument("--lhs", required=True, help="Path to the first JSON dump.")
    parser.add_argument("--rhs", required=True, help="Path to the second JSON dump.")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    args = parser.parse_args()

    setup_logging(args.log_level)
    compare_dumps(load_json(Path(args.lhs)), load_json(Path(args.rhs)))

    print("Streams match for all compared fields.")


if __name__ == "__main__":
    main()
