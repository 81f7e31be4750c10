#!/usr/bin/env python3
from __future__ import annotations

"""CLI entry point that dumps a seeded output stream as JSON."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from xorshift_rng.log_setup import LOG_LEVELS, setup_logging
from xorshift_rng.samplers import SAMPLE_KINDS, SampleRequest, draw_samples, seed_generator


logger = logging.getLogger(__name__)


def run(seed_words: List[int], seed64: Optional[int], request: SampleRequest) -> Dict[str, Any]:
    """Seed a fresh generator, draw the requested samples and report both states."""
    rng = seed_generator(seed_words, seed64)
    initial_state = list(rng.state)
    values = draw_samples(rng, request)
    logger.info("Drew %d %s sample(s)", len(values), request.kind)
    return {
        "seedWords": None if seed64 is not None else seed_words,
        "seed64": seed64,
        "initialState": initial_state,
        "kind": request.kind,
        "count": request.count,
        "values": values,
        "finalState": list(rng.state),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump a deterministic xorshift output stream.")
    parser.add_argument(
        "--seed",
        type=int,
        action="append",
        help="32-bit seed word; repeat up to three times (default: 12345).",
    )
    parser.add_argument("--seed64", type=int, help="64-bit seed; overrides --seed.")
    parser.add_argument("--kind", choices=SAMPLE_KINDS, default="bits")
    parser.add_argument("--count", type=int, default=5)
    parser.add_argument("--low", type=int, default=0, help="Lower bound for range kinds.")
    parser.add_argument(
        "--high", type=int, default=100, help="Upper bound (or byte count for --kind bytes)."
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    args = parser.parse_args()

    setup_logging(args.log_level)
    seed_words = args.seed or [12345]
    if len(seed_words) > 3:
        raise ValueError("At most three --seed words are supported")

    request = SampleRequest(kind=args.kind, count=args.count, low=args.low, high=args.high)
    output = run(seed_words, args.seed64, request)
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
