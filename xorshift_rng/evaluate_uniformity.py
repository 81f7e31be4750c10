#!/usr/bin/env python3
from __future__ import annotations

"""Batch runner that measures output uniformity over a range of seeds."""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, List

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from xorshift_rng.generator import XorShiftRNG
from xorshift_rng.log_setup import LOG_LEVELS, setup_logging
from xorshift_rng.uniformity import UniformityConfig, measure_uniformity


logger = logging.getLogger(__name__)


def evaluate_seed(seed: int, config: UniformityConfig) -> Dict[str, Any]:
    """Measure one seed and attach its runtime."""
    rng = XorShiftRNG(seed)
    start = time.perf_counter()
    report = measure_uniformity(rng, config)
    elapsed = (time.perf_counter() - start) * 1000.0
    return {"seed": seed, **report, "runtimeMs": elapsed}


def evaluate_seeds(base_seed: int, seed_count: int, config: UniformityConfig) -> List[Dict[str, Any]]:
    results: List[Dict[str, Any]] = []
    for idx in range(seed_count):
        entry = evaluate_seed(base_seed + idx, config)
        logger.info(
            "seed=%d chiSquare=%.3f mean=%.5f runtimeMs=%.1f",
            entry["seed"],
            entry["chiSquare"],
            entry["mean"],
            entry["runtimeMs"],
        )
        results.append(entry)
    return results


def main() -> None:
    parser = argparse.ArgumentParser(description="Measure xorshift uniformity across seeds.")
    parser.add_argument("--seed", type=int, default=12345, help="First seed of the batch.")
    parser.add_argument("--seeds", type=int, default=8, help="Number of consecutive seeds.")
    parser.add_argument("--samples", type=int, default=10000)
    parser.add_argument("--buckets", type=int, default=16)
    parser.add_argument("--output", required=True, help="Path to write JSON summary.")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    args = parser.parse_args()

    setup_logging(args.log_level)
    if args.seeds < 1:
        raise ValueError("--seeds must be at least 1")

    config = UniformityConfig(sampleCount=args.samples, bucketCount=args.buckets)
    results = evaluate_seeds(args.seed, args.seeds, config)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w") as f:
        json.dump(results, f, indent=2)

    print(f"Wrote uniformity summary for {len(results)} seeds to {output_path}")


if __name__ == "__main__":
    main()
