from __future__ import annotations

"""Quick statistical smoke checks on a generator's output stream."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from xorshift_rng.generator import XorShiftRNG


logger = logging.getLogger(__name__)

WORD_BITS = 32


@dataclass
class UniformityConfig:
    sampleCount: int = 10000
    bucketCount: int = 16


def _chi_square(buckets: List[int], expected: float) -> float:
    return sum((observed - expected) ** 2 / expected for observed in buckets)


def measure_uniformity(rng: XorShiftRNG, config: UniformityConfig) -> Dict[str, Any]:
    """Histogram doubles, count set bits per position and tally bools.

    Consumes ``3 * sampleCount`` raw words from ``rng``.
    """
    if config.sampleCount < 1 or config.bucketCount < 1:
        raise ValueError("sampleCount and bucketCount must both be at least 1")

    buckets = [0] * config.bucketCount
    total = 0.0
    for _ in range(config.sampleCount):
        value = rng.next_double()
        total += value
        buckets[int(value * config.bucketCount)] += 1

    ones = [0] * WORD_BITS
    for _ in range(config.sampleCount):
        word = rng.next_random_bits()
        for bit in range(WORD_BITS):
            ones[bit] += (word >> bit) & 1

    trues = sum(1 for _ in range(config.sampleCount) if rng.next_bool())

    expected = config.sampleCount / config.bucketCount
    report = {
        "sampleCount": config.sampleCount,
        "bucketCount": config.bucketCount,
        "buckets": buckets,
        "chiSquare": _chi_square(buckets, expected),
        "degreesOfFreedom": config.bucketCount - 1,
        "mean": total / config.sampleCount,
        "bitBalance": [count / config.sampleCount for count in ones],
        "boolTrueRatio": trues / config.sampleCount,
    }
    logger.debug(
        "chiSquare=%.3f (dof=%d) mean=%.5f",
        report["chiSquare"],
        report["degreesOfFreedom"],
        report["mean"],
    )
    return report
