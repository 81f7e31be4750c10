"""Seedable xorshift pseudo-random generator and its reproducibility tooling."""

from .generator import XorShiftRNG, RangeInversionError, INITIAL_STATE
from .samplers import SampleRequest, SAMPLE_KINDS, draw_samples, seed_generator
from .uniformity import UniformityConfig, measure_uniformity

__all__ = [
    "XorShiftRNG",
    "RangeInversionError",
    "INITIAL_STATE",
    "SampleRequest",
    "SAMPLE_KINDS",
    "draw_samples",
    "seed_generator",
    "UniformityConfig",
    "measure_uniformity",
]
