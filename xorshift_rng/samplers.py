from __future__ import annotations

"""Named sampling recipes so every derived operation can be dumped and compared."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from xorshift_rng.generator import XorShiftRNG


@dataclass
class SampleRequest:
    kind: str
    count: int
    low: int = 0
    high: int = 100


def _draw_bytes(rng: XorShiftRNG, request: SampleRequest) -> str:
    return rng.random_bytes(request.high).hex()


Sampler = Callable[[XorShiftRNG, SampleRequest], Any]

SAMPLERS: Dict[str, Sampler] = {
    "bits": lambda rng, req: rng.next_random_bits(),
    "int": lambda rng, req: rng.next_int(),
    "int_max": lambda rng, req: rng.next_int(req.high),
    "range_int": lambda rng, req: rng.range_int(req.low, req.high),
    "double": lambda rng, req: rng.next_double(),
    "range_float": lambda rng, req: rng.range_float(float(req.low), float(req.high)),
    "bool": lambda rng, req: rng.next_bool(),
    "bytes": _draw_bytes,
}

SAMPLE_KINDS = tuple(SAMPLERS)


def draw_samples(rng: XorShiftRNG, request: SampleRequest) -> List[Any]:
    """Call the operation named by ``request.kind`` ``request.count`` times."""
    sampler = SAMPLERS.get(request.kind)
    if sampler is None:
        raise ValueError(f"Unknown sample kind {request.kind!r}; expected one of {SAMPLE_KINDS}")
    if request.count < 0:
        raise ValueError("Sample count must not be negative")
    return [sampler(rng, request) for _ in range(request.count)]


def seed_generator(seed_words: Sequence[int], seed64: Optional[int] = None) -> XorShiftRNG:
    """Build a generator from 1-3 seed words, or from a 64-bit seed when given."""
    if seed64 is not None:
        return XorShiftRNG.from_seed_64(seed64)
    if not seed_words:
        raise ValueError("At least one seed word is required")
    return XorShiftRNG.from_seed_words(*seed_words)
