"""Marsaglia xorshift generator with seedable state and derived distributions.

See https://www.jstatsoft.org/article/view/v008i14/xorshift.pdf for the algorithm.
Not suitable for cryptography, and a single instance must not be shared between
threads without external locking.
"""

from __future__ import annotations

import itertools
import logging
import threading
import time
from dataclasses import InitVar, dataclass
from typing import List, Optional, Tuple, Union


logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF
POSITIVE_INTEGER_BITMASK = 0x7FFFFFFF  # sign bit cleared

# Multiplying by these maps a raw integer into [0, 1).
MAX_INT_DIVISION_EXCLUSIVE = 1.0 / (float(POSITIVE_INTEGER_BITMASK) + 1.0)
MAX_UINT_DIVISION_EXCLUSIVE = 1.0 / (float(UINT32_MAX) + 1.0)

INITIAL_STATE: Tuple[int, int, int, int] = (0, 3579545447, 340436397, 842436295)
LAST_INDEX = len(INITIAL_STATE) - 1

Buffer = Union[bytearray, memoryview]


class RangeInversionError(ValueError):
    """Raised when a bound argument violates the ordering an operation requires."""

    def __init__(self, param_name: str, value: Union[int, float], rule: str) -> None:
        self.param_name = param_name
        self.value = value
        super().__init__(f"{rule} ({param_name}={value!r})")


@dataclass(eq=False)
class XorShiftRNG:
    """Four-word xorshift generator; pass ``seed`` for a reproducible sequence.

    ``seed`` is only the construction argument; ``state`` is the live source of truth.
    """

    seed: InitVar[Optional[int]] = None

    _uniquifier = itertools.count()
    _uniquifier_lock = threading.Lock()

    def __post_init__(self, seed: Optional[int]) -> None:
        self._state: List[int] = list(INITIAL_STATE)
        if seed is None:
            self.set_seed_64(self._implicit_seed())
        else:
            self.set_seed(seed)

    @classmethod
    def _unseeded(cls) -> XorShiftRNG:
        rng = cls.__new__(cls)
        rng._state = list(INITIAL_STATE)
        return rng

    @classmethod
    def from_seed_words(cls, *seeds: int) -> XorShiftRNG:
        """Build a generator seeded once with 1-3 words."""
        rng = cls._unseeded()
        rng.set_seed(*seeds)
        return rng

    @classmethod
    def from_seed_64(cls, seed: int) -> XorShiftRNG:
        """Build a generator seeded once with a 64-bit seed."""
        rng = cls._unseeded()
        rng.set_seed_64(seed)
        return rng

    @classmethod
    def _implicit_seed(cls) -> int:
        # Tick and counter are read together so derived seeds strictly increase.
        with cls._uniquifier_lock:
            return int(time.monotonic() * 1000.0) + next(cls._uniquifier)

    @property
    def state(self) -> Tuple[int, ...]:
        return tuple(self._state)

    # Seeding --------------------------------------------------------------

    def set_seed(self, *seeds: int) -> None:
        """Overwrite state[0..len(seeds)) with the given words and reset the rest.

        Each word is reinterpreted as an unsigned 32-bit pattern, so negative
        values are accepted.
        """
        if not 1 <= len(seeds) <= LAST_INDEX:
            raise TypeError(
                f"set_seed() takes 1 to {LAST_INDEX} seed words ({len(seeds)} given)"
            )
        for i, seed in enumerate(seeds):
            self._state[i] = seed & UINT32_MAX
        for i in range(len(seeds), len(self._state)):
            self._state[i] = INITIAL_STATE[i]
        logger.debug("Seeded %d word(s); state=%s", len(seeds), self._state)

    def set_seed_64(self, seed: int) -> None:
        """Split a 64-bit seed into its low and high words and seed with both."""
        seed &= UINT64_MAX
        self.set_seed(seed & UINT32_MAX, seed >> 32)

    # Raw bits -------------------------------------------------------------

    def next_random_bits(self) -> int:
        """Advance the state once and return the new 32-bit output word."""
        state = self._state
        tmp = (state[0] ^ (state[0] << 11)) & UINT32_MAX
        for i in range(LAST_INDEX):
            state[i] = state[i + 1]
        last = state[LAST_INDEX]
        state[LAST_INDEX] = (last ^ (last >> 19)) ^ (tmp ^ (tmp >> 8))
        return state[LAST_INDEX]

    # Derived values -------------------------------------------------------

    def next_int(self, max_value: Optional[int] = None) -> int:
        """Return an int in [0, 2**31 - 1], or in [0, max_value) when a bound is given."""
        value = POSITIVE_INTEGER_BITMASK & self.next_random_bits()
        if max_value is None:
            return value
        if max_value < 0:
            raise RangeInversionError(
                "max_value", max_value, "'max_value' must not be smaller than 0"
            )
        return int((MAX_INT_DIVISION_EXCLUSIVE * value) * max_value)

    def range_int(self, min_value: int, max_value: int) -> int:
        """Return an int in [min_value, max_value)."""
        if min_value > max_value:
            raise RangeInversionError(
                "min_value", min_value, "'min_value' must not be larger than 'max_value'"
            )
        fraction = MAX_UINT_DIVISION_EXCLUSIVE * float(self.next_random_bits())
        return min_value + int(fraction * float(max_value - min_value))

    def next_double(self) -> float:
        """Return a float in [0.0, 1.0)."""
        return MAX_INT_DIVISION_EXCLUSIVE * (POSITIVE_INTEGER_BITMASK & self.next_random_bits())

    def range_float(self, min_value: float, max_value: float) -> float:
        """Return a float in [min_value, max_value)."""
        if min_value > max_value:
            raise RangeInversionError(
                "min_value", min_value, "'min_value' must not be larger than 'max_value'"
            )
        fraction = MAX_UINT_DIVISION_EXCLUSIVE * float(self.next_random_bits())
        return min_value + fraction * (max_value - min_value)

    def range(self, min_value: Union[int, float], max_value: Union[int, float]) -> Union[int, float]:
        """Dispatch to range_int for two ints, range_float otherwise."""
        if isinstance(min_value, int) and isinstance(max_value, int):
            return self.range_int(min_value, max_value)
        return self.range_float(min_value, max_value)

    def next_bytes(self, buffer: Buffer) -> None:
        """Fill ``buffer`` in place with little-endian bytes of successive raw words."""
        length = len(buffer)
        i = 0
        while i < length - 3:
            buffer[i:i + 4] = self.next_random_bits().to_bytes(4, "little")
            i += 4
        if i < length:
            # One more word; its unused high bytes are dropped.
            buffer[i:length] = self.next_random_bits().to_bytes(4, "little")[:length - i]

    def random_bytes(self, count: int) -> bytes:
        if count < 0:
            raise RangeInversionError("count", count, "'count' must not be smaller than 0")
        buffer = bytearray(count)
        self.next_bytes(buffer)
        return bytes(buffer)

    def next_bool(self) -> bool:
        """Return True when the lowest raw bit is 0."""
        return (self.next_random_bits() & 0x1) == 0

    def random(self) -> float:
        """Math.random-like alias of next_double."""
        return self.next_double()
