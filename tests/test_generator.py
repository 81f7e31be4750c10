"""Tests for XorShiftRNG seeding, raw bits and derived values."""

import sys
import threading
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from xorshift_rng.generator import INITIAL_STATE, RangeInversionError, XorShiftRNG


# First five raw words for seed 12345, from initial state
# (12345, 3579545447, 340436397, 842436295).
GOLDEN_12345 = [867627328, 987703534, 2079950293, 4248796379, 2038935245]


class CountingRNG(XorShiftRNG):
    """Counts raw-word calls so consumption can be asserted."""

    def __post_init__(self, seed):
        self.calls = 0
        super().__post_init__(seed)

    def next_random_bits(self):
        self.calls += 1
        return super().next_random_bits()


class TestRawBits:
    def test_golden_vector(self):
        rng = XorShiftRNG(12345)
        assert [rng.next_random_bits() for _ in range(5)] == GOLDEN_12345

    def test_seed_zero_first_words(self):
        rng = XorShiftRNG(0)
        assert [rng.next_random_bits() for _ in range(3)] == [842434689, 996102431, 2054814740]

    def test_same_seed_same_sequence(self):
        lhs = XorShiftRNG(987654321)
        rhs = XorShiftRNG(987654321)
        assert [lhs.next_random_bits() for _ in range(1000)] == [
            rhs.next_random_bits() for _ in range(1000)
        ]

    def test_words_stay_within_32_bits(self):
        rng = XorShiftRNG(-1)
        for _ in range(1000):
            assert 0 <= rng.next_random_bits() <= 0xFFFFFFFF

    def test_state_shifts_down_each_step(self):
        rng = XorShiftRNG(12345)
        word = rng.next_random_bits()
        assert rng.state == (INITIAL_STATE[1], INITIAL_STATE[2], INITIAL_STATE[3], word)


class TestSeeding:
    def test_single_word_fills_defaults(self):
        rng = XorShiftRNG(7)
        assert rng.state == (7, 3579545447, 340436397, 842436295)

    def test_two_words_fill_defaults(self):
        rng = XorShiftRNG(0)
        rng.set_seed(1, 2)
        assert rng.state == (1, 2, 340436397, 842436295)

    def test_three_words_fill_defaults(self):
        rng = XorShiftRNG(0)
        rng.set_seed(1, 2, 3)
        assert rng.state == (1, 2, 3, 842436295)

    def test_reseed_replaces_previous_state(self):
        rng = XorShiftRNG(0)
        rng.set_seed(1, 2, 3)
        rng.set_seed(9)
        assert rng.state == (9, 3579545447, 340436397, 842436295)

    def test_reseed_restarts_sequence(self):
        rng = XorShiftRNG(12345)
        for _ in range(10):
            rng.next_random_bits()
        rng.set_seed(12345)
        assert rng.next_random_bits() == GOLDEN_12345[0]

    def test_negative_seed_is_reinterpreted(self):
        rng = XorShiftRNG(-1)
        assert rng.state[0] == 0xFFFFFFFF

    def test_seed_64_splits_low_and_high(self):
        rng = XorShiftRNG(0)
        rng.set_seed_64((5 << 32) | 17)
        assert rng.state == (17, 5, 340436397, 842436295)

    def test_seed_64_negative_keeps_sign_in_high_word(self):
        rng = XorShiftRNG(0)
        rng.set_seed_64(-2)
        assert rng.state[:2] == (0xFFFFFFFE, 0xFFFFFFFF)

    @pytest.mark.parametrize("words", [(), (1, 2, 3, 4)])
    def test_unsupported_arity(self, words):
        rng = XorShiftRNG(0)
        with pytest.raises(TypeError):
            rng.set_seed(*words)

    def test_from_seed_words(self):
        assert XorShiftRNG.from_seed_words(1, 2).state == (1, 2, 340436397, 842436295)

    def test_from_seed_64(self):
        assert XorShiftRNG.from_seed_64((5 << 32) | 17).state == (17, 5, 340436397, 842436295)

    def test_repr_does_not_report_stale_seed(self):
        rng = XorShiftRNG(5)
        rng.set_seed(9)
        assert "5" not in repr(rng)
        assert repr(rng) == repr(XorShiftRNG())

    def test_seed_is_not_stored(self):
        rng = XorShiftRNG(5)
        assert "seed" not in vars(rng)


class TestImplicitSeed:
    def test_back_to_back_instances_differ(self):
        first = XorShiftRNG()
        second = XorShiftRNG()
        assert first.state != second.state

    def test_implicit_seed_keeps_default_tail(self):
        rng = XorShiftRNG()
        assert rng.state[2:] == INITIAL_STATE[2:]

    def test_concurrent_construction_gives_distinct_states(self):
        states = []
        lock = threading.Lock()

        def build():
            for _ in range(50):
                rng = XorShiftRNG()
                with lock:
                    states.append(rng.state)

        threads = [threading.Thread(target=build) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(set(states)) == len(states)


class TestDerivedValues:
    def test_next_int_clears_sign_bit(self):
        rng = XorShiftRNG(12345)
        assert [rng.next_int() for _ in range(5)] == [w & 0x7FFFFFFF for w in GOLDEN_12345]

    def test_next_int_max_matches_formula(self):
        rng = XorShiftRNG(12345)
        twin = XorShiftRNG(12345)
        for _ in range(100):
            expected = int((twin.next_int() / 2 ** 31) * 1000)
            assert rng.next_int(1000) == expected

    def test_next_int_bounds(self):
        rng = XorShiftRNG(42)
        for _ in range(10000):
            assert 0 <= rng.next_int(17) < 17

    def test_next_int_zero_max(self):
        rng = XorShiftRNG(42)
        assert all(rng.next_int(0) == 0 for _ in range(100))

    @pytest.mark.parametrize(
        "low, high",
        [(0, 10), (-50, 50), (5, 6), (-2 ** 31, 2 ** 31 - 1), (0, 2 ** 32 - 1)],
    )
    def test_range_int_bounds(self, low, high):
        rng = XorShiftRNG(2024)
        for _ in range(10000):
            assert low <= rng.range_int(low, high) < high

    def test_range_int_empty_span_returns_min(self):
        rng = XorShiftRNG(1)
        assert rng.range_int(3, 3) == 3

    def test_range_int_uses_unsigned_bits(self):
        rng = XorShiftRNG(12345)
        for word in GOLDEN_12345:
            assert rng.range_int(0, 1000) == int(word / 2 ** 32 * 1000)

    def test_next_double_range(self):
        rng = XorShiftRNG(99)
        for _ in range(10000):
            assert 0.0 <= rng.next_double() < 1.0

    def test_next_double_first_value(self):
        rng = XorShiftRNG(12345)
        assert rng.next_double() == (GOLDEN_12345[0] & 0x7FFFFFFF) / 2 ** 31

    def test_range_float_bounds(self):
        rng = XorShiftRNG(99)
        for _ in range(10000):
            assert -2.5 <= rng.range_float(-2.5, 7.5) < 7.5

    def test_range_dispatches_on_type(self):
        rng = XorShiftRNG(12345)
        twin = XorShiftRNG(12345)
        value = rng.range(0, 10)
        assert isinstance(value, int)
        assert value == twin.range_int(0, 10)
        assert rng.range(0.0, 10) == twin.range_float(0.0, 10)

    def test_random_alias(self):
        rng = XorShiftRNG(5)
        twin = XorShiftRNG(5)
        assert rng.random() == twin.next_double()

    def test_next_bool_parity(self):
        rng = XorShiftRNG(31337)
        twin = XorShiftRNG(31337)
        for _ in range(1000):
            assert rng.next_bool() == ((twin.next_random_bits() & 1) == 0)

    def test_first_bool_for_even_word(self):
        assert XorShiftRNG(12345).next_bool() is True


class TestRangeErrors:
    def test_range_int_inverted(self):
        with pytest.raises(RangeInversionError) as excinfo:
            XorShiftRNG(1).range_int(5, 3)
        assert excinfo.value.param_name == "min_value"
        assert excinfo.value.value == 5

    def test_range_float_inverted(self):
        with pytest.raises(RangeInversionError):
            XorShiftRNG(1).range_float(5.0, 3.0)

    def test_next_int_negative_max(self):
        with pytest.raises(RangeInversionError) as excinfo:
            XorShiftRNG(1).next_int(-1)
        assert excinfo.value.param_name == "max_value"
        assert excinfo.value.value == -1

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            XorShiftRNG(1).range(5, 3)


class TestBytes:
    def test_six_bytes_match_word_decomposition(self):
        rng = XorShiftRNG(12345)
        buffer = bytearray(6)
        rng.next_bytes(buffer)
        assert bytes(buffer) == bytes([0x40, 0xF1, 0xB6, 0x33, 0xEE, 0x28])

    def test_partial_tail_uses_low_bytes(self):
        rng = XorShiftRNG(12345)
        twin = XorShiftRNG(12345)
        buffer = bytearray(6)
        rng.next_bytes(buffer)
        first, second = twin.next_random_bits(), twin.next_random_bits()
        assert bytes(buffer) == first.to_bytes(4, "little") + second.to_bytes(4, "little")[:2]

    @pytest.mark.parametrize("length, calls", [(0, 0), (1, 1), (3, 1), (4, 1), (5, 2), (8, 2), (9, 3)])
    def test_words_consumed(self, length, calls):
        rng = CountingRNG(12345)
        rng.next_bytes(bytearray(length))
        assert rng.calls == calls

    def test_fills_memoryview(self):
        rng = XorShiftRNG(12345)
        backing = bytearray(8)
        rng.next_bytes(memoryview(backing)[2:6])
        assert backing == bytearray([0, 0, 0x40, 0xF1, 0xB6, 0x33, 0, 0])

    def test_random_bytes(self):
        assert XorShiftRNG(12345).random_bytes(5) == bytes([0x40, 0xF1, 0xB6, 0x33, 0xEE])

    def test_random_bytes_negative_count(self):
        with pytest.raises(RangeInversionError):
            XorShiftRNG(1).random_bytes(-1)
