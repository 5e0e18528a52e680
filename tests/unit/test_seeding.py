"""Tests for time-derived and derived seeds."""

from __future__ import annotations

from devtesting.core.seeding import REFERENCE_DATE, derive_seed, time_seed
from devtesting.core.types import UINT64_MAX


class TestTimeSeed:
    def test_reference_date_is_zero(self):
        assert time_seed(REFERENCE_DATE.timestamp()) == 0

    def test_is_float_bit_pattern(self):
        assert time_seed(REFERENCE_DATE.timestamp() + 1.0) == 0x3FF0_0000_0000_0000
        assert time_seed(REFERENCE_DATE.timestamp() - 2.0) == 0xC000_0000_0000_0000

    def test_current_time_fits_in_64_bits(self):
        assert 0 <= time_seed() <= UINT64_MAX


class TestDeriveSeed:
    def test_deterministic(self):
        assert derive_seed(42, 3) == derive_seed(42, 3)

    def test_indices_give_distinct_seeds(self):
        seeds = {derive_seed(42, i) for i in range(20)}
        assert len(seeds) == 20

    def test_parents_give_distinct_seeds(self):
        assert derive_seed(1, 0) != derive_seed(2, 0)

    def test_fits_in_64_bits(self):
        assert 0 <= derive_seed(UINT64_MAX, 7) <= UINT64_MAX
