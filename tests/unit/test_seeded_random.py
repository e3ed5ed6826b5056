"""
Tests for seeded index derivation (src/outfind/seeded_random.py).

Covers:
- fnv1a_32: published FNV-1a vectors, UTF-16 code unit hashing
- Mulberry32: range, determinism
- derive_index: range, determinism, spread, guard on empty populations

Run with: pytest tests/unit/test_seeded_random.py -v
"""

import pytest

from outfind.seeded_random import (
    FNV_OFFSET_BASIS,
    FNV_PRIME,
    Mulberry32,
    derive_index,
    fnv1a_32,
)


def _fold(units):
    h = FNV_OFFSET_BASIS
    for unit in units:
        h = ((h ^ unit) * FNV_PRIME) & 0xFFFFFFFF
    return h


class TestFnv1a:
    def test_empty_string_is_offset_basis(self):
        assert fnv1a_32("") == 2166136261

    def test_published_vectors(self):
        assert fnv1a_32("a") == 0xE40C292C
        assert fnv1a_32("foobar") == 0xBF9CF968

    def test_non_ascii_hashes_code_units(self):
        assert fnv1a_32("é") == _fold([0xE9])

    def test_astral_char_hashes_surrogate_pair(self):
        """Characters outside the BMP hash as two UTF-16 code units."""
        assert fnv1a_32("\U0001F600") == _fold([0xD83D, 0xDE00])

    def test_result_is_unsigned_32_bit(self):
        for key in ("ist|rainy|0|top", "x" * 500, "Şehir|cold|12|shoes"):
            assert 0 <= fnv1a_32(key) <= 0xFFFFFFFF


class TestMulberry32:
    def test_samples_in_unit_interval(self):
        rng = Mulberry32(12345)
        for _ in range(1000):
            value = rng.next_float()
            assert 0.0 <= value < 1.0

    def test_same_seed_same_sequence(self):
        a = Mulberry32(42)
        b = Mulberry32(42)
        assert [a.next_uint32() for _ in range(10)] == [b.next_uint32() for _ in range(10)]

    def test_different_seeds_differ(self):
        assert Mulberry32(1).next_uint32() != Mulberry32(2).next_uint32()

    def test_seed_is_masked_to_32_bits(self):
        assert Mulberry32(2 ** 32 + 7).next_uint32() == Mulberry32(7).next_uint32()

    @pytest.mark.parametrize("key, expected", [
        ("ist|rainy|0|top", 0.9046293757855892),
        ("ist|mild|3|shoes", 0.4858716200105846),
    ])
    def test_first_draw_matches_javascript_reference(self, key, expected):
        """First draw equals the JavaScript hashString + mulberry32 output."""
        assert Mulberry32(fnv1a_32(key)).next_float() == expected


class TestDeriveIndex:
    @pytest.mark.parametrize("key, size, expected", [
        ("ist|rainy|0|top", 7, 6),
        ("ist|mild|3|shoes", 7, 3),
    ])
    def test_matches_javascript_reference(self, key, size, expected):
        assert derive_index(key, size) == expected

    def test_in_range(self):
        for size in (1, 2, 3, 7, 50, 1000):
            for n in range(50):
                idx = derive_index(f"loc|mild|{n}|top", size)
                assert 0 <= idx < size

    def test_deterministic(self):
        assert derive_index("ist|rainy|3|bottom", 9) == derive_index("ist|rainy|3|bottom", 9)

    def test_single_item_population(self):
        assert derive_index("anything", 1) == 0

    def test_spreads_over_population(self):
        counts = [0] * 4
        for n in range(1000):
            counts[derive_index(f"city-{n}|cold|0|outer", 4)] += 1
        assert all(c > 150 for c in counts), counts

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_population_rejected(self, size):
        with pytest.raises(ValueError):
            derive_index("key", size)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
