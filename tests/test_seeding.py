"""Tests for text seeds and seeded random draws (core/seeding.py)."""

import random

import pytest

from book_catalog.core.seeding import (
    seed_from_text,
    seeded_rng,
    seeded_uniform,
    to_int32,
)

# ─── to_int32 ──────────────────────────────────────────────────────────────


class TestToInt32:
    @pytest.mark.parametrize("value, expected", [
        (0, 0),
        (2**31 - 1, 2**31 - 1),
        (2**31, -(2**31)),
        (-(2**31), -(2**31)),
        (-(2**31) - 1, 2**31 - 1),
        (2**32, 0),
        (2**32 + 5, 5),
        (-1, -1),
    ])
    def test_wraparound(self, value, expected):
        assert to_int32(value) == expected


# ─── seed_from_text ────────────────────────────────────────────────────────


class TestSeedFromText:
    def test_empty_string(self):
        assert seed_from_text("") == 0

    def test_single_character(self):
        assert seed_from_text("a") == 97

    def test_two_characters(self):
        assert seed_from_text("ab") == 97 * 31 + 98

    def test_known_hash(self):
        assert seed_from_text("hello") == 99162322

    def test_overflow_lands_on_int32_min(self):
        assert seed_from_text("polygenelubricants") == -(2**31)

    def test_collision_pair(self):
        assert seed_from_text("Aa") == seed_from_text("BB") == 2112

    def test_astral_characters_use_utf16_code_units(self):
        # U+1F600 is the surrogate pair D83D DE00
        assert seed_from_text("\U0001F600") == 0xD83D * 31 + 0xDE00

    def test_deterministic(self):
        assert seed_from_text("Moby Dick") == seed_from_text("Moby Dick")

    @pytest.mark.parametrize("text", ["x", "War And Peace", "é" * 100, "A" * 1000])
    def test_always_in_int32_range(self, text):
        assert -(2**31) <= seed_from_text(text) < 2**31


# ─── seeded generator ──────────────────────────────────────────────────────


class TestSeededUniform:
    @pytest.mark.parametrize("seed", [0, 1, -1, 2112, -(2**31), 2**31 - 1])
    def test_in_unit_interval(self, seed):
        assert 0.0 <= seeded_uniform(seed) < 1.0

    def test_repeatable(self):
        assert seeded_uniform(12345) == seeded_uniform(12345)

    def test_is_first_draw_of_generator(self):
        assert seeded_uniform(42) == seeded_rng(42).random()

    def test_matches_stdlib_generator(self):
        assert seeded_uniform(99162322) == random.Random(99162322).random()

    def test_generator_sequence_repeatable(self):
        first = seeded_rng(7)
        second = seeded_rng(7)
        assert [first.random() for _ in range(5)] == [
            second.random() for _ in range(5)
        ]
