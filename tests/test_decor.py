"""Tests for legibility_checker.core.decor: seeded decorative placement."""

from legibility_checker.core.decor import decor_positions, seed_for


class TestDecorPositions:
    def test_same_key_same_positions(self):
        assert decor_positions('carousel-1-slide-2', 5) == decor_positions('carousel-1-slide-2', 5)

    def test_different_keys_differ(self):
        assert decor_positions('slide-a', 5) != decor_positions('slide-b', 5)

    def test_within_bounds(self):
        for x, y, rotation in decor_positions('bounds', 50, width=1080, height=540):
            assert 0 <= x <= 1080
            assert 0 <= y <= 540
            assert 0 <= rotation <= 360

    def test_count(self):
        assert len(decor_positions('k', 7)) == 7

    def test_zero_count(self):
        assert decor_positions('k', 0) == []

    def test_seed_is_stable(self):
        assert seed_for('abc') == seed_for('abc')
        assert seed_for('abc') != seed_for('abd')
