import pytest

from brandpalette.seeded_random import SeededRandom


def test_same_seed_same_sequence():
    a, b = SeededRandom(42), SeededRandom(42)
    assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]


def test_different_seeds_diverge():
    a, b = SeededRandom(1), SeededRandom(2)
    assert [a.next() for _ in range(10)] != [b.next() for _ in range(10)]


def test_next_stays_in_unit_interval():
    rng = SeededRandom(7)
    for _ in range(2000):
        x = rng.next()
        assert 0.0 <= x < 1.0


def test_seed_is_reduced_to_32_bits():
    a, b = SeededRandom(5), SeededRandom(2 ** 32 + 5)
    assert [a.next() for _ in range(5)] == [b.next() for _ in range(5)]


def test_next_int_is_inclusive_on_both_ends():
    rng = SeededRandom(123)
    draws = [rng.next_int(-30, 30) for _ in range(2000)]
    assert min(draws) >= -30 and max(draws) <= 30

    small = SeededRandom(99)
    seen = {small.next_int(0, 2) for _ in range(500)}
    assert seen == {0, 1, 2}


def test_next_float_range():
    rng = SeededRandom(3)
    for _ in range(500):
        x = rng.next_float(10.0, 20.0)
        assert 10.0 <= x < 20.0


def test_pick_empty_raises():
    with pytest.raises(ValueError):
        SeededRandom(0).pick([])


def test_pick_returns_member():
    rng = SeededRandom(11)
    items = ["a", "b", "c", "d"]
    for _ in range(50):
        assert rng.pick(items) in items


def test_shuffle_is_a_permutation_of_a_copy():
    items = list(range(10))
    original = list(items)
    shuffled = SeededRandom(5).shuffle(items)
    assert items == original
    assert sorted(shuffled) == original
    assert SeededRandom(5).shuffle(items) == shuffled
