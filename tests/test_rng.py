from sprd.board import RandomSource

from board_test_utils import BrokenSource


def test_seeded_source_is_reproducible():
    a = RandomSource(seed=99)
    b = RandomSource(seed=99)
    assert [a.randrange(50) for _ in range(20)] == [b.randrange(50) for _ in range(20)]
    assert [a.chance(40) for _ in range(20)] == [b.chance(40) for _ in range(20)]


def test_chance_extremes():
    src = RandomSource(seed=3)
    assert not any(src.chance(0) for _ in range(200))
    assert all(src.chance(100) for _ in range(200))


def test_randrange_empty_range():
    assert RandomSource(seed=1).randrange(0) is None


def test_unseeded_source_uses_system_entropy():
    src = RandomSource()
    assert src.seed is None
    assert 0 <= src.randrange(10) < 10


def test_failing_source_degrades_to_least_favorable():
    src = BrokenSource()
    assert src.chance(100) is False
    assert src.randrange(10) is None
    assert src.choice([4, 5, 6]) == 4
    assert src.failures == 3
