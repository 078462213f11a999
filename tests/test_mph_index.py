import random

import pytest

from mphmap.mph_index import FlexibleMPHIndex, IndexFlavor, MPHIndex, MPHIndexError

NAMES = ["davi", "paulo", "joao", "maria", "bruno", "paula", "diego", "diogo", "algume"]


def test_names_map_to_a_permutation():
    index = MPHIndex(rng=random.Random(1))
    index.reset(NAMES)
    ids = sorted(index.index(name) for name in NAMES)
    assert ids == list(range(len(NAMES)))
    assert len(index) == len(NAMES)
    assert index.minimal_perfect_hash_size() == len(NAMES)


@pytest.mark.parametrize("flavor", list(IndexFlavor))
def test_empty_flexible_indexes_return_zero(flavor):
    index = FlexibleMPHIndex(flavor)
    assert index.index(1) == 0
    assert len(index) == 0


def test_many_integer_keys_minimal():
    keys = list(range(1000))
    index = MPHIndex(rng=random.Random(7))
    index.reset(keys)
    assert sorted(index.index(k) for k in keys) == keys


def test_perfect_hash_is_injective_within_range():
    keys = [f"key{i}" for i in range(500)]
    index = FlexibleMPHIndex(IndexFlavor.PERFECT, rng=random.Random(3))
    index.reset(keys)
    values = [index.index(k) for k in keys]
    assert len(set(values)) == len(keys)
    assert all(0 <= v < len(index) for v in values)
    assert len(index) == index.perfect_hash_size()


def test_square_flavor_is_injective_and_power_of_two_sized():
    keys = list(range(300))
    index = FlexibleMPHIndex(IndexFlavor.SQUARE, rng=random.Random(11))
    index.reset(keys)
    values = [index.index(k) for k in keys]
    assert len(set(values)) == len(keys)
    assert all(0 <= v < len(index) for v in values)
    r = index.perfect_hash_size() // 3
    assert index.perfect_hash_size() % 3 == 0
    assert r & (r - 1) == 0


def test_graph_sizes_follow_density():
    keys = list(range(10))
    plain = MPHIndex(rng=random.Random(2))
    plain.reset(keys)
    assert plain.perfect_hash_size() == 15
    square = MPHIndex(square=True, rng=random.Random(2))
    square.reset(keys)
    assert square.perfect_hash_size() == 24


def test_same_seed_gives_same_function():
    first = MPHIndex(rng=random.Random(5))
    second = MPHIndex(rng=random.Random(5))
    first.reset(NAMES)
    second.reset(NAMES)
    assert [first.index(n) for n in NAMES] == [second.index(n) for n in NAMES]


def test_repeated_keys_are_rejected():
    with pytest.raises(MPHIndexError):
        MPHIndex().reset(["a", "b", "a"])


def test_impossible_density_fails():
    index = MPHIndex(c=0.3, rng=random.Random(1))
    with pytest.raises(MPHIndexError):
        index.reset(list(range(30)))


def test_reset_with_no_keys_clears():
    index = MPHIndex(rng=random.Random(1))
    index.reset(NAMES)
    index.reset([])
    assert len(index) == 0
    assert index.index("davi") == 0


def test_clear_forgets_keys():
    index = MPHIndex(rng=random.Random(1))
    index.reset(NAMES)
    index.clear()
    assert len(index) == 0
    assert index.perfect_hash_size() == 0
    assert index.minimal_perfect_hash("maria") == 0


def test_single_key():
    index = MPHIndex(rng=random.Random(4))
    index.reset(["only"])
    assert index.index("only") == 0
    assert len(index) == 1


def test_minimal_flavor_length_is_key_count():
    index = FlexibleMPHIndex(IndexFlavor.MINIMAL, rng=random.Random(9))
    index.reset(NAMES)
    assert len(index) == len(NAMES)
    assert sorted(index.index(n) for n in NAMES) == list(range(len(NAMES)))