from hypothesis import given, strategies as st

from algosuite.connectivity import (
    UnionFind,
    contains_cycle,
    has_valid_path,
    minimum_hamming_distance,
)


def test_union_find_merges_once():
    sets = UnionFind(5)
    assert sets.union(0, 1) is True
    assert sets.union(1, 0) is False
    assert sets.find(0) == sets.find(1)
    assert sets.find(2) != sets.find(0)


@given(st.lists(st.tuples(st.integers(0, 19), st.integers(0, 19)), max_size=40))
def test_union_find_connects_pairs(pairs):
    sets = UnionFind(20)
    for a, b in pairs:
        sets.union(a, b)
    for a, b in pairs:
        assert sets.find(a) == sets.find(b)


def test_hamming_example():
    assert minimum_hamming_distance([1, 2, 3, 4], [2, 1, 4, 5], [[0, 1], [2, 3]]) == 1


@given(st.lists(st.integers(0, 5), min_size=1, max_size=20), st.data())
def test_hamming_without_swaps_counts_mismatches(source, data):
    target = data.draw(st.lists(st.integers(0, 5), min_size=len(source), max_size=len(source)))
    expected = sum(a != b for a, b in zip(source, target))
    assert minimum_hamming_distance(source, target, []) == expected


@given(st.lists(st.integers(0, 5), min_size=2, max_size=20), st.randoms())
def test_hamming_fully_connected_permutation_is_zero(source, rng):
    target = list(source)
    rng.shuffle(target)
    swaps = [[i, i + 1] for i in range(len(source) - 1)]
    assert minimum_hamming_distance(source, target, swaps) == 0


def test_cycle_found_in_ring():
    assert contains_cycle(["aaaa", "abba", "abba", "aaaa"]) is True


@given(st.integers(2, 6), st.integers(2, 6))
def test_uniform_grid_has_cycle(rows, cols):
    assert contains_cycle(["z" * cols] * rows) is True


@given(st.text(alphabet="ab", min_size=1, max_size=15))
def test_single_row_has_no_cycle(row):
    assert contains_cycle([row]) is False


@given(st.integers(1, 6))
def test_single_cell_always_valid(street):
    assert has_valid_path([[street]]) is True


@given(st.integers(1, 10))
def test_straight_horizontal_street(length):
    assert has_valid_path([[1] * length]) is True


def test_street_blocked_path():
    assert has_valid_path([[1, 2, 1], [1, 2, 1]]) is False


def test_street_winding_path():
    assert has_valid_path([[2, 4, 3], [6, 5, 2]]) is True