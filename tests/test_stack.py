import pytest

from ftkit.stack import Stacks, find_max, find_min, index_values, is_sorted


def test_initial_state():
    s = Stacks([3, 1, 2])
    assert s.a == [3, 1, 2]
    assert s.b == []
    assert s.operations == []


def test_items_carry_ranks():
    s = Stacks([30, 10, 20])
    assert [item.index for item in s.a_items] == index_values([30, 10, 20])
    assert [item.value for item in s.a_items] == [30, 10, 20]


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.sa()
    assert s.a == [2, 1, 3]
    assert s.operations == ["sa"]


def test_sa_on_single_item_is_logged_but_no_change():
    s = Stacks([7])
    s.sa()
    assert s.a == [7]
    assert s.operations == ["sa"]


def test_pb_then_pa_restores():
    s = Stacks([4, 5, 6])
    s.pb()
    assert s.a == [5, 6]
    assert s.b == [4]
    s.pa()
    assert s.a == [4, 5, 6]
    assert s.b == []
    assert s.operations == ["pb", "pa"]


def test_pa_from_empty_b_changes_nothing():
    s = Stacks([1, 2])
    s.pa()
    assert s.a == [1, 2]
    assert s.operations == ["pa"]


def test_ra_moves_top_to_bottom():
    s = Stacks([1, 2, 3])
    s.ra()
    assert s.a == [2, 3, 1]


def test_rra_moves_bottom_to_top():
    s = Stacks([1, 2, 3])
    s.rra()
    assert s.a == [3, 1, 2]


@pytest.mark.parametrize("values", [[1], [1, 2], [5, 3, 9, 1]])
def test_ra_and_rra_are_inverse(values):
    s = Stacks(values)
    s.ra()
    s.rra()
    assert s.a == values


def test_double_operations_act_on_both():
    s = Stacks([1, 2, 3, 4])
    s.pb()
    s.pb()
    assert s.b == [2, 1]
    s.ss()
    assert s.a == [4, 3]
    assert s.b == [1, 2]
    s.rr()
    assert s.a == [3, 4]
    assert s.b == [2, 1]
    s.rrr()
    assert s.a == [4, 3]
    assert s.b == [1, 2]
    assert s.operations == ["pb", "pb", "ss", "rr", "rrr"]


def test_b_only_operations():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    s.pb()
    assert s.b == [3, 2, 1]
    s.sb()
    assert s.b == [2, 3, 1]
    s.rb()
    assert s.b == [3, 1, 2]
    s.rrb()
    assert s.b == [2, 3, 1]
    assert s.a == []


def test_is_sorted():
    assert is_sorted([1, 2, 2, 3])
    assert is_sorted([])
    assert not is_sorted([2, 1])


def test_find_min_and_max():
    assert find_min([4, -2, 9]) == -2
    assert find_max([4, -2, 9]) == 9
    assert find_min([]) == 0
    assert find_max([]) == 0


def test_index_values_permutation_is_identity():
    perm = [3, 0, 2, 1]
    assert index_values(perm) == perm


def test_index_values_ranks_cover_range():
    values = [100, -7, 42, 0, 13]
    ranks = index_values(values)
    assert sorted(ranks) == list(range(len(values)))
    ordered = [v for _, v in sorted(zip(ranks, values))]
    assert ordered == sorted(values)