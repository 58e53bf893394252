import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.analysis import (
    biggest_index,
    cheapest_index,
    is_above_median,
    move_cost,
    smallest_index,
    target_index,
)

INT_MAX = 2**31 - 1

unique_ints = st.lists(
    st.integers(min_value=-(2**31), max_value=INT_MAX), unique=True, min_size=1, max_size=15
)


@given(st.integers(min_value=0, max_value=1000))
def test_median_boundary(size):
    assert is_above_median(size // 2, size)
    assert not is_above_median(size // 2 + 1, size)


def test_smallest_and_biggest():
    values = [4, -3, 9, 2]
    assert values[smallest_index(values)] == -3
    assert values[biggest_index(values)] == 9


def test_empty_stacks_give_none():
    assert smallest_index([]) is None
    assert biggest_index([]) is None
    assert target_index([], 5) is None
    assert cheapest_index([1, 2], []) is None


def test_first_occurrence_wins():
    values = [5, 1, 1, 5]
    assert smallest_index(values) == values.index(1)
    assert biggest_index(values) == values.index(5)


def test_target_is_next_bigger():
    a = [1, 5, 9]
    assert a[target_index(a, 4)] == 5
    assert a[target_index(a, 0)] == 1


def test_target_wraps_to_smallest():
    a = [1, 5, 9]
    assert a[target_index(a, 10)] == 1


def test_int_max_is_never_a_target():
    a = [INT_MAX, 3]
    assert a[target_index(a, 5)] == 3


def test_worked_example_costs():
    a = [1, 5, 9]
    b = [4, 10, 0]
    assert move_cost(a, b, 0) == 1
    assert cheapest_index(a, b) == 0


def test_cost_counts_reverse_rotations():
    a = [1, 2, 3, 4, 5, 6, 8, 9]
    assert move_cost(a, [7], 0) == 2


def test_move_cost_requires_stack_a():
    with pytest.raises(ValueError):
        move_cost([], [1], 0)


@given(unique_ints, st.integers(min_value=-(2**31), max_value=INT_MAX))
def test_target_invariant(a, value):
    t = target_index(a, value)
    bigger = [x for x in a if value < x < INT_MAX]
    if bigger:
        assert value < a[t]
        assert not any(value < x < a[t] for x in a)
    else:
        assert a[t] == min(a)


@given(unique_ints, unique_ints)
def test_cheapest_is_minimal(a, b):
    c = cheapest_index(a, b)
    costs = [move_cost(a, b, i) for i in range(len(b))]
    assert costs[c] == min(costs)
    assert all(cost > costs[c] for cost in costs[:c])
    assert all(0 <= cost <= len(a) + len(b) for cost in costs)